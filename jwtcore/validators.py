"""
Standard claim validators.

Each validator checks one registered claim and raises
``ClaimsValidationError`` with ``details["claim"]`` naming it. Validators
accept a ``Payload`` (or subclass) or a plain mapping of wire claims.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, List, Optional

from pydantic import ValidationError

from .config import VerifierSettings
from .errors import ClaimsValidationError
from .payload import Payload


def _as_payload(claims: Any) -> Payload:
    if isinstance(claims, Payload):
        return claims
    if isinstance(claims, Mapping):
        try:
            return Payload.model_validate(claims)
        except ValidationError as exc:
            raise ClaimsValidationError(f"Registered claims are invalid: {exc}") from exc
    raise ClaimsValidationError(
        f"Unsupported claims type: {type(claims).__name__}",
    )


def _timestamp(now: Optional[datetime]) -> float:
    if now is None:
        now = datetime.now(timezone.utc)
    return now.timestamp()


def _invalid(claim: str) -> ClaimsValidationError:
    return ClaimsValidationError(f'"{claim}" claim is invalid', details={"claim": claim})


@dataclass(frozen=True)
class IssuerValidator:
    issuer: str

    def validate(self, claims: Any) -> None:
        if _as_payload(claims).issuer != self.issuer:
            raise _invalid("iss")


@dataclass(frozen=True)
class SubjectValidator:
    subject: str

    def validate(self, claims: Any) -> None:
        if _as_payload(claims).subject != self.subject:
            raise _invalid("sub")


@dataclass(frozen=True)
class AudienceValidator:
    """Passes when the token names at least one of the expected audiences."""

    audience: List[str]

    def validate(self, claims: Any) -> None:
        if not set(self.audience) & set(_as_payload(claims).audience):
            raise _invalid("aud")


@dataclass(frozen=True)
class ExpirationTimeValidator:
    """Rejects tokens past "exp" (plus leeway), and tokens without one when required."""

    now: Optional[datetime] = None
    leeway: int = 0
    required: bool = True

    def validate(self, claims: Any) -> None:
        exp = _as_payload(claims).expiration_time
        if exp is None:
            if self.required:
                raise _invalid("exp")
            return
        if _timestamp(self.now) > exp + self.leeway:
            raise _invalid("exp")


@dataclass(frozen=True)
class NotBeforeValidator:
    now: Optional[datetime] = None
    leeway: int = 0

    def validate(self, claims: Any) -> None:
        nbf = _as_payload(claims).not_before
        if nbf is not None and _timestamp(self.now) < nbf - self.leeway:
            raise _invalid("nbf")


@dataclass(frozen=True)
class IssuedAtValidator:
    """Rejects tokens issued in the future."""

    now: Optional[datetime] = None
    leeway: int = 0

    def validate(self, claims: Any) -> None:
        iat = _as_payload(claims).issued_at
        if iat is not None and _timestamp(self.now) < iat - self.leeway:
            raise _invalid("iat")


@dataclass(frozen=True)
class IDValidator:
    jwt_id: str

    def validate(self, claims: Any) -> None:
        if _as_payload(claims).jwt_id != self.jwt_id:
            raise _invalid("jti")


def standard_validators(settings: VerifierSettings, now: Optional[datetime] = None) -> List[Any]:
    """Build the validator chain described by ``settings``.

    Time checks always run; issuer and audience checks only when configured.
    ``now`` pins the clock, mostly for tests.
    """
    validators: List[Any] = [
        ExpirationTimeValidator(now=now, leeway=settings.leeway, required=settings.require_expiration),
        NotBeforeValidator(now=now, leeway=settings.leeway),
        IssuedAtValidator(now=now, leeway=settings.leeway),
    ]
    if settings.issuer is not None:
        validators.append(IssuerValidator(settings.issuer))
    if settings.audience:
        validators.append(AudienceValidator(list(settings.audience)))
    return validators
