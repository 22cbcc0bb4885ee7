"""
Raw token handle: segment framing and per-segment decoding.
"""

from __future__ import annotations

import re
from collections.abc import MutableMapping
from typing import Any, List, Optional, Sequence, Union

from pydantic import BaseModel, ValidationError

from .algorithm import Algorithm, Resolver, Validator
from .encoding import b64url_decode, json_object_decode
from .errors import MalformedTokenError, TokenDecodeError
from .header import Header

_DELIMITER = re.compile(rb"\.")


class RawToken:
    """A compact token split into its three segments.

    Segments are ``memoryview`` slices over the caller's buffer; nothing is
    copied or decoded until one of the ``decode_*`` methods runs. A handle is
    meant for a single parse or verify call and is not safe to share between
    threads.
    """

    __slots__ = ("_raw", "_sep1", "_sep2", "_alg", "_header", "_target", "_validators")

    def __init__(self, token: Union[bytes, bytearray, memoryview, str], alg: Optional[Algorithm] = None):
        if isinstance(token, str):
            token = token.encode("utf-8")
        raw = memoryview(token).cast("B").toreadonly()

        # re scans the buffer in place, memoryview has no find()
        first = _DELIMITER.search(raw)
        if first is None:
            raise MalformedTokenError("Token has no header delimiter")
        second = _DELIMITER.search(raw, first.end())
        if second is None:
            raise MalformedTokenError("Token has no claims delimiter")
        sep1, sep2 = first.start(), second.start()

        self._raw = raw
        self._sep1 = sep1
        self._sep2 = sep2
        self._alg = alg
        self._header: Optional[Header] = None
        self._target: Any = None
        self._validators: List[Validator] = []

    @property
    def raw(self) -> memoryview:
        return self._raw

    @property
    def sep1(self) -> int:
        """Offset of the first delimiter."""
        return self._sep1

    @property
    def sep2(self) -> int:
        """Absolute offset of the second delimiter."""
        return self._sep2

    @property
    def algorithm(self) -> Optional[Algorithm]:
        return self._alg

    @property
    def header(self) -> Optional[Header]:
        """Decoded header, or None until ``decode_header`` succeeds."""
        return self._header

    @property
    def header_segment(self) -> memoryview:
        return self._raw[:self._sep1]

    @property
    def claims_segment(self) -> memoryview:
        return self._raw[self._sep1 + 1:self._sep2]

    @property
    def signature_segment(self) -> memoryview:
        return self._raw[self._sep2 + 1:]

    @property
    def signing_input(self) -> memoryview:
        """The ``header.claims`` span the signature was computed over."""
        return self._raw[:self._sep2]

    @property
    def validators(self) -> Sequence[Validator]:
        return tuple(self._validators)

    def decode_header(self) -> Header:
        """Decode the header segment once; later calls return the same header."""
        if self._header is None:
            data = b64url_decode(self.header_segment, "header")
            try:
                self._header = Header.model_validate(json_object_decode(data, "header"))
            except ValidationError as exc:
                raise TokenDecodeError(
                    f"Could not decode header: {exc}",
                    details={"segment": "header"},
                ) from exc
        return self._header

    def resolve(self) -> None:
        """Let a resolving algorithm configure itself from the header."""
        if isinstance(self._alg, Resolver):
            self._alg.resolve(self.decode_header())

    def signature(self) -> bytes:
        """The base64url-decoded signature segment."""
        return b64url_decode(self.signature_segment, "signature")

    def attach_validators(self, target: Any, validators: Sequence[Validator]) -> None:
        """Queue validators to run once claims are decoded.

        A ``None`` target means the validators see the claims destination.
        """
        self._target = target
        self._validators = list(validators)

    def decode_claims(self, payload: Any = None) -> Any:
        """Decode the claims segment into ``payload`` and return the claims.

        ``payload`` may be a pydantic model instance (updated in place), a
        mutable mapping (merged with ``update``) or None (claims are returned
        as a dict and not stored anywhere else).
        """
        if payload is not None and not isinstance(payload, (BaseModel, MutableMapping)):
            raise TypeError(
                f"claims destination must be a pydantic model or a mutable mapping, "
                f"got {type(payload).__name__}"
            )

        data = b64url_decode(self.claims_segment, "claims")
        if isinstance(payload, BaseModel):
            try:
                decoded = type(payload).model_validate_json(data)
            except ValidationError as exc:
                raise TokenDecodeError(
                    f"Could not decode claims: {exc}",
                    details={"segment": "claims"},
                ) from exc
            _copy_model(decoded, payload)
            return payload

        claims = json_object_decode(data, "claims")
        if payload is None:
            return claims
        payload.update(claims)
        return payload

    def run_validators(self, claims: Any) -> None:
        """Run attached validators in order; the first failure propagates."""
        target = claims if self._target is None else self._target
        for validator in self._validators:
            validator.validate(target)

    def decode_token(self, payload: Any = None) -> Header:
        """Decode header and claims WITHOUT verifying the signature.

        Unsafe for untrusted input: no option, signature check or validator
        runs. Use it only for tokens already verified by other means, or for
        inspection outside any security boundary.
        """
        header = self.decode_header()
        self.resolve()
        self.decode_claims(payload)
        return header


def _copy_model(source: BaseModel, target: BaseModel) -> None:
    # Bypasses __setattr__ so frozen and validate_assignment models fill too
    target.__dict__.update(source.__dict__)
    object.__setattr__(target, "__pydantic_fields_set__", set(source.model_fields_set))
    object.__setattr__(target, "__pydantic_extra__", source.__pydantic_extra__)
