"""
Registered claim set (RFC 7519 section 4.1).
"""

from typing import Any, List, Optional, Union

from pydantic import BaseModel, Field, StrictInt, field_serializer, field_validator

# "aud" is either a single string or an array of strings on the wire
Audience = List[str]


class Payload(BaseModel):
    """Standard JWT claims.

    Only the registered wire names are read (``iss``, not ``issuer``) and
    time claims must be JSON integers.

    Subclass to add private claims::

        class SessionClaims(Payload):
            tenant_id: str = ""
    """

    issuer: Optional[str] = Field(default=None, alias="iss")
    subject: Optional[str] = Field(default=None, alias="sub")
    audience: Audience = Field(default_factory=list, alias="aud")
    expiration_time: Optional[StrictInt] = Field(default=None, alias="exp")
    not_before: Optional[StrictInt] = Field(default=None, alias="nbf")
    issued_at: Optional[StrictInt] = Field(default=None, alias="iat")
    jwt_id: Optional[str] = Field(default=None, alias="jti")

    @field_validator("audience", mode="before")
    @classmethod
    def _normalize_audience(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value

    @field_serializer("audience")
    def _serialize_audience(self, value: Audience) -> Union[str, List[str]]:
        if len(value) == 1:
            return value[0]
        return value

    def to_claims(self) -> dict:
        """Claims as they appear on the wire, empty values omitted."""
        claims = self.model_dump(by_alias=True, exclude_none=True)
        if not self.audience:
            claims.pop("aud", None)
        return claims
