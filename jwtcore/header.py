"""
JOSE header model.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Header(BaseModel):
    """Decoded JOSE header of a compact token.

    Unregistered parameters are kept as model extras and can be read with
    ``header.model_extra``.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    algorithm: str = Field(default="", alias="alg")
    type: Optional[str] = Field(default=None, alias="typ")
    content_type: Optional[str] = Field(default=None, alias="cty")
    key_id: Optional[str] = Field(default=None, alias="kid")
