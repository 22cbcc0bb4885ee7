"""
Configuration management for jwtcore.
"""

from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class VerifierSettings(BaseSettings):
    """Settings for claim validation and logging."""

    model_config = SettingsConfigDict(
        env_prefix="JWTCORE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    log_level: str = Field(default="info")

    # Expected claims; None disables the check
    issuer: Optional[str] = Field(default=None)
    audience: Optional[List[str]] = Field(default=None)

    # Clock skew tolerated by the time-based validators, in seconds
    leeway: int = Field(default=0, ge=0)
    require_expiration: bool = Field(default=True)


def get_settings(**overrides) -> VerifierSettings:
    """Get verifier settings from the environment, applying overrides."""
    return VerifierSettings(**overrides)
