"""
Error types for token parsing and verification.
"""

from typing import Dict, Any, Optional
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response format."""

    code: str
    message: str
    details: Dict[str, Any] = {}


class TokenError(Exception):
    """Base exception for token parsing and verification.

    ``header`` holds the decoded JOSE header when the failure happened after
    the header segment was decoded, so callers can log which key or algorithm
    the token asked for.
    """

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        self.header = None
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(
            code=self.code,
            message=self.message,
            details=self.details
        )


class MalformedTokenError(TokenError):
    """Token is not three '.'-delimited segments."""

    def __init__(self, message: str = "Token is malformed", details: Optional[Dict[str, Any]] = None):
        super().__init__("MALFORMED_TOKEN", message, details)


class TokenDecodeError(TokenError):
    """A segment failed base64url or JSON decoding."""

    def __init__(self, message: str = "Token segment could not be decoded", details: Optional[Dict[str, Any]] = None):
        super().__init__("DECODE_ERROR", message, details)


class AlgorithmMismatchError(TokenError):
    """The header "alg" field does not match the verifying algorithm."""

    def __init__(self, message: str = '"alg" field mismatch', details: Optional[Dict[str, Any]] = None):
        super().__init__("ALG_MISMATCH", message, details)


class ResolveError(TokenError):
    """The algorithm could not resolve key material from the header."""

    def __init__(self, message: str = "Algorithm resolution failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("RESOLVE_ERROR", message, details)


class SignatureInvalidError(TokenError):
    """The signature does not match the signing input."""

    def __init__(self, message: str = "Signature is invalid", details: Optional[Dict[str, Any]] = None):
        super().__init__("SIGNATURE_INVALID", message, details)


class ClaimsValidationError(TokenError):
    """A claims validator rejected the decoded payload."""

    def __init__(self, message: str = "Claims validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("CLAIMS_INVALID", message, details)
