"""
jwtcore: parse and verify compact JWS/JWT tokens.

Modules:

- raw_token: segment framing and per-segment decoding
- verify: verification pipeline and the standard options
- algorithm: Algorithm, Resolver and Validator protocols
- header / payload: decoded header and registered claims
- validators: standard claim validators
- errors: exception hierarchy
- config: settings via pydantic-settings
- logging: structured logging via structlog

Signing algorithms and key sets are supplied by the caller.
"""

from .algorithm import Algorithm, Resolver, Validator
from .errors import (
    AlgorithmMismatchError,
    ClaimsValidationError,
    ErrorResponse,
    MalformedTokenError,
    ResolveError,
    SignatureInvalidError,
    TokenDecodeError,
    TokenError,
)
from .header import Header
from .payload import Audience, Payload
from .raw_token import RawToken
from .verify import VerifyOption, parse_token, validate_header, validate_payload, verify

__version__ = "0.1.0"

__all__ = [
    "Algorithm",
    "AlgorithmMismatchError",
    "Audience",
    "ClaimsValidationError",
    "ErrorResponse",
    "Header",
    "MalformedTokenError",
    "Payload",
    "RawToken",
    "ResolveError",
    "Resolver",
    "SignatureInvalidError",
    "TokenDecodeError",
    "TokenError",
    "Validator",
    "VerifyOption",
    "parse_token",
    "validate_header",
    "validate_payload",
    "verify",
]
