"""
Test helper functions and factory methods for jwtcore.

Requires PyJWT (installed with the ``test`` extra).
"""

import hashlib
import hmac
import json
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

import jwt

from .encoding import b64url_encode
from .errors import ResolveError, SignatureInvalidError
from .header import Header

DEFAULT_SECRET = b"mock-secret-for-hmac-test-tokens-0123456789abcdefghijklmnopqrstuv"


class HMACAlgorithm:
    """HMAC-SHA verifier used to exercise the pipeline in tests."""

    _HASHES = {
        "HS256": hashlib.sha256,
        "HS384": hashlib.sha384,
        "HS512": hashlib.sha512,
    }

    def __init__(self, name: str = "HS256", key: bytes = DEFAULT_SECRET):
        if name not in self._HASHES:
            raise ValueError(f"Unsupported HMAC algorithm: {name}")
        self.name = name
        self.key = key
        self.verify_calls = 0

    def verify(self, signing_input: bytes, signature: bytes) -> None:
        self.verify_calls += 1
        expected = hmac.new(self.key, bytes(signing_input), self._HASHES[self.name]).digest()
        if not hmac.compare_digest(expected, signature):
            raise SignatureInvalidError()


class KeyedHMACAlgorithm(HMACAlgorithm):
    """HMAC verifier that selects its key by the header "kid"."""

    def __init__(self, name: str = "HS256", keys: Optional[Dict[str, bytes]] = None):
        super().__init__(name, key=b"")
        self.keys = dict(keys or {})
        self.resolve_calls = 0

    def resolve(self, header: Header) -> None:
        self.resolve_calls += 1
        key = self.keys.get(header.key_id or "")
        if key is None:
            raise ResolveError(f"Key not found: {header.key_id}", details={"kid": header.key_id})
        self.key = key


class MockTokenGenerator:
    """Generate signed test tokens with PyJWT."""

    def __init__(self, issuer: str = "https://issuer.example", secret: bytes = DEFAULT_SECRET):
        self.issuer = issuer
        self.secret = secret

    def claims(self, subject: str = "user1", audience: Any = "api", expires_in: int = 3600, **extra) -> Dict[str, Any]:
        """Build a standard claim set."""
        now = datetime.now(timezone.utc)
        claims = {
            "iss": self.issuer,
            "sub": subject,
            "aud": audience,
            "iat": int(now.timestamp()),
            "nbf": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=expires_in)).timestamp()),
            "jti": "token-1",
        }
        claims.update(extra)
        return claims

    def generate_token(
        self,
        claims: Optional[Dict[str, Any]] = None,
        algorithm: str = "HS256",
        headers: Optional[Dict[str, Any]] = None,
        key: Optional[bytes] = None,
    ) -> str:
        """Sign ``claims`` (default: ``self.claims()``) as a compact token."""
        if claims is None:
            claims = self.claims()
        return jwt.encode(claims, key or self.secret, algorithm=algorithm, headers=headers)


def encode_segments(header: Any, claims: Any, signature: bytes = b"") -> bytes:
    """Assemble a token from raw parts without signing, for malformed-input tests."""
    def segment(part: Any) -> bytes:
        if isinstance(part, bytes):
            return b64url_encode(part)
        return b64url_encode(json.dumps(part).encode("utf-8"))

    return b".".join([segment(header), segment(claims), b64url_encode(signature)])


# Global instances for easy access
mock_token_generator = MockTokenGenerator()
