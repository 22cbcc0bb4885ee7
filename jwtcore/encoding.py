"""
Codec helpers for compact token segments.

Segments use the unpadded URL-safe base64 alphabet (RFC 7515 section 2).
Decoding is strict: padding, whitespace and characters from the standard
alphabet are rejected rather than silently skipped.
"""

from __future__ import annotations

import base64
import binascii
import json
import re
from typing import Any, Dict

from .errors import TokenDecodeError

_BASE64URL = re.compile(rb"[A-Za-z0-9_-]*")


def b64url_decode(segment: bytes, label: str = "segment") -> bytes:
    """Decode one unpadded base64url segment."""
    data = bytes(segment)
    if not _BASE64URL.fullmatch(data) or len(data) % 4 == 1:
        raise TokenDecodeError(
            f"Could not decode {label}: invalid base64url data",
            details={"segment": label},
        )
    try:
        return base64.urlsafe_b64decode(data + b"=" * (-len(data) % 4))
    except (binascii.Error, ValueError) as exc:
        raise TokenDecodeError(
            f"Could not decode {label}: {exc}",
            details={"segment": label},
        ) from exc


def b64url_encode(data: bytes) -> bytes:
    """Encode bytes as one unpadded base64url segment."""
    return base64.urlsafe_b64encode(data).rstrip(b"=")


def json_object_decode(data: bytes, label: str = "segment") -> Dict[str, Any]:
    """Parse decoded segment bytes as a JSON object."""
    try:
        obj = json.loads(data)
    except (ValueError, UnicodeDecodeError) as exc:
        raise TokenDecodeError(
            f"Could not decode {label}: {exc}",
            details={"segment": label},
        ) from exc
    if not isinstance(obj, dict):
        raise TokenDecodeError(
            f"Could not decode {label}: expected a JSON object",
            details={"segment": label},
        )
    return obj
