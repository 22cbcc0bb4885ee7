"""
Interfaces consumed by the verification pipeline.

Concrete signing algorithms, key storage and key-set fetching live outside
this package; they plug in by satisfying these protocols.
"""

from typing import Any, Protocol, runtime_checkable

from .header import Header


@runtime_checkable
class Algorithm(Protocol):
    """Verifies a signature over the raw signing input.

    ``verify`` receives the exact ``header.claims`` byte span of the token and
    the base64url-decoded signature. It returns nothing on success and raises
    (normally ``SignatureInvalidError``) on mismatch. Whether an empty
    signature is acceptable is the algorithm's own policy.
    """

    name: str

    def verify(self, signing_input: bytes, signature: bytes) -> None: ...


@runtime_checkable
class Resolver(Protocol):
    """Optional algorithm capability to pick key material from the header."""

    def resolve(self, header: Header) -> None: ...


@runtime_checkable
class Validator(Protocol):
    """Check run against decoded claims after the signature is verified."""

    def validate(self, claims: Any) -> None: ...
