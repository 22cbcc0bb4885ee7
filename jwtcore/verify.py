"""
Token verification pipeline.

Checks run in a fixed order: split, decode header, resolve, options,
signature, decode claims, validators. Claims are never decoded before the
signature is verified.
"""

from __future__ import annotations

from typing import Any, Callable, Optional, Union

from .algorithm import Algorithm, Validator
from .errors import AlgorithmMismatchError, TokenError
from .header import Header
from .logging import get_logger
from .raw_token import RawToken

logger = get_logger("jwtcore.verify")

# Runs before the signature check; raising aborts verification
VerifyOption = Callable[[RawToken], None]


def parse_token(token: Union[bytes, bytearray, memoryview, str], alg: Optional[Algorithm] = None) -> RawToken:
    """Split a token into its segments without decoding anything.

    Raises:
        MalformedTokenError: If the token lacks either '.' delimiter.
    """
    return RawToken(token, alg)


def verify(
    token: Union[bytes, bytearray, memoryview, str],
    alg: Algorithm,
    payload: Any = None,
    *options: VerifyOption,
) -> Header:
    """Verify a token's signature with ``alg`` and decode its claims into ``payload``.

    ``options`` run in order after the header is decoded (and resolved, when
    ``alg`` is a Resolver) and before the signature is checked. Validators
    attached with ``validate_payload`` run after the claims are decoded.

    Returns the decoded header. Any ``TokenError`` raised once the header has
    been decoded carries it in ``exc.header``. Claims are left untouched when
    the signature does not verify.
    """
    rt: Optional[RawToken] = None
    stage = "split"
    try:
        rt = RawToken(token, alg)

        stage = "header"
        rt.decode_header()

        stage = "resolve"
        rt.resolve()

        stage = "options"
        for option in options:
            option(rt)

        stage = "signature"
        alg.verify(rt.signing_input, rt.signature())

        stage = "claims"
        claims = rt.decode_claims(payload)

        stage = "validation"
        rt.run_validators(claims)
    except Exception as exc:
        header = rt.header if rt is not None else None
        if isinstance(exc, TokenError) and exc.header is None:
            exc.header = header
        logger.warning(
            "Token verification failed",
            stage=stage,
            error=getattr(exc, "code", type(exc).__name__),
            alg=header.algorithm if header else None,
            kid=header.key_id if header else None,
        )
        raise

    logger.debug("Token verified", alg=rt.header.algorithm, kid=rt.header.key_id)
    return rt.header


def validate_header(rt: RawToken) -> None:
    """Check that the header "alg" matches the verifying algorithm's name."""
    expected = rt.algorithm.name if rt.algorithm is not None else None
    if expected != rt.decode_header().algorithm:
        raise AlgorithmMismatchError(
            details={"expected": expected, "actual": rt.header.algorithm},
        )


def validate_payload(payload: Any, *validators: Validator) -> VerifyOption:
    """Run ``validators`` against ``payload`` once claims are decoded.

    Pass the same object given to ``verify`` as its claims destination, or
    None to validate whatever the destination ends up holding.
    """
    def option(rt: RawToken) -> None:
        rt.attach_validators(payload, validators)

    return option
