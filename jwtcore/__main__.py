"""
Inspect a token from the shell without verifying it.

    python -m jwtcore <token>
    echo '<token>' | python -m jwtcore --stdin
"""

from __future__ import annotations

import argparse
import json
import sys
from typing import List, Optional

from .config import get_settings
from .errors import TokenError
from .logging import configure_logging
from .verify import parse_token


def _print_json(label: str, data: dict) -> None:
    print(f"\n{label}:")
    print(json.dumps(data, indent=4))


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="python -m jwtcore",
        description="Decode a compact token WITHOUT signature verification.",
    )
    parser.add_argument("token", nargs="?", default=None, help="token string")
    parser.add_argument(
        "--stdin",
        action="store_true",
        default=False,
        help="read the token from stdin",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)
    configure_logging(get_settings().log_level)

    if args.stdin:
        token = sys.stdin.read().strip()
    else:
        token = (args.token or "").strip()
    if not token:
        print("Error: no token given.", file=sys.stderr)
        return 1

    try:
        rt = parse_token(token)
        claims = {}
        header = rt.decode_token(claims)
    except TokenError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1

    _print_json("Header", header.model_dump(by_alias=True, exclude_none=True))
    _print_json("Payload", claims)
    print(f"\nSignature (base64url encoded):\n{bytes(rt.signature_segment).decode('ascii', 'replace')}")
    print("\nWARNING: the signature was NOT verified.", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
