from __future__ import annotations
from typing import Tuple

from .errors import MalformedToken

SEPARATOR = "."


def join(header_segment: str, payload_segment: str, signature_segment: str) -> str:
    return SEPARATOR.join((header_segment, payload_segment, signature_segment))


def split(token: str) -> Tuple[str, str, str]:
    if not isinstance(token, str):
        raise MalformedToken(f"expected str, got {type(token).__name__}")
    if not token.isascii():
        raise MalformedToken("non-ASCII token")
    parts = token.split(SEPARATOR)
    if len(parts) != 3:
        raise MalformedToken(f"expected 3 segments, got {len(parts)}")
    if not all(parts):
        raise MalformedToken("empty segment")
    header_segment, payload_segment, signature_segment = parts
    return header_segment, payload_segment, signature_segment


def signing_input(header_segment: str, payload_segment: str) -> bytes:
    # split() only hands out ASCII segments.
    return f"{header_segment}{SEPARATOR}{payload_segment}".encode("ascii")
