from __future__ import annotations
import base64
import binascii
import re

from .errors import InvalidEncoding

# Unpadded URL-safe alphabet, optionally followed by one or two "=" (tolerated, never emitted).
_B64URL_RE = re.compile(r"[A-Za-z0-9_-]*(={0,2})")


def encode(data: bytes) -> str:
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def decode(text: str) -> bytes:
    if not isinstance(text, str):
        raise InvalidEncoding(f"expected str, got {type(text).__name__}")
    m = _B64URL_RE.fullmatch(text)
    if m is None:
        raise InvalidEncoding("character outside the base64url alphabet")
    padding = m.group(1)
    body = text[: len(text) - len(padding)]
    if len(body) % 4 == 1:
        raise InvalidEncoding("length does not correspond to a base64 group")
    if padding and (len(text) % 4 != 0 or len(padding) != -len(body) % 4):
        raise InvalidEncoding("incorrect padding")
    try:
        return base64.urlsafe_b64decode(body + "=" * (-len(body) % 4))
    except (binascii.Error, ValueError) as ex:
        raise InvalidEncoding() from ex
