from __future__ import annotations
import hashlib
import hmac

from .contracts import KeyLike

MAC_SIZE = hashlib.sha256().digest_size  # 32


def coerce_key(key: KeyLike) -> bytes:
    """Secret as bytes. str secrets are UTF-8 encoded. The value is never echoed in errors."""
    if isinstance(key, bytes):
        return key
    if isinstance(key, (bytearray, memoryview)):
        return bytes(key)
    if isinstance(key, str):
        return key.encode("utf-8")
    raise TypeError(f"secret must be bytes or str, got {type(key).__name__}")


def mac(key: bytes, message: bytes) -> bytes:
    """HMAC-SHA256 tag (32 bytes)."""
    return hmac.new(key, message, hashlib.sha256).digest()


def constant_time_equals(a: bytes, b: bytes) -> bool:
    # Running time independent of where the first differing byte is.
    return hmac.compare_digest(a, b)
