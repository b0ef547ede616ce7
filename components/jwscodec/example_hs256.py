"""
Usage:
  python -m components.jwscodec.example_hs256
"""
from __future__ import annotations

from components.jwscodec import ClaimsSet, decode, encode


def main() -> None:
    claims = ClaimsSet()
    claims.insert_unsafe("com.example.my-claim", "value")
    token = encode(claims, b"secret")
    decoded = decode(token, b"secret")
    assert claims == decoded
    print("ok")


if __name__ == "__main__":
    main()
