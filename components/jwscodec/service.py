from __future__ import annotations
import logging
from typing import Any, Mapping, Optional, Union

from . import b64, compact, crypto, json_codec
from .config import JwsSettings
from .contracts import ClaimsSet, Header, KeyLike, TokenCodecPort
from .errors import InvalidEncoding, JwsError, MalformedPayload, MalformedToken, SignatureMismatch

log = logging.getLogger("jwscodec")


class HS256Codec(TokenCodecPort):
    """
    Compact JWS codec, HMAC-SHA256 only.

    encode: b64(json(header)) . b64(json(claims)) . b64(hmac(key, header_seg "." payload_seg))
    decode: split -> recompute signature -> constant-time compare -> parse payload.

    The header segment is never consulted to pick an algorithm. Instances keep no
    key material: the secret is an argument of every call, so one codec can be
    shared freely across threads.
    """

    def __init__(self, settings: Optional[JwsSettings] = None):
        self.settings = settings or JwsSettings.model_construct()

    # --------- Core operations ----------
    def encode(self, claims: Union[ClaimsSet, Mapping[str, Any]], key: KeyLike) -> str:
        if isinstance(claims, Mapping):
            claims = ClaimsSet(claims)
        secret = crypto.coerce_key(key)

        header_segment = b64.encode(json_codec.serialize(Header()))
        payload_segment = b64.encode(json_codec.serialize(claims))
        signature_segment = self._sign(secret, header_segment, payload_segment)
        log.debug("token.encode ok claims=%d payload_len=%d", len(claims), len(payload_segment))
        return compact.join(header_segment, payload_segment, signature_segment)

    def decode(self, token: str, key: KeyLike) -> ClaimsSet:
        secret = crypto.coerce_key(key)
        try:
            claims = self._verify_and_parse(token, secret)
        except JwsError as ex:
            log.log(self.settings.rejection_level_no, "token.decode rejected reason=%s", ex.code)
            raise
        log.debug("token.decode ok claims=%d", len(claims))
        return claims

    # --------- Helpers ----------
    def _sign(self, secret: bytes, header_segment: str, payload_segment: str) -> str:
        return b64.encode(crypto.mac(secret, compact.signing_input(header_segment, payload_segment)))

    def _verify_and_parse(self, token: str, secret: bytes) -> ClaimsSet:
        cap = self.settings.max_token_length
        if cap is not None and isinstance(token, str) and len(token) > cap:
            raise MalformedToken(f"token exceeds {cap} characters")
        header_segment, payload_segment, signature_segment = compact.split(token)

        expected = self._sign(secret, header_segment, payload_segment)
        if not crypto.constant_time_equals(expected.encode("ascii"), signature_segment.encode("ascii")):
            raise SignatureMismatch()

        try:
            payload = b64.decode(payload_segment)
        except InvalidEncoding as ex:
            raise MalformedPayload("payload segment is not base64url") from ex
        return json_codec.parse_claims(payload)


_default_codec = HS256Codec()


def encode(claims: Union[ClaimsSet, Mapping[str, Any]], key: KeyLike) -> str:
    """Encode a set of claims and sign it with HMAC-SHA256."""
    return _default_codec.encode(claims, key)


def decode(token: str, key: KeyLike) -> ClaimsSet:
    """Verify an HS256 token and return its claims; raises a JwsError subclass on rejection."""
    return _default_codec.decode(token, key)


__all__ = ["HS256Codec", "encode", "decode"]
