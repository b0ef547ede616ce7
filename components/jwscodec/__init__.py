from .contracts import ClaimsSet, ClaimValue, Header, JwsErrorCodes, TokenCodecPort
from .errors import (
    JwsError, MalformedToken, InvalidEncoding, MalformedPayload,
    SignatureMismatch, UnencodableClaims,
)
from .config import JwsSettings
from .service import HS256Codec, encode, decode

__all__ = [
    "ClaimsSet",
    "ClaimValue",
    "Header",
    "JwsErrorCodes",
    "TokenCodecPort",
    "JwsError",
    "MalformedToken",
    "InvalidEncoding",
    "MalformedPayload",
    "SignatureMismatch",
    "UnencodableClaims",
    "JwsSettings",
    "HS256Codec",
    "encode",
    "decode",
]
