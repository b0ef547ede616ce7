from __future__ import annotations
from typing import Dict, Optional

from .contracts import JwsErrorCodes


class JwsError(Exception):
    """Base error for the JWS codec. Callers should treat every subclass as "token rejected"."""
    type: str = "AUTH_ERROR"
    code: str = JwsErrorCodes.INVALID_TOKEN
    message: str = "Token rejected"

    def __init__(self, message: Optional[str] = None):
        if message:
            self.message = message
        super().__init__(self.message)

    def to_payload(self) -> Dict[str, str]:
        return {
            "type": self.type,
            "code": self.code,
            "message": self.message,
        }


class MalformedToken(JwsError):
    code = JwsErrorCodes.MALFORMED_TOKEN
    message = "Not in JWS compact serialization format"


class InvalidEncoding(JwsError):
    code = JwsErrorCodes.INVALID_ENCODING
    message = "Segment is not valid base64url"


class MalformedPayload(JwsError):
    code = JwsErrorCodes.MALFORMED_PAYLOAD
    message = "Segment does not contain a valid JSON object"


class SignatureMismatch(JwsError):
    code = JwsErrorCodes.SIGNATURE_MISMATCH
    message = "Signature validation failed"


class UnencodableClaims(JwsError):
    code = JwsErrorCodes.UNENCODABLE_CLAIMS
    message = "Claims cannot be represented as JSON"
