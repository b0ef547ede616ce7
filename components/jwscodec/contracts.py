from __future__ import annotations
from typing import Any, Dict, Iterator, List, Literal, Mapping, Optional, Protocol, Union

from pydantic import BaseModel, ConfigDict, Field, JsonValue

# ---------- Header ----------

HS256 = "HS256"
JWT = "JWT"


class Header(BaseModel):
    """JWS protected header. Only the HS256/JWT combination exists in this codec."""
    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    algorithm: Literal["HS256"] = Field(HS256, alias="alg")
    type: Literal["JWT"] = Field(JWT, alias="typ")

    def to_json_obj(self) -> Dict[str, str]:
        return self.model_dump(by_alias=True)


# ---------- Claims ----------

# str | int | float | bool | None | list[ClaimValue] | dict[str, ClaimValue]
ClaimValue = JsonValue


def _json_equal(a: Any, b: Any) -> bool:
    # JSON true/false are not numbers: True != 1 here, unlike plain Python equality.
    if isinstance(a, bool) or isinstance(b, bool):
        return isinstance(a, bool) and isinstance(b, bool) and a == b
    if isinstance(a, dict) and isinstance(b, dict):
        return a.keys() == b.keys() and all(_json_equal(a[k], b[k]) for k in a)
    if isinstance(a, list) and isinstance(b, list):
        return len(a) == len(b) and all(_json_equal(x, y) for x, y in zip(a, b))
    if isinstance(a, (dict, list)) or isinstance(b, (dict, list)):
        return False
    return a == b


class ClaimsSet:
    """
    Ordered mapping of claim name -> JSON value; the token payload.

    Two sets are equal when their name/value mappings are equal, regardless of
    insertion order. Nothing here validates claim semantics: the registered
    accessors (iss, sub, aud, exp, ...) only read, and policy checks such as
    expiry are left to the caller.
    """

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, claims: Optional[Mapping[str, Any]] = None):
        self._claims: Dict[str, Any] = {}
        if claims:
            for name, value in claims.items():
                self.insert_unsafe(name, value)

    # ----- mutation -----
    def insert_unsafe(self, name: str, value: Any) -> None:
        """
        Add or replace a (possibly unregistered) claim.

        Unsafe: the value is not checked against any schema, so a claim whose
        semantics do not match RFC 7519 (e.g. a string "exp") produces a token
        other parties may reject. Values that are not JSON-representable are
        only detected when the set is encoded.
        """
        if not isinstance(name, str):
            raise TypeError(f"claim name must be str, got {type(name).__name__}")
        self._claims[name] = value

    def remove(self, name: str) -> Optional[Any]:
        return self._claims.pop(name, None)

    # ----- reads -----
    def get(self, name: str, default: Any = None) -> Any:
        return self._claims.get(name, default)

    def __getitem__(self, name: str) -> Any:
        return self._claims[name]

    def __contains__(self, name: object) -> bool:
        return name in self._claims

    def __iter__(self) -> Iterator[str]:
        return iter(self._claims)

    def __len__(self) -> int:
        return len(self._claims)

    def keys(self):
        return self._claims.keys()

    def items(self):
        return self._claims.items()

    def to_dict(self) -> Dict[str, Any]:
        return dict(self._claims)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ClaimsSet):
            return NotImplemented
        return _json_equal(self._claims, other._claims)

    def __repr__(self) -> str:
        return f"ClaimsSet({self._claims!r})"

    # ----- registered claims (RFC 7519 section 4.1) -----
    def _str_claim(self, name: str) -> Optional[str]:
        value = self._claims.get(name)
        return value if isinstance(value, str) else None

    def _num_claim(self, name: str) -> Optional[float]:
        value = self._claims.get(name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return float(value)

    @property
    def iss(self) -> Optional[str]:
        """Who issued the token."""
        return self._str_claim("iss")

    @property
    def sub(self) -> Optional[str]:
        """Subject; other claims are usually statements about it."""
        return self._str_claim("sub")

    @property
    def aud(self) -> Optional[List[str]]:
        """Intended recipients. A single string audience is returned as a one-item list."""
        value = self._claims.get("aud")
        if isinstance(value, str):
            return [value]
        if not isinstance(value, list):
            return None
        if not all(isinstance(member, str) for member in value):
            return None
        return list(value)

    @property
    def exp(self) -> Optional[float]:
        """Expiration time (POSIX seconds)."""
        return self._num_claim("exp")

    @property
    def nbf(self) -> Optional[float]:
        """Not-before time (POSIX seconds)."""
        return self._num_claim("nbf")

    @property
    def iat(self) -> Optional[float]:
        """Issued-at time (POSIX seconds)."""
        return self._num_claim("iat")

    @property
    def jti(self) -> Optional[str]:
        """Unique token id, usable for replay prevention."""
        return self._str_claim("jti")


# ---------- Ports (Contracts) ----------

KeyLike = Union[bytes, bytearray, memoryview, str]


class TokenCodecPort(Protocol):
    """
    Contract for compact JWS encode/verify.
    An implementation supporting several algorithms must take the expected
    algorithm per verify call and never select it from the token header.
    """
    def encode(self, claims: ClaimsSet, key: KeyLike) -> str: ...
    def decode(self, token: str, key: KeyLike) -> ClaimsSet: ...


# ---------- Errors ----------

class JwsErrorCodes:
    INVALID_TOKEN = "INVALID_TOKEN"
    MALFORMED_TOKEN = "MALFORMED_TOKEN"
    INVALID_ENCODING = "INVALID_ENCODING"
    MALFORMED_PAYLOAD = "MALFORMED_PAYLOAD"
    SIGNATURE_MISMATCH = "SIGNATURE_MISMATCH"
    UNENCODABLE_CLAIMS = "UNENCODABLE_CLAIMS"
