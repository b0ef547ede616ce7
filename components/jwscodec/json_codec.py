from __future__ import annotations
import json
from typing import Any, Dict, Union

from pydantic import JsonValue, TypeAdapter, ValidationError

from .contracts import ClaimsSet, Header
from .errors import MalformedPayload, UnencodableClaims

# Validates the claim-value union (str/int/float/bool/None/list/dict with str keys).
_CLAIMS_ADAPTER: TypeAdapter[Dict[str, JsonValue]] = TypeAdapter(Dict[str, JsonValue])


def _dumps(obj: Dict[str, Any]) -> bytes:
    # Canonical form: compact, sorted keys.
    return json.dumps(
        obj, separators=(",", ":"), sort_keys=True, ensure_ascii=False, allow_nan=False
    ).encode("utf-8")


def serialize(value: Union[Header, ClaimsSet]) -> bytes:
    if isinstance(value, Header):
        return _dumps(value.to_json_obj())
    if not isinstance(value, ClaimsSet):
        raise UnencodableClaims(f"expected ClaimsSet, got {type(value).__name__}")
    raw = value.to_dict()
    try:
        _CLAIMS_ADAPTER.validate_python(raw)
        return _dumps(raw)
    except ValidationError as ex:
        raise UnencodableClaims(f"{ex.error_count()} claim value(s) are not JSON values") from ex
    except (TypeError, ValueError, RecursionError) as ex:
        raise UnencodableClaims() from ex


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def _loads_object(data: bytes) -> Dict[str, Any]:
    try:
        obj = json.loads(data.decode("utf-8"), parse_constant=_reject_constant)
    except UnicodeDecodeError as ex:
        raise MalformedPayload("segment is not UTF-8") from ex
    except (ValueError, RecursionError) as ex:
        raise MalformedPayload("segment is not valid JSON") from ex
    if not isinstance(obj, dict):
        raise MalformedPayload("top-level JSON value is not an object")
    return obj


def parse_claims(data: bytes) -> ClaimsSet:
    return ClaimsSet(_loads_object(data))


def parse_header(data: bytes) -> Header:
    obj = _loads_object(data)
    if "alg" not in obj or "typ" not in obj:
        raise MalformedPayload("header requires alg and typ")
    try:
        return Header.model_validate(obj)
    except ValidationError as ex:
        raise MalformedPayload("not an HS256/JWT header") from ex
