import pytest
from pydantic import ValidationError

from components.jwscodec import ClaimsSet, Header, JwsError, SignatureMismatch, MalformedToken
from components.jwscodec.errors import InvalidEncoding, MalformedPayload, UnencodableClaims


def test_header_defaults_and_wire_names():
    h = Header()
    assert h.algorithm == "HS256"
    assert h.type == "JWT"
    assert h.to_json_obj() == {"alg": "HS256", "typ": "JWT"}


def test_header_rejects_other_algorithms_and_is_frozen():
    with pytest.raises(ValidationError):
        Header(alg="none")
    with pytest.raises(ValidationError):
        Header.model_validate({"alg": "HS256", "typ": "JWE"})
    h = Header()
    with pytest.raises(ValidationError):
        h.algorithm = "RS256"


def test_claims_insert_get_remove_last_write_wins():
    c = ClaimsSet()
    assert len(c) == 0
    c.insert_unsafe("a", 1)
    c.insert_unsafe("a", 2)
    c.insert_unsafe("b", {"nested": [1, "x", None]})
    assert len(c) == 2
    assert c["a"] == 2
    assert c.get("b") == {"nested": [1, "x", None]}
    assert c.get("missing") is None
    assert c.get("missing", "dflt") == "dflt"
    assert "a" in c and "zzz" not in c
    assert list(c) == ["a", "b"]  # insertion order kept

    assert c.remove("a") == 2
    assert c.remove("a") is None
    assert c.to_dict() == {"b": {"nested": [1, "x", None]}}


def test_claims_name_must_be_str():
    with pytest.raises(TypeError):
        ClaimsSet().insert_unsafe(1, "x")


def test_claims_equality_ignores_order():
    c1 = ClaimsSet({"a": 1, "b": [True, None]})
    c2 = ClaimsSet()
    c2.insert_unsafe("b", [True, None])
    c2.insert_unsafe("a", 1)
    assert c1 == c2
    assert c1 != ClaimsSet({"a": 1})
    assert c1 != {"a": 1, "b": [True, None]}


def test_claims_equality_distinguishes_json_booleans_from_numbers():
    assert ClaimsSet({"a": True}) != ClaimsSet({"a": 1})
    assert ClaimsSet({"a": False}) != ClaimsSet({"a": 0.0})
    assert ClaimsSet({"a": [1, {"b": True}]}) != ClaimsSet({"a": [1, {"b": 1}]})
    assert ClaimsSet({"a": [1, {"b": True}]}) == ClaimsSet({"a": [1, {"b": True}]})
    assert ClaimsSet({"a": [1]}) != ClaimsSet({"a": {"0": 1}})
    assert ClaimsSet({"n": 1}) == ClaimsSet({"n": 1.0})


def test_to_dict_is_a_copy():
    c = ClaimsSet({"a": 1})
    d = c.to_dict()
    d["a"] = 99
    assert c["a"] == 1


def test_registered_claim_accessors():
    c = ClaimsSet({
        "iss": "issuer",
        "sub": "urn:someone",
        "aud": ["svc-a", "svc-b"],
        "exp": 1700000000,
        "nbf": 1600000000.5,
        "iat": 1650000000,
        "jti": "id-1",
    })
    assert c.iss == "issuer"
    assert c.sub == "urn:someone"
    assert c.aud == ["svc-a", "svc-b"]
    assert c.exp == 1700000000.0
    assert c.nbf == 1600000000.5
    assert c.iat == 1650000000.0
    assert c.jti == "id-1"


def test_registered_claim_accessors_wrong_types_or_absent():
    assert ClaimsSet().sub is None
    assert ClaimsSet().aud is None
    c = ClaimsSet({"sub": 5, "aud": ["ok", 3], "exp": "soon", "iat": True, "jti": None})
    assert c.sub is None
    assert c.aud is None
    assert c.exp is None
    assert c.iat is None
    assert c.jti is None
    assert ClaimsSet({"aud": "only-one"}).aud == ["only-one"]


def test_error_taxonomy_payloads():
    for cls in (MalformedToken, InvalidEncoding, MalformedPayload, SignatureMismatch, UnencodableClaims):
        assert issubclass(cls, JwsError)
    assert SignatureMismatch().to_payload() == {
        "type": "AUTH_ERROR",
        "code": "SIGNATURE_MISMATCH",
        "message": "Signature validation failed",
    }
    ex = MalformedToken("expected 3 segments, got 2")
    assert str(ex) == "expected 3 segments, got 2"
    assert ex.to_payload()["code"] == "MALFORMED_TOKEN"
