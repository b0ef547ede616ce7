from pathlib import Path
import sys

import pytest

# Ensure project root is on sys.path before tests import components
ROOT = Path(__file__).resolve().parent
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


@pytest.fixture
def secret() -> bytes:
    return b"secret"


@pytest.fixture
def sample_claims():
    from components.jwscodec import ClaimsSet

    claims = ClaimsSet()
    claims.insert_unsafe("com.example.my", "value")
    claims.insert_unsafe("sub", "urn:someone")
    return claims
