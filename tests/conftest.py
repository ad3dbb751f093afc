# file: tests/conftest.py
import pytest
from nse import NseParams


@pytest.fixture
def params():
    """Cheap KDF settings so round-trip sweeps stay fast."""
    return NseParams(kdf_iterations=10)
