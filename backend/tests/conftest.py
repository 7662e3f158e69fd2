"""
Pytest configuration for the Cellar Match tests.
"""

import pytest

from cellar_match.feature_flags import get_feature_flags
from cellar_match.models import CandidateWine, ExtractedWineQuery, PairingCandidate


@pytest.fixture(autouse=True)
def reset_feature_flags():
    """Re-read feature flags from the environment for every test."""
    get_feature_flags.cache_clear()
    yield
    get_feature_flags.cache_clear()


@pytest.fixture
def client():
    """TestClient for the FastAPI app."""
    from fastapi.testclient import TestClient
    from main import app

    return TestClient(app)


def make_query(name="Opus One", producer="Opus One Winery", vintage=None) -> ExtractedWineQuery:
    """Create an ExtractedWineQuery with sensible defaults."""
    return ExtractedWineQuery(name=name, producer_name=producer, vintage=vintage)


def make_candidate(id="w1", name="Opus One", producer="Opus One Winery", **overrides) -> CandidateWine:
    """Create a CandidateWine with sensible defaults (no completeness bonus)."""
    return CandidateWine(id=id, name=name, producer_name=producer, **overrides)


def make_wine(wine_type="red", **overrides) -> PairingCandidate:
    """Create a PairingCandidate with sensible defaults."""
    defaults = {
        "wine_id": "w1",
        "wine_name": "Test Wine",
        "producer_name": "Test Producer",
        "wine_type": wine_type,
    }
    defaults.update(overrides)
    return PairingCandidate(**defaults)
