"""
Tests for the pairing search service and its fallback behaviour.
"""

from unittest.mock import MagicMock

import pytest

from cellar_match.models import WineCharacteristics
from cellar_match.models.enums import FoodCategory
from cellar_match.services.pairing_search import PairingSearchService
from cellar_match.services.protocols import VectorSearchHit


def _wine(wine_id, wine_type="red", **overrides) -> WineCharacteristics:
    return WineCharacteristics(wine_id=wine_id, wine_name=f"Wine {wine_id}", wine_type=wine_type, **overrides)


@pytest.fixture
def cellar():
    source = MagicMock()
    source.list_cellar_wines.return_value = [
        _wine("white", wine_type="white"),
        _wine("red", body="full", tannin_level="high", acidity_level="high"),
    ]
    return source


@pytest.fixture
def embedder():
    embedder = MagicMock()
    embedder.embed.return_value = [0.1, 0.2, 0.3]
    return embedder


@pytest.fixture
def vector_search():
    search = MagicMock()
    search.has_embeddings.return_value = True
    search.search.return_value = [
        VectorSearchHit(wine=_wine("white", wine_type="white"), distance=0.0),
        VectorSearchHit(wine=_wine("red", body="full", tannin_level="high", acidity_level="high"), distance=1.0),
    ]
    return search


class TestSemanticSearch:
    def test_uses_hybrid_scores(self, cellar, embedder, vector_search):
        service = PairingSearchService(cellar, embedder, vector_search)
        result = service.search("ribeye steak", user_id="u1", limit=5)

        assert result.semantic is True
        assert result.food_category == FoodCategory.RED_MEAT
        assert result.total_wines_scanned == 2
        embedder.embed.assert_called_once_with("ribeye steak")
        cellar.list_cellar_wines.assert_not_called()

        scores = {r.wine.wine_id: r.score for r in result.recommendations}
        # red: 50 * 0.6 + 100 * 0.4; white: 100 * 0.6 + 38 * 0.4
        assert scores["red"].total == 70
        assert scores["white"].total == 75
        assert scores["white"].semantic_score == 100

    def test_overfetches_for_reranking(self, cellar, embedder, vector_search):
        service = PairingSearchService(cellar, embedder, vector_search)
        service.search("steak", user_id="u1", limit=4)
        vector_search.search.assert_called_once_with([0.1, 0.2, 0.3], "u1", 8)

    def test_truncates_to_limit(self, cellar, embedder, vector_search):
        service = PairingSearchService(cellar, embedder, vector_search)
        result = service.search("steak", user_id="u1", limit=1)
        assert len(result.recommendations) == 1
        assert result.total_wines_scanned == 2


class TestFallback:
    def _assert_rule_only(self, result):
        assert result.semantic is False
        assert result.total_wines_scanned == 2
        for rec in result.recommendations:
            assert rec.score.semantic_score == 0
            assert rec.score.total == rec.score.rule_based_score
        assert result.recommendations[0].wine.wine_id == "red"
        assert result.recommendations[0].score.total == pytest.approx(100)

    def test_no_collaborators(self, cellar):
        result = PairingSearchService(cellar).search("steak", user_id="u1")
        self._assert_rule_only(result)
        cellar.list_cellar_wines.assert_called_once_with("u1")

    def test_no_embeddings(self, cellar, embedder, vector_search):
        vector_search.has_embeddings.return_value = False
        result = PairingSearchService(cellar, embedder, vector_search).search("steak", user_id="u1")
        self._assert_rule_only(result)
        embedder.embed.assert_not_called()

    def test_availability_check_error(self, cellar, embedder, vector_search):
        vector_search.has_embeddings.side_effect = RuntimeError("db down")
        result = PairingSearchService(cellar, embedder, vector_search).search("steak", user_id="u1")
        self._assert_rule_only(result)

    def test_embedding_failure(self, cellar, embedder, vector_search):
        embedder.embed.side_effect = TimeoutError("embedding API timed out")
        result = PairingSearchService(cellar, embedder, vector_search).search("steak", user_id="u1")
        self._assert_rule_only(result)
        vector_search.search.assert_not_called()

    def test_vector_search_failure(self, cellar, embedder, vector_search):
        vector_search.search.side_effect = RuntimeError("index unavailable")
        result = PairingSearchService(cellar, embedder, vector_search).search("steak", user_id="u1")
        self._assert_rule_only(result)

    def test_semantic_disabled(self, cellar, embedder, vector_search):
        service = PairingSearchService(cellar, embedder, vector_search, semantic_enabled=False)
        self._assert_rule_only(service.search("steak", user_id="u1"))
        vector_search.has_embeddings.assert_not_called()

    def test_empty_cellar(self, embedder, vector_search):
        source = MagicMock()
        source.list_cellar_wines.return_value = []
        result = PairingSearchService(source).search("steak", user_id="u1")
        assert result.recommendations == []
        assert result.total_wines_scanned == 0
