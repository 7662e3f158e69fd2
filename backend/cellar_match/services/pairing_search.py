"""
Food pairing search over a user's cellar.

Strategy:
1. Classify the dish for rule-based matching
2. Embed the dish and search the user's wine embeddings (over-fetching)
3. Re-rank with the hybrid score (60% semantic + 40% rule-based)

Any failure of the embedding or vector search collaborators falls back
to rule-based scoring of the whole cellar. Failures are logged, never
surfaced to the caller.
"""

import logging
from typing import Optional

from ..config import Config
from ..models.enums import FoodCategory
from ..models.pairing import PairingSearchResult
from ..models.wine import PairingCandidate
from .food_classifier import classify_food
from .hybrid_ranker import HybridRanker, similarity_from_distance
from .protocols import CandidateSource, TextEmbedder, VectorSearch

logger = logging.getLogger(__name__)


class PairingSearchService:
    """Runs a pairing search with injected data collaborators."""

    def __init__(
        self,
        candidate_source: CandidateSource,
        embedder: Optional[TextEmbedder] = None,
        vector_search: Optional[VectorSearch] = None,
        semantic_enabled: bool = True,
        ranker: Optional[HybridRanker] = None,
        overfetch_factor: int = Config.SEMANTIC_OVERFETCH_FACTOR,
    ):
        self._candidate_source = candidate_source
        self._embedder = embedder
        self._vector_search = vector_search
        self._semantic_enabled = semantic_enabled
        self._ranker = ranker or HybridRanker()
        self._overfetch_factor = overfetch_factor

    def _semantic_available(self, user_id: str) -> bool:
        if not self._semantic_enabled or self._embedder is None or self._vector_search is None:
            return False
        try:
            return bool(self._vector_search.has_embeddings(user_id))
        except Exception as e:
            logger.error(f"PairingSearch: embedding availability check failed: {e}", exc_info=True)
            return False

    def search(
        self,
        dish: str,
        user_id: str,
        limit: int = Config.DEFAULT_RECOMMENDATION_LIMIT,
    ) -> PairingSearchResult:
        """
        Find the best wines in the user's cellar for a dish.

        Args:
            dish: Free-text dish description
            user_id: Owner of the cellar
            limit: Maximum recommendations

        Returns:
            PairingSearchResult; `semantic` tells which scoring mode was used
        """
        category = classify_food(dish)
        logger.info(f"Classified '{dish}' as: {category.value}")

        if not self._semantic_available(user_id):
            logger.info("PairingSearch: no embeddings available, using rule-based scoring only")
            return self._fallback(dish, user_id, category, limit)

        try:
            query_vector = self._embedder.embed(dish)
        except Exception as e:
            logger.error(f"PairingSearch: embedding failed, falling back to rule-based: {e}", exc_info=True)
            return self._fallback(dish, user_id, category, limit)

        try:
            hits = self._vector_search.search(query_vector, user_id, limit * self._overfetch_factor)
        except Exception as e:
            logger.error(f"PairingSearch: vector search failed, falling back to rule-based: {e}", exc_info=True)
            return self._fallback(dish, user_id, category, limit)

        logger.info(f"PairingSearch: found {len(hits)} wines via semantic search")

        candidates = []
        for hit in hits:
            data = hit.wine.model_dump()
            data["distance"] = hit.distance
            data["similarity_score"] = similarity_from_distance(hit.distance)
            candidates.append(PairingCandidate(**data))

        return PairingSearchResult(
            query=dish,
            food_category=category,
            recommendations=self._ranker.rank(category, candidates, limit, semantic=True),
            total_wines_scanned=len(candidates),
            semantic=True,
        )

    def _fallback(self, dish: str, user_id: str, category: FoodCategory, limit: int) -> PairingSearchResult:
        """Rule-based scoring of every wine in the cellar."""
        wines = self._candidate_source.list_cellar_wines(user_id)
        candidates = [PairingCandidate.model_validate(wine.model_dump()) for wine in wines]

        return PairingSearchResult(
            query=dish,
            food_category=category,
            recommendations=self._ranker.rank(category, candidates, limit, semantic=False),
            total_wines_scanned=len(candidates),
            semantic=False,
        )
