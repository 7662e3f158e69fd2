"""
Hybrid food-wine ranking.

Fuses rule-based pairing scores with semantic similarity from a vector
search. Two modes:
- Semantic: total = semantic * 0.6 + rule * 0.4 (components rounded for reporting)
- Rule-only fallback: total = rule score at full scale, semantic reported as 0

The fallback is used when no semantic scores are available (no embeddings,
embedding or vector search failure). Its zero semantic score is a placeholder,
not a measured dissimilarity.
"""

import logging
import math
from typing import Optional

from ..config import Config
from ..models.enums import FoodCategory
from ..models.pairing import MatchScore, Recommendation, ScoreBreakdown
from ..models.wine import PairingCandidate, cosine_distance_to_similarity
from .food_classifier import classify_food
from .pairing import (
    RuleBasedScore,
    RuleWeights,
    build_pairing_reason,
    explain_pairing,
    score_rule_based_pairing,
)

logger = logging.getLogger(__name__)

similarity_from_distance = cosine_distance_to_similarity


def round_half_up(value: float) -> int:
    """Round to nearest integer, halves away from zero (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


class HybridRanker:
    """
    Scores, sorts and truncates pairing candidates for one dish.

    Raises ValueError on construction if the weights could push a score
    outside 0-100.
    """

    def __init__(
        self,
        semantic_weight: float = Config.SEMANTIC_WEIGHT,
        rule_weight: float = Config.RULE_WEIGHT,
        rule_weights: RuleWeights = RuleWeights(),
        include_reasons: bool = True,
        neutral_score: float = Config.NEUTRAL_SCORE,
        good_pairing_threshold: float = Config.GOOD_PAIRING_THRESHOLD,
    ):
        if semantic_weight < 0 or rule_weight < 0:
            raise ValueError(f"Fusion weights must be non-negative, got {semantic_weight}, {rule_weight}")
        if not math.isclose(semantic_weight + rule_weight, 1.0):
            raise ValueError(f"Fusion weights must sum to 1, got {semantic_weight + rule_weight}")
        if not 0 <= neutral_score <= 100:
            raise ValueError(f"Neutral score must be within 0-100, got {neutral_score}")

        self.semantic_weight = semantic_weight
        self.rule_weight = rule_weight
        self.rule_weights = rule_weights
        self.include_reasons = include_reasons
        self.neutral_score = neutral_score
        self.good_pairing_threshold = good_pairing_threshold

    def hybrid_score(self, semantic_score: float, rule: RuleBasedScore) -> MatchScore:
        """Fuse a genuine semantic score with the rule score."""
        total = semantic_score * self.semantic_weight + rule.score * self.rule_weight
        return MatchScore(
            total=round_half_up(total),
            rule_based_score=round_half_up(rule.score),
            semantic_score=round_half_up(semantic_score),
            breakdown=ScoreBreakdown(
                wine_type_match=rule.breakdown.wine_type_match,
                body_match=rule.breakdown.body_match,
                tannin_match=rule.breakdown.tannin_match,
                acidity_match=rule.breakdown.acidity_match,
                semantic_similarity=round_half_up(semantic_score),
            ),
        )

    @staticmethod
    def rule_only_score(rule: RuleBasedScore) -> MatchScore:
        """Fallback score: the rule score unscaled, semantic placeholder 0."""
        return MatchScore(
            total=rule.score,
            rule_based_score=rule.score,
            semantic_score=0,
            breakdown=ScoreBreakdown(
                wine_type_match=rule.breakdown.wine_type_match,
                body_match=rule.breakdown.body_match,
                tannin_match=rule.breakdown.tannin_match,
                acidity_match=rule.breakdown.acidity_match,
                semantic_similarity=0,
            ),
        )

    def _recommend(
        self,
        candidate: PairingCandidate,
        category: FoodCategory,
        semantic: bool,
    ) -> Recommendation:
        rule = score_rule_based_pairing(candidate, category, self.rule_weights, self.neutral_score)
        if semantic:
            score = self.hybrid_score(candidate.similarity_score or 0.0, rule)
        else:
            score = self.rule_only_score(rule)

        explanation = explain_pairing(candidate, category, rule.score, self.good_pairing_threshold)
        return Recommendation(
            wine=candidate,
            score=score,
            explanation=explanation,
            pairing_reason=build_pairing_reason(candidate, explanation) if self.include_reasons else "",
        )

    def rank(
        self,
        category: FoodCategory,
        candidates: list[PairingCandidate],
        limit: int,
        semantic: bool,
    ) -> list[Recommendation]:
        """
        Score every candidate and return the top `limit`, best first.

        Ties keep input order (sorted() is stable).
        """
        recommendations = [self._recommend(c, category, semantic) for c in candidates]
        recommendations = sorted(recommendations, key=lambda r: r.score.total, reverse=True)
        return recommendations[:max(0, limit)]


def has_semantic_scores(candidates: list[PairingCandidate]) -> bool:
    """True only if every candidate carries a semantic similarity score."""
    return bool(candidates) and all(c.similarity_score is not None for c in candidates)


def rank_pairings(
    dish: str,
    candidates: list[PairingCandidate],
    limit: int = Config.DEFAULT_RECOMMENDATION_LIMIT,
    semantic: Optional[bool] = None,
    ranker: Optional[HybridRanker] = None,
) -> list[Recommendation]:
    """
    Rank candidate wines for a dish.

    Args:
        dish: Free-text dish description
        candidates: Wines to rank; over-fetched (e.g. 2x limit) when they come
            from a vector search so re-ranking has room to work
        limit: Maximum recommendations returned
        semantic: Force a mode. By default semantic fusion is used only when
            every candidate has a similarity score.
        ranker: Custom weights; defaults to Config values

    Returns:
        Recommendations ordered by score.total descending
    """
    category = classify_food(dish)
    if semantic is None:
        semantic = has_semantic_scores(candidates)

    logger.debug(f"Ranking {len(candidates)} wines for '{dish}' ({category.value}, semantic={semantic})")
    return (ranker or HybridRanker()).rank(category, candidates, limit, semantic)
