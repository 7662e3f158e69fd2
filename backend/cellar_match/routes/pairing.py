"""
POST /food-pairing/rank endpoint for Cellar Match.

Ranks caller-supplied cellar wines for a dish. Candidates may carry a
similarity score or raw cosine distance from the caller's vector search;
without them the ranking is rule-based only.
"""

import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from ..config import Config
from ..feature_flags import FeatureFlags, get_feature_flags
from ..models import PairingCandidate, PairingSearchResult
from ..services.food_classifier import classify_food
from ..services.hybrid_ranker import HybridRanker, has_semantic_scores

logger = logging.getLogger(__name__)
router = APIRouter()


class RankRequest(BaseModel):
    """Dish plus the wines to rank."""
    dish: str = Field(..., min_length=1, description="Free-text dish description")
    limit: int = Field(
        default_factory=Config.default_recommendation_limit,
        ge=1,
        le=Config.MAX_RECOMMENDATION_LIMIT,
    )
    candidates: list[PairingCandidate] = Field(default_factory=list)


@router.post("/food-pairing/rank", response_model=PairingSearchResult)
async def rank_food_pairing(
    request: RankRequest,
    flags: FeatureFlags = Depends(get_feature_flags),
) -> PairingSearchResult:
    """Return the best wines for the dish, best first."""
    category = classify_food(request.dish)
    semantic = flags.feature_semantic_pairing and has_semantic_scores(request.candidates)

    logger.info(
        f"Ranking {len(request.candidates)} wines for '{request.dish}' "
        f"({category.value}, semantic={semantic})"
    )

    ranker = HybridRanker(include_reasons=flags.feature_pairing_reasons)
    return PairingSearchResult(
        query=request.dish,
        food_category=category,
        recommendations=ranker.rank(category, request.candidates, request.limit, semantic),
        total_wines_scanned=len(request.candidates),
        semantic=semantic,
    )
