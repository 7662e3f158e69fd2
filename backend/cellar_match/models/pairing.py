"""
Pydantic models for food pairing results.
"""

from pydantic import BaseModel, Field

from .enums import FoodCategory
from .wine import WineCharacteristics


class ScoreBreakdown(BaseModel):
    """Per-dimension scores (0-100) behind a pairing score."""
    wine_type_match: float
    body_match: float
    tannin_match: float
    acidity_match: float
    semantic_similarity: float = Field(0, description="0 when semantic search was not used")


class MatchScore(BaseModel):
    """Scoring components for a wine-food match."""
    total: float = Field(..., ge=0, le=100)
    rule_based_score: float = Field(..., ge=0, le=100)
    semantic_score: float = Field(..., ge=0, le=100)
    breakdown: ScoreBreakdown


class Recommendation(BaseModel):
    """A ranked wine with its score and human-readable justification."""
    wine: WineCharacteristics
    score: MatchScore
    explanation: str
    pairing_reason: str = ""


class PairingSearchResult(BaseModel):
    """Response of a food pairing search."""
    query: str
    food_category: FoodCategory
    recommendations: list[Recommendation] = Field(default_factory=list)
    total_wines_scanned: int = 0
    semantic: bool = Field(False, description="True if semantic similarity contributed to scores")
