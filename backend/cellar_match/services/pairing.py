"""
Rule-based food-wine pairing scores.

Scores a wine's structure against a dish category on four dimensions
(0-100 each), following classic pairing principles:
- Wine type matching the food category
- Body matching richness
- Tannin cutting through fat and protein
- Acidity balancing richness

Missing or unrecognised characteristics score a neutral 50 by default.
"""

import math
from dataclasses import dataclass
from typing import Optional

from ..config import Config
from ..models.enums import FoodCategory
from ..models.wine import WineCharacteristics

# Compatibility of each wine type with each food category (0-100).
# Judgment calls, tuned by hand; unknown combinations score NEUTRAL_SCORE.
WINE_TYPE_COMPATIBILITY: dict[FoodCategory, dict[str, int]] = {
    FoodCategory.RED_MEAT: {
        "red": 100, "fortified": 70, "rose": 40, "white": 20, "sparkling": 30, "dessert": 10,
    },
    FoodCategory.WHITE_MEAT: {
        "white": 90, "rose": 85, "red": 50, "sparkling": 80, "fortified": 30, "dessert": 10,
    },
    FoodCategory.FISH_SEAFOOD: {
        "white": 100, "sparkling": 90, "rose": 70, "red": 20, "fortified": 30, "dessert": 10,
    },
    FoodCategory.PASTA: {
        "red": 85, "white": 75, "rose": 70, "sparkling": 60, "fortified": 40, "dessert": 10,
    },
    FoodCategory.CHEESE: {
        "red": 80, "white": 75, "fortified": 85, "sparkling": 70, "rose": 65, "dessert": 80,
    },
    FoodCategory.VEGETABLES: {
        "white": 90, "rose": 85, "sparkling": 80, "red": 50, "fortified": 30, "dessert": 10,
    },
    FoodCategory.SPICY: {
        "white": 85, "rose": 80, "sparkling": 75, "dessert": 70, "red": 40, "fortified": 30,
    },
    FoodCategory.RICH_FATTY: {
        "red": 90, "sparkling": 85, "white": 70, "rose": 65, "fortified": 75, "dessert": 50,
    },
    FoodCategory.GRILLED_SMOKED: {
        "red": 95, "fortified": 70, "rose": 60, "white": 40, "sparkling": 45, "dessert": 20,
    },
    FoodCategory.DESSERT: {
        "dessert": 100, "fortified": 85, "sparkling": 70, "white": 50, "rose": 40, "red": 20,
    },
    FoodCategory.UNKNOWN: {
        "red": 60, "white": 60, "rose": 60, "sparkling": 60, "fortified": 50, "dessert": 40,
    },
}

BODY_LEVELS = {"light", "medium", "full"}
INTENSITY_LEVELS = {"low", "medium", "high"}

# Category groupings per dimension
RICH_BODY_CATEGORIES = {
    FoodCategory.RED_MEAT, FoodCategory.RICH_FATTY, FoodCategory.GRILLED_SMOKED, FoodCategory.CHEESE,
}
LIGHT_BODY_CATEGORIES = {
    FoodCategory.FISH_SEAFOOD, FoodCategory.VEGETABLES, FoodCategory.WHITE_MEAT,
}
HIGH_PROTEIN_FAT_CATEGORIES = {
    FoodCategory.RED_MEAT, FoodCategory.RICH_FATTY, FoodCategory.GRILLED_SMOKED, FoodCategory.CHEESE,
}
LOW_PROTEIN_FAT_CATEGORIES = {
    FoodCategory.FISH_SEAFOOD, FoodCategory.VEGETABLES, FoodCategory.SPICY, FoodCategory.DESSERT,
}
RICH_ACIDITY_CATEGORIES = {
    FoodCategory.RED_MEAT, FoodCategory.RICH_FATTY, FoodCategory.CHEESE, FoodCategory.WHITE_MEAT,
}
ACIDIC_FOOD_CATEGORIES = {
    FoodCategory.FISH_SEAFOOD, FoodCategory.VEGETABLES,
}


@dataclass(frozen=True)
class RuleWeights:
    """Weights of the four dimensions; must be non-negative and sum to 1."""
    wine_type: float = Config.RULE_WEIGHT_WINE_TYPE
    body: float = Config.RULE_WEIGHT_BODY
    tannin: float = Config.RULE_WEIGHT_TANNIN
    acidity: float = Config.RULE_WEIGHT_ACIDITY

    def __post_init__(self):
        weights = (self.wine_type, self.body, self.tannin, self.acidity)
        if any(w < 0 for w in weights):
            raise ValueError(f"Rule weights must be non-negative, got {weights}")
        if not math.isclose(sum(weights), 1.0):
            raise ValueError(f"Rule weights must sum to 1, got {sum(weights)}")


@dataclass
class RuleBreakdown:
    wine_type_match: float
    body_match: float
    tannin_match: float
    acidity_match: float


@dataclass
class RuleBasedScore:
    """Weighted rule score (0-100) with its per-dimension breakdown."""
    score: float
    breakdown: RuleBreakdown


def score_wine_type_match(
    wine_type: Optional[str],
    category: FoodCategory,
    neutral: float = Config.NEUTRAL_SCORE,
) -> float:
    """Table lookup; unknown wine types or categories score neutral."""
    return WINE_TYPE_COMPATIBILITY.get(category, {}).get(wine_type or "", neutral)


def score_body_match(body: Optional[str], category: FoodCategory, neutral: float = Config.NEUTRAL_SCORE) -> float:
    """Lighter foods want lighter wines, rich foods want full-bodied wines."""
    if body not in BODY_LEVELS:
        return neutral

    if category in RICH_BODY_CATEGORIES:
        return {"full": 100, "medium": 70, "light": 40}[body]

    if category in LIGHT_BODY_CATEGORIES:
        return {"light": 100, "medium": 70, "full": 40}[body]

    # Pasta, spicy, dessert: medium body usually works
    return 100 if body == "medium" else 75


def score_tannin_match(
    tannin_level: Optional[str],
    category: FoodCategory,
    neutral: float = Config.NEUTRAL_SCORE,
) -> float:
    """High tannin cuts through fat and complements protein."""
    if tannin_level not in INTENSITY_LEVELS:
        return neutral

    if category in HIGH_PROTEIN_FAT_CATEGORIES:
        return {"high": 100, "medium": 70, "low": 40}[tannin_level]

    if category in LOW_PROTEIN_FAT_CATEGORIES:
        return {"low": 100, "medium": 60, "high": 20}[tannin_level]

    # White meat, pasta: medium tannin is fine
    return {"medium": 100, "low": 80, "high": 60}[tannin_level]


def score_acidity_match(
    acidity_level: Optional[str],
    category: FoodCategory,
    neutral: float = Config.NEUTRAL_SCORE,
) -> float:
    """High acidity balances richness and fat."""
    if acidity_level not in INTENSITY_LEVELS:
        return neutral

    if category in RICH_ACIDITY_CATEGORIES:
        return {"high": 100, "medium": 80, "low": 50}[acidity_level]

    if category in ACIDIC_FOOD_CATEGORIES:
        # Match acidity with acidity
        return {"high": 100, "medium": 90, "low": 60}[acidity_level]

    # Pasta, grilled, spicy: medium to high acidity works
    return {"high": 90, "medium": 100, "low": 60}[acidity_level]


def score_rule_based_pairing(
    wine: WineCharacteristics,
    category: FoodCategory,
    weights: RuleWeights = RuleWeights(),
    neutral: float = Config.NEUTRAL_SCORE,
) -> RuleBasedScore:
    """
    Calculate the rule-based pairing score for one wine.

    Args:
        wine: Wine characteristics (optional fields may be None)
        category: Classified food category
        weights: Dimension weights (wine type is most important)
        neutral: Score for missing or unrecognised characteristics

    Returns:
        RuleBasedScore with score 0-100 and breakdown
    """
    breakdown = RuleBreakdown(
        wine_type_match=score_wine_type_match(wine.wine_type, category, neutral),
        body_match=score_body_match(wine.body, category, neutral),
        tannin_match=score_tannin_match(wine.tannin_level, category, neutral),
        acidity_match=score_acidity_match(wine.acidity_level, category, neutral),
    )

    score = (
        breakdown.wine_type_match * weights.wine_type +
        breakdown.body_match * weights.body +
        breakdown.tannin_match * weights.tannin +
        breakdown.acidity_match * weights.acidity
    )
    # Weights summing to 1 within float tolerance can overshoot by an ulp
    score = min(100.0, max(0.0, score))

    return RuleBasedScore(score=score, breakdown=breakdown)


def explain_pairing(
    wine: WineCharacteristics,
    category: FoodCategory,
    rule_score: float,
    good_threshold: float = Config.GOOD_PAIRING_THRESHOLD,
) -> str:
    """
    Short human-readable justification for a pairing.

    Checks high-signal conditions in a fixed order; falls back to a generic
    sentence depending on whether the rule score is good.
    """
    explanations: list[str] = []

    if category == FoodCategory.RED_MEAT and wine.wine_type == "red":
        explanations.append("Classic pairing - red wine complements red meat beautifully")
    elif category == FoodCategory.FISH_SEAFOOD and wine.wine_type == "white":
        explanations.append("Perfect match - white wine enhances delicate seafood flavors")
    elif category == FoodCategory.PASTA and wine.wine_type in ("red", "white"):
        explanations.append("Italian classic - pairs wonderfully with pasta dishes")

    if wine.body == "full" and category in (
        FoodCategory.RED_MEAT, FoodCategory.RICH_FATTY, FoodCategory.GRILLED_SMOKED
    ):
        explanations.append("Full body matches the richness of the dish")
    elif wine.body == "light" and category in (FoodCategory.FISH_SEAFOOD, FoodCategory.VEGETABLES):
        explanations.append("Light body won't overpower delicate flavors")

    if wine.tannin_level == "high" and category in (FoodCategory.RED_MEAT, FoodCategory.RICH_FATTY):
        explanations.append("Tannins cut through fat and complement protein")

    if wine.acidity_level == "high" and category in (FoodCategory.RICH_FATTY, FoodCategory.CHEESE):
        explanations.append("High acidity balances richness perfectly")

    if not explanations:
        if rule_score >= good_threshold:
            return "Good pairing based on wine characteristics and food type"
        return "This wine could work depending on preparation and personal taste"

    return ". ".join(explanations)


def build_pairing_reason(wine: WineCharacteristics, explanation: str) -> str:
    """Combine the wine's own food pairings with the rule-based explanation."""
    reasons: list[str] = []

    if wine.food_pairings:
        reasons.append(f"Traditionally pairs with: {', '.join(wine.food_pairings[:2])}")

    if explanation:
        reasons.append(explanation)

    if not reasons:
        return "This wine matches your dish based on flavor profiles and characteristics"

    return ". ".join(reasons)
