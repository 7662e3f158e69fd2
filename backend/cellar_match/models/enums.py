"""
Enums for type-safe string constants in Cellar Match.
"""

from enum import Enum


class FoodCategory(str, Enum):
    """Closed set of dish categories used to index pairing tables."""
    RED_MEAT = "red-meat"
    WHITE_MEAT = "white-meat"
    FISH_SEAFOOD = "fish-seafood"
    PASTA = "pasta"
    CHEESE = "cheese"
    VEGETABLES = "vegetables"
    SPICY = "spicy"
    RICH_FATTY = "rich-fatty"
    GRILLED_SMOKED = "grilled-smoked"
    DESSERT = "dessert"
    UNKNOWN = "unknown"


class WineType(str, Enum):
    """Wine style category."""
    RED = "red"
    WHITE = "white"
    ROSE = "rose"
    SPARKLING = "sparkling"
    DESSERT = "dessert"
    FORTIFIED = "fortified"


class RejectionReason(str, Enum):
    """Why a catalog candidate did not become the resolved match."""
    NO_CANDIDATES = "no_candidates"
    GENERIC_PRODUCER_VETO = "generic_producer_veto"
    VINTAGE_MISMATCH = "vintage_mismatch"
    BELOW_THRESHOLD = "below_threshold"
    NOT_BEST = "not_best"
