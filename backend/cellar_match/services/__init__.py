from .text_matching import normalize, similarity
from .wine_matcher import WineIdentityResolver, MatchResult, resolve_wine_identity
from .food_classifier import classify_food
from .pairing import score_rule_based_pairing, explain_pairing
from .hybrid_ranker import HybridRanker, rank_pairings
from .pairing_search import PairingSearchService

__all__ = [
    "normalize",
    "similarity",
    "WineIdentityResolver",
    "MatchResult",
    "resolve_wine_identity",
    "classify_food",
    "score_rule_based_pairing",
    "explain_pairing",
    "HybridRanker",
    "rank_pairings",
    "PairingSearchService",
]
