from .enums import (
    FoodCategory,
    WineType,
    RejectionReason,
)
from .wine import (
    ExtractedWineQuery,
    CandidateWine,
    WineCharacteristics,
    PairingCandidate,
    TastingNotes,
    EnrichmentData,
    ExtractedLabel,
    cosine_distance_to_similarity,
)
from .pairing import (
    ScoreBreakdown,
    MatchScore,
    Recommendation,
    PairingSearchResult,
)
from .debug import (
    NearMissCandidate,
    ResolutionDebug,
)

__all__ = [
    "FoodCategory",
    "WineType",
    "RejectionReason",
    "ExtractedWineQuery",
    "CandidateWine",
    "WineCharacteristics",
    "PairingCandidate",
    "TastingNotes",
    "EnrichmentData",
    "ExtractedLabel",
    "cosine_distance_to_similarity",
    "ScoreBreakdown",
    "MatchScore",
    "Recommendation",
    "PairingSearchResult",
    "NearMissCandidate",
    "ResolutionDebug",
]
