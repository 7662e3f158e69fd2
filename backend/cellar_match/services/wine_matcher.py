"""
Catalog entity resolution for scanned wine labels.

Decides whether an extracted label (name, producer, vintage) is a wine the
catalog already knows, given a short candidate list the caller fetched
(e.g. a producer substring search). No I/O happens here.

Scoring per candidate:
1. Name and producer edit-distance similarity on normalized text
2. Generic varietal veto ("Chardonnay" alone must not match any producer)
3. Weighted sum (name-heavy, or producer-heavy for generic names)
4. Completeness bonus for richer catalog records (max +0.05)
5. Vintage gate and acceptance threshold

The highest eligible total wins; on ties the first candidate is kept.
The winner is compared on its uncapped total but reported capped at 1.0.
"No match" means the caller should create a new catalog entry.
"""

import logging
from dataclasses import dataclass, field
from typing import Iterable, Optional

from ..config import Config
from ..models.enums import RejectionReason
from ..models.wine import CandidateWine, ExtractedWineQuery
from .text_matching import normalize, similarity

logger = logging.getLogger(__name__)


# Bare grape varietals. A label reading only "Pinot Noir" says nothing about
# which wine it is, so the producer has to carry the match.
GENERIC_VARIETAL_NAMES = frozenset({
    'pinot noir', 'pinot grigio', 'pinot gris', 'chardonnay',
    'cabernet sauvignon', 'merlot', 'sauvignon blanc', 'riesling',
    'syrah', 'shiraz', 'malbec', 'zinfandel',
    'sangiovese', 'tempranillo', 'grenache', 'nebbiolo',
})


def is_generic_varietal(name: Optional[str], generic_names: Iterable[str] = GENERIC_VARIETAL_NAMES) -> bool:
    """True if the name, once normalized, is only a grape varietal."""
    return normalize(name) in generic_names


@dataclass
class MatchResult:
    """The catalog wine an extracted label resolved to."""
    candidate_id: str
    score: float            # Total score, capped at 1.0
    accepted: bool
    name_score: float = 0.0
    producer_score: float = 0.0


@dataclass
class CandidateScore:
    """Full scoring trace for one candidate."""
    candidate: CandidateWine
    name_score: float
    producer_score: float
    raw_score: float
    total_score: float
    vetoed: bool
    vintage_match: bool
    eligible: bool

    @property
    def rejection_reason(self) -> Optional[RejectionReason]:
        if self.vetoed:
            return RejectionReason.GENERIC_PRODUCER_VETO
        if not self.vintage_match:
            return RejectionReason.VINTAGE_MISMATCH
        if not self.eligible:
            return RejectionReason.BELOW_THRESHOLD
        return None


@dataclass
class NearMiss:
    """A candidate that was considered but didn't make the final match."""
    candidate_id: str
    wine_name: str
    score: float
    name_score: float
    producer_score: float
    rejection_reason: RejectionReason


@dataclass
class ResolutionDebugResult:
    """Result from resolve_with_debug() with diagnostic info."""
    match: Optional[MatchResult]
    normalized_name: str
    is_generic: bool
    candidates_count: int
    near_misses: list[NearMiss] = field(default_factory=list)
    rejection_reason: Optional[RejectionReason] = None


class WineIdentityResolver:
    """
    Resolves extracted labels against caller-supplied catalog candidates.

    Thresholds and weights default to Config and can be overridden per
    instance. Instances hold no mutable state and are safe to share.
    """

    def __init__(
        self,
        accept_threshold: float = Config.MATCH_ACCEPT_THRESHOLD,
        generic_producer_min: float = Config.GENERIC_PRODUCER_MIN_SIMILARITY,
        name_weight: float = Config.NAME_WEIGHT,
        producer_weight: float = Config.PRODUCER_WEIGHT,
        generic_name_weight: float = Config.GENERIC_NAME_WEIGHT,
        generic_producer_weight: float = Config.GENERIC_PRODUCER_WEIGHT,
        generic_names: Iterable[str] = GENERIC_VARIETAL_NAMES,
        near_miss_limit: int = Config.NEAR_MISS_LIMIT,
        bonus_vintage: float = Config.BONUS_VINTAGE,
        bonus_country: float = Config.BONUS_COUNTRY,
        bonus_region: float = Config.BONUS_REGION,
        bonus_enrichment: float = Config.BONUS_ENRICHMENT,
    ):
        self.accept_threshold = accept_threshold
        self.generic_producer_min = generic_producer_min
        self.name_weight = name_weight
        self.producer_weight = producer_weight
        self.generic_name_weight = generic_name_weight
        self.generic_producer_weight = generic_producer_weight
        self.generic_names = frozenset(generic_names)
        self.near_miss_limit = near_miss_limit
        self.bonus_vintage = bonus_vintage
        self.bonus_country = bonus_country
        self.bonus_region = bonus_region
        self.bonus_enrichment = bonus_enrichment

    def is_generic(self, query: ExtractedWineQuery) -> bool:
        return is_generic_varietal(query.name, self.generic_names)

    def completeness_bonus(self, candidate: CandidateWine) -> float:
        """Small bonus for catalog records with more metadata (max +0.05 by default)."""
        bonus = 0.0
        if candidate.vintage is not None:
            bonus += self.bonus_vintage
        if candidate.country and candidate.country.strip():
            bonus += self.bonus_country
        if candidate.region and candidate.region.strip():
            bonus += self.bonus_region
        if candidate.has_enrichment:
            bonus += self.bonus_enrichment
        return bonus

    def score_candidate(
        self,
        query: ExtractedWineQuery,
        candidate: CandidateWine,
        is_generic: Optional[bool] = None,
    ) -> CandidateScore:
        """Score one candidate against the query."""
        if is_generic is None:
            is_generic = self.is_generic(query)

        name_score = similarity(candidate.name, query.name)
        producer_score = similarity(candidate.producer_name, query.producer_name)

        vetoed = is_generic and producer_score < self.generic_producer_min

        if is_generic:
            name_weight, producer_weight = self.generic_name_weight, self.generic_producer_weight
        else:
            name_weight, producer_weight = self.name_weight, self.producer_weight

        raw_score = name_score * name_weight + producer_score * producer_weight
        total_score = raw_score + self.completeness_bonus(candidate)

        # A present-but-different vintage is a different catalog entry
        vintage_match = query.vintage is None or candidate.vintage == query.vintage

        eligible = (
            not vetoed
            and total_score > self.accept_threshold
            and vintage_match
        )

        return CandidateScore(
            candidate=candidate,
            name_score=name_score,
            producer_score=producer_score,
            raw_score=raw_score,
            total_score=total_score,
            vetoed=vetoed,
            vintage_match=vintage_match,
            eligible=eligible,
        )

    def _score_all(self, query: ExtractedWineQuery, candidates: list[CandidateWine]) -> tuple[bool, list[CandidateScore]]:
        is_generic = self.is_generic(query)
        return is_generic, [self.score_candidate(query, c, is_generic) for c in candidates]

    @staticmethod
    def _pick_best(scored: list[CandidateScore]) -> Optional[CandidateScore]:
        # Strict > keeps the first-seen candidate on ties
        best: Optional[CandidateScore] = None
        for entry in scored:
            if not entry.eligible:
                continue
            if best is None or entry.total_score > best.total_score:
                best = entry
        return best

    @staticmethod
    def _to_result(entry: CandidateScore) -> MatchResult:
        return MatchResult(
            candidate_id=entry.candidate.id,
            score=min(entry.total_score, 1.0),
            accepted=True,
            name_score=entry.name_score,
            producer_score=entry.producer_score,
        )

    def resolve(self, query: ExtractedWineQuery, candidates: list[CandidateWine]) -> Optional[MatchResult]:
        """
        Find the catalog wine this query refers to.

        Args:
            query: Name/producer/vintage extracted from a label
            candidates: Pre-filtered catalog wines (may be empty)

        Returns:
            MatchResult for the best eligible candidate, None otherwise
        """
        if not candidates:
            return None

        _, scored = self._score_all(query, candidates)
        best = self._pick_best(scored)

        if best is None:
            logger.debug(f"No catalog match for '{query.name}' by '{query.producer_name}' ({len(candidates)} candidates)")
            return None

        logger.info(
            f"Matched '{query.name}' to catalog wine {best.candidate.id} "
            f"'{best.candidate.name}' ({best.total_score * 100:.1f}% match)"
        )
        return self._to_result(best)

    def resolve_many(
        self,
        requests: list[tuple[ExtractedWineQuery, list[CandidateWine]]],
    ) -> list[Optional[MatchResult]]:
        """Resolve multiple (query, candidates) pairs, e.g. a batch label scan."""
        return [self.resolve(query, candidates) for query, candidates in requests]

    def resolve_with_debug(self, query: ExtractedWineQuery, candidates: list[CandidateWine]) -> ResolutionDebugResult:
        """
        Resolve with full diagnostics (near-misses, rejection reasons).

        Returns the same match as resolve() for the same input.
        """
        normalized_name = normalize(query.name)

        if not candidates:
            return ResolutionDebugResult(
                match=None,
                normalized_name=normalized_name,
                is_generic=self.is_generic(query),
                candidates_count=0,
                rejection_reason=RejectionReason.NO_CANDIDATES,
            )

        is_generic, scored = self._score_all(query, candidates)
        best = self._pick_best(scored)

        near_misses = [
            NearMiss(
                candidate_id=entry.candidate.id,
                wine_name=entry.candidate.name,
                score=entry.total_score,
                name_score=entry.name_score,
                producer_score=entry.producer_score,
                rejection_reason=entry.rejection_reason or RejectionReason.NOT_BEST,
            )
            for entry in scored
            if entry is not best
        ]
        near_misses.sort(key=lambda nm: nm.score, reverse=True)

        rejection_reason = None
        if best is None:
            # Explain the miss by the candidate that came closest
            rejection_reason = near_misses[0].rejection_reason

        return ResolutionDebugResult(
            match=self._to_result(best) if best is not None else None,
            normalized_name=normalized_name,
            is_generic=is_generic,
            candidates_count=len(candidates),
            near_misses=near_misses[:self.near_miss_limit],
            rejection_reason=rejection_reason,
        )


def resolve_wine_identity(query: ExtractedWineQuery, candidates: list[CandidateWine]) -> Optional[MatchResult]:
    """Resolve with default thresholds. See WineIdentityResolver.resolve()."""
    return WineIdentityResolver().resolve(query, candidates)
