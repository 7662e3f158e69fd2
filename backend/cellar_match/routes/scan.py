"""
/scan endpoints for Cellar Match.

Resolve a scanned label against catalog candidates the caller fetched,
and parse raw label extraction output.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from ..feature_flags import FeatureFlags, get_feature_flags
from ..models import CandidateWine, ExtractedLabel, ExtractedWineQuery, NearMissCandidate, ResolutionDebug
from ..services.label_parser import parse_label_extraction
from ..services.wine_matcher import ResolutionDebugResult, WineIdentityResolver

logger = logging.getLogger(__name__)
router = APIRouter()


class ResolveRequest(BaseModel):
    """Extracted label plus the pre-filtered catalog candidates."""
    query: ExtractedWineQuery
    candidates: list[CandidateWine] = Field(default_factory=list)


class ResolvedMatch(BaseModel):
    candidate_id: str
    score: float = Field(..., description="Match score (0-1, capped after the completeness bonus)")
    accepted: bool


class ResolveResponse(BaseModel):
    """Response from /scan/resolve."""
    match: Optional[ResolvedMatch] = None
    is_new_wine: bool = Field(..., description="True if no candidate matched: create a catalog entry")
    debug: Optional[ResolutionDebug] = Field(None, description="Only when debug=true")


class ParseLabelRequest(BaseModel):
    text: str = Field(..., description="Raw extraction model output")


def _to_debug(result: ResolutionDebugResult) -> ResolutionDebug:
    return ResolutionDebug(
        normalized_name=result.normalized_name,
        is_generic=result.is_generic,
        candidates_count=result.candidates_count,
        near_misses=[
            NearMissCandidate(
                candidate_id=nm.candidate_id,
                wine_name=nm.wine_name,
                score=round(nm.score, 4),
                name_score=round(nm.name_score, 4),
                producer_score=round(nm.producer_score, 4),
                rejection_reason=nm.rejection_reason.value,
            )
            for nm in result.near_misses
        ],
        rejection_reason=result.rejection_reason.value if result.rejection_reason else None,
    )


@router.post("/scan/resolve", response_model=ResolveResponse)
async def resolve_scan(
    request: ResolveRequest,
    debug: bool = Query(default=False, description="Include near-miss diagnostics"),
    flags: FeatureFlags = Depends(get_feature_flags),
) -> ResolveResponse:
    """
    Decide whether a scanned wine is already in the catalog.

    A null match is not an error: the caller should create a new wine.
    """
    resolver = WineIdentityResolver()

    if debug and flags.feature_resolution_debug:
        result = resolver.resolve_with_debug(request.query, request.candidates)
        match, debug_data = result.match, _to_debug(result)
    else:
        match, debug_data = resolver.resolve(request.query, request.candidates), None

    return ResolveResponse(
        match=ResolvedMatch(candidate_id=match.candidate_id, score=match.score, accepted=match.accepted) if match else None,
        is_new_wine=match is None,
        debug=debug_data,
    )


@router.post("/scan/parse-label", response_model=ExtractedLabel, response_model_by_alias=False)
async def parse_label(request: ParseLabelRequest) -> ExtractedLabel:
    """Parse label extraction output into structured wine data."""
    label = parse_label_extraction(request.text)
    if label is None:
        raise HTTPException(status_code=422, detail="Could not parse label extraction output")
    return label
