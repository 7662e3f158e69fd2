"""
Debug response models for resolution introspection.

These models are only included when ?debug=true is passed to /scan/resolve.
"""

from typing import Optional

from pydantic import BaseModel, Field


class NearMissCandidate(BaseModel):
    """A catalog candidate that was considered but not selected."""
    candidate_id: str = Field(..., description="Catalog wine ID")
    wine_name: str = Field(..., description="Catalog wine name")
    score: float = Field(..., description="Total score including completeness bonus")
    name_score: float = Field(..., description="Name similarity (0-1)")
    producer_score: float = Field(..., description="Producer similarity (0-1)")
    rejection_reason: str = Field(
        ...,
        description="generic_producer_veto, vintage_mismatch, below_threshold or not_best",
    )


class ResolutionDebug(BaseModel):
    """Diagnostics for one catalog resolution."""
    normalized_name: str = Field(..., description="Query name after normalization")
    is_generic: bool = Field(..., description="Query name is a bare grape varietal")
    candidates_count: int = Field(..., description="Candidates supplied by the caller")
    near_misses: list[NearMissCandidate] = Field(default_factory=list)
    rejection_reason: Optional[str] = Field(None, description="Why nothing matched, if so")
