"""
Pydantic models for wine data supplied by callers.

These are read-only snapshots: the core never fetches or mutates them.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel


def cosine_distance_to_similarity(distance: float) -> float:
    """
    Convert a cosine distance (0 = identical, 2 = opposite) to a 0-100 score.

    similarity = clamp((2 - distance) / 2, 0, 1) * 100
    """
    cosine_similarity = (2 - distance) / 2
    return max(0.0, min(1.0, cosine_similarity)) * 100


class ExtractedWineQuery(BaseModel):
    """Wine description extracted from a label scan, to resolve against the catalog."""
    name: str = Field(..., description="Wine name as read from the label")
    producer_name: str = Field(..., description="Producer / winery name")
    vintage: Optional[int] = Field(None, description="Vintage year, None if NV or not visible")


class CandidateWine(BaseModel):
    """Catalog entry that may be the same wine as an extracted query."""
    id: str = Field(..., description="Catalog wine ID")
    name: str
    producer_name: str
    vintage: Optional[int] = None
    country: Optional[str] = None
    region: Optional[str] = None
    has_enrichment: bool = Field(False, description="True if AI enrichment data exists")


class WineCharacteristics(BaseModel):
    """Structured wine traits used for food pairing."""
    wine_id: Optional[str] = None
    wine_name: Optional[str] = None
    producer_name: Optional[str] = None
    vintage: Optional[int] = None
    wine_type: str = Field(..., description="red, white, rose, sparkling, dessert or fortified")
    body: Optional[str] = Field(None, description="light, medium or full")
    tannin_level: Optional[str] = Field(None, description="low, medium or high")
    acidity_level: Optional[str] = Field(None, description="low, medium or high")
    sweetness_level: Optional[str] = Field(None, description="dry, off-dry, medium, sweet or very_sweet")
    primary_grape: Optional[str] = None
    food_pairings: list[str] = Field(default_factory=list)

    @field_validator("wine_type")
    @classmethod
    def normalize_wine_type(cls, v: str) -> str:
        """Lowercase and fold 'rosé' to 'rose' so table lookups hit."""
        return v.strip().lower().replace("rosé", "rose")

    @field_validator("body", "tannin_level", "acidity_level", "sweetness_level")
    @classmethod
    def normalize_level(cls, v: Optional[str]) -> Optional[str]:
        """Lowercase levels; blank strings count as missing."""
        if v is None:
            return None
        v = v.strip().lower()
        return v or None

    @field_validator("food_pairings", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return [] if v is None else v


class PairingCandidate(WineCharacteristics):
    """
    A wine offered for ranking, optionally with a semantic similarity score.

    Either `similarity_score` (0-100) or the raw cosine `distance` from the
    vector index may be supplied; a distance is converted on validation.
    """
    similarity_score: Optional[float] = Field(None, ge=0, le=100)
    distance: Optional[float] = Field(None, description="Raw cosine distance (0-2)")

    @model_validator(mode="after")
    def derive_similarity(self) -> "PairingCandidate":
        if self.similarity_score is None and self.distance is not None:
            self.similarity_score = cosine_distance_to_similarity(self.distance)
        return self


class TastingNotes(BaseModel):
    nose: Optional[str] = None
    palate: Optional[str] = None
    finish: Optional[str] = None


class EnrichmentData(BaseModel):
    """AI enrichment payload stored alongside a catalog wine."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    summary: Optional[str] = None
    overview: Optional[str] = None
    terroir: Optional[str] = None
    tasting_notes: Optional[TastingNotes] = None
    food_pairings: list[str] = Field(default_factory=list)
    signature_traits: Optional[str] = None


class ExtractedLabel(BaseModel):
    """Structured label data returned by the extraction model."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    wine_name: str
    producer_name: str
    vintage: Optional[int] = None
    wine_type: Optional[str] = None
    country: Optional[str] = None
    region: Optional[str] = None
    sub_region: Optional[str] = None
    primary_grape: Optional[str] = None
    confidence: float = Field(0.5, ge=0, le=1)

    def to_query(self) -> ExtractedWineQuery:
        """Reduce to the fields used for catalog resolution."""
        return ExtractedWineQuery(
            name=self.wine_name,
            producer_name=self.producer_name,
            vintage=self.vintage,
        )
