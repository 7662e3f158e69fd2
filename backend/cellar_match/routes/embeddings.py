"""
POST /embeddings/wine-text endpoint for Cellar Match.

Returns the text a caller should embed for a wine. The embedding itself
is generated by the caller's embedding service.
"""

from typing import Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel

from ..models import EnrichmentData
from ..services.embedding_text import build_wine_text_for_embedding, has_valid_enrichment_for_embedding

router = APIRouter()


class WineTextRequest(BaseModel):
    wine_name: str
    producer_name: str
    wine_type: Optional[str] = None
    primary_grape: Optional[str] = None
    enrichment: EnrichmentData


class WineTextResponse(BaseModel):
    text: str
    sufficient_enrichment: bool


@router.post("/embeddings/wine-text", response_model=WineTextResponse)
async def wine_embedding_text(request: WineTextRequest) -> WineTextResponse:
    """Build the embedding document for one wine."""
    try:
        text = build_wine_text_for_embedding(
            wine_name=request.wine_name,
            producer_name=request.producer_name,
            enrichment=request.enrichment,
            wine_type=request.wine_type,
            primary_grape=request.primary_grape,
        )
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return WineTextResponse(
        text=text,
        sufficient_enrichment=has_valid_enrichment_for_embedding(request.enrichment),
    )
