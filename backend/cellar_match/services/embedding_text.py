"""
Text representation of a wine for embedding.

Combines identity and enrichment data into one document so the embedding
captures what matters for food pairing: tasting notes, food pairings and
signature traits. Generating the vector is the embedder's job.
"""

from typing import Optional

from ..models.wine import EnrichmentData


def build_wine_text_for_embedding(
    wine_name: str,
    producer_name: str,
    enrichment: EnrichmentData,
    wine_type: Optional[str] = None,
    primary_grape: Optional[str] = None,
) -> str:
    """
    Build the text to embed for one wine.

    Sections are separated by blank lines: identity line, summary, overview,
    tasting notes, food pairings, signature traits, terroir.

    Raises:
        ValueError: If wine name or producer is missing, or no text results
    """
    if not wine_name or not producer_name:
        raise ValueError("Wine name and producer name are required")

    sections: list[str] = []

    basic_info = " • ".join(part for part in (wine_name, producer_name, wine_type, primary_grape) if part)
    sections.append(basic_info)

    if enrichment.summary:
        sections.append(enrichment.summary)

    if enrichment.overview:
        sections.append(enrichment.overview)

    # Tasting notes matter most for food pairing
    if enrichment.tasting_notes:
        notes = enrichment.tasting_notes
        tasting_text = " ".join(part for part in (notes.nose, notes.palate, notes.finish) if part)
        if tasting_text:
            sections.append(f"Tasting: {tasting_text}")

    if enrichment.food_pairings:
        sections.append(f"Pairs with: {', '.join(enrichment.food_pairings)}")

    if enrichment.signature_traits:
        sections.append(enrichment.signature_traits)

    if enrichment.terroir:
        sections.append(enrichment.terroir)

    text = "\n\n".join(sections)
    if not text.strip():
        raise ValueError("Failed to build text representation for wine")
    return text


def has_valid_enrichment_for_embedding(enrichment: Optional[EnrichmentData]) -> bool:
    """Enough data to embed: a summary, or tasting notes plus food pairings."""
    if enrichment is None:
        return False

    has_summary = bool(enrichment.summary)
    notes = enrichment.tasting_notes
    has_tasting_notes = bool(notes and (notes.nose or notes.palate or notes.finish))
    has_food_pairings = bool(enrichment.food_pairings)

    return has_summary or (has_tasting_notes and has_food_pairings)
