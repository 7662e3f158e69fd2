"""
Tests for the wine embedding text builder.
"""

import pytest

from cellar_match.models import EnrichmentData, TastingNotes
from cellar_match.services.embedding_text import (
    build_wine_text_for_embedding,
    has_valid_enrichment_for_embedding,
)


@pytest.fixture
def enrichment():
    return EnrichmentData(
        summary="Powerful, structured Nebbiolo.",
        tasting_notes=TastingNotes(nose="Tar and roses", palate="Firm tannins", finish="Long"),
        food_pairings=["Braised beef", "Truffle risotto"],
        signature_traits="Built for the cellar.",
        terroir="Calcareous marl.",
    )


class TestBuildWineText:
    def test_section_order(self, enrichment):
        text = build_wine_text_for_embedding("Barolo", "Conterno", enrichment, wine_type="red", primary_grape="Nebbiolo")
        assert text.split("\n\n") == [
            "Barolo • Conterno • red • Nebbiolo",
            "Powerful, structured Nebbiolo.",
            "Tasting: Tar and roses Firm tannins Long",
            "Pairs with: Braised beef, Truffle risotto",
            "Built for the cellar.",
            "Calcareous marl.",
        ]

    def test_identity_only(self):
        text = build_wine_text_for_embedding("Barolo", "Conterno", EnrichmentData())
        assert text == "Barolo • Conterno"

    def test_requires_name_and_producer(self, enrichment):
        with pytest.raises(ValueError):
            build_wine_text_for_embedding("", "Conterno", enrichment)
        with pytest.raises(ValueError):
            build_wine_text_for_embedding("Barolo", "", enrichment)

    def test_camel_case_enrichment(self):
        data = EnrichmentData.model_validate({
            "summary": "Fresh",
            "foodPairings": ["Oysters"],
            "tastingNotes": {"nose": "Citrus"},
        })
        text = build_wine_text_for_embedding("Chablis", "Raveneau", data)
        assert "Pairs with: Oysters" in text
        assert "Tasting: Citrus" in text


class TestHasValidEnrichment:
    def test_summary_is_enough(self):
        assert has_valid_enrichment_for_embedding(EnrichmentData(summary="Fresh"))

    def test_needs_tasting_notes_and_pairings_without_summary(self):
        notes = TastingNotes(palate="Crisp")
        assert has_valid_enrichment_for_embedding(EnrichmentData(tasting_notes=notes, food_pairings=["Oysters"]))
        assert not has_valid_enrichment_for_embedding(EnrichmentData(tasting_notes=notes))
        assert not has_valid_enrichment_for_embedding(EnrichmentData(food_pairings=["Oysters"]))

    def test_none_or_empty(self):
        assert not has_valid_enrichment_for_embedding(None)
        assert not has_valid_enrichment_for_embedding(EnrichmentData())
