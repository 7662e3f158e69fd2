"""
Tests for text normalization and string similarity.
"""

import pytest

from cellar_match.services.text_matching import levenshtein_distance, normalize, similarity


class TestNormalize:
    def test_strips_diacritics_and_lowercases(self):
        assert normalize("Château Margaux") == "chateau margaux"

    def test_removes_punctuation(self):
        assert normalize("Domaine de l'Arlot, Nuits-St-Georges!") == "domaine de larlot nuitsstgeorges"

    def test_trims_and_collapses_whitespace(self):
        assert normalize("  pinot   noir \t") == "pinot noir"

    def test_keeps_digits(self):
        assert normalize("Cuvée No. 5 (2015)") == "cuvee no 5 2015"

    def test_empty_and_none(self):
        assert normalize("") == ""
        assert normalize(None) == ""
        assert normalize("   ") == ""
        assert normalize("!!!") == ""

    @pytest.mark.parametrize("text", [
        "Château Margaux",
        "Grüner Veltliner",
        "  Moët & Chandon  ",
        "Côtes-du-Rhône Villages",
    ])
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once


class TestLevenshteinDistance:
    def test_known_distances(self):
        assert levenshtein_distance("kitten", "sitting") == 3
        assert levenshtein_distance("", "abc") == 3
        assert levenshtein_distance("abc", "abc") == 0

    def test_symmetric(self):
        assert levenshtein_distance("merlot", "merlin") == levenshtein_distance("merlin", "merlot")


class TestSimilarity:
    def test_identical_is_one(self):
        assert similarity("Opus One", "Opus One") == 1.0

    def test_two_empty_strings_are_identical(self):
        assert similarity("", "") == 1.0
        assert similarity(None, "") == 1.0

    def test_empty_vs_non_empty_is_zero(self):
        assert similarity("", "abc") == 0.0

    def test_case_accent_and_spacing_differences_ignored(self):
        assert similarity("Pinot Noir", "pinot   noir") == 1.0
        assert similarity("Château Margaux", "chateau margaux") == 1.0

    def test_score_formula(self):
        # "abcd" vs "abxy": distance 2 over length 4
        assert similarity("abcd", "abxy") == pytest.approx(0.5)

    def test_symmetric(self):
        pairs = [("Caymus", "Caymus Vineyards"), ("Barolo", "Barbaresco"), ("Leroy", "Drouhin")]
        for a, b in pairs:
            assert similarity(a, b) == similarity(b, a)

    def test_bounded(self):
        for a, b in [("a", "zzzzzz"), ("Opus One", "Opus"), ("x", "x")]:
            assert 0.0 <= similarity(a, b) <= 1.0
