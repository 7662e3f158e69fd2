"""
Tests for label extraction parsing.
"""

from cellar_match.services.label_parser import parse_label_extraction, strip_code_fences


class TestStripCodeFences:
    def test_json_fence(self):
        assert strip_code_fences('```json\n{"a": 1}\n```') == '{"a": 1}'

    def test_plain_fence(self):
        assert strip_code_fences('```\n{"a": 1}\n```') == '{"a": 1}'

    def test_no_fence(self):
        assert strip_code_fences('  {"a": 1}  ') == '{"a": 1}'


class TestParseLabelExtraction:
    def test_camel_case_payload(self):
        text = """```json
        {
          "wineName": "Barolo Cannubi",
          "producerName": "Brezza",
          "vintage": 2016,
          "wineType": "red",
          "country": "Italy",
          "region": "Piedmont",
          "subRegion": null,
          "primaryGrape": "Nebbiolo",
          "confidence": 0.92
        }
        ```"""
        label = parse_label_extraction(text)
        assert label is not None
        assert label.wine_name == "Barolo Cannubi"
        assert label.producer_name == "Brezza"
        assert label.vintage == 2016
        assert label.primary_grape == "Nebbiolo"
        assert label.confidence == 0.92

    def test_snake_case_payload(self):
        label = parse_label_extraction('{"wine_name": "Chardonnay", "producer_name": "Kistler"}')
        assert label is not None
        assert label.vintage is None
        assert label.confidence == 0.5

    def test_to_query(self):
        label = parse_label_extraction('{"wineName": "Opus One", "producerName": "Opus One Winery", "vintage": "2018"}')
        query = label.to_query()
        assert query.name == "Opus One"
        assert query.producer_name == "Opus One Winery"
        assert query.vintage == 2018

    def test_invalid_json(self):
        assert parse_label_extraction("I could not read this label") is None

    def test_not_an_object(self):
        assert parse_label_extraction('["Opus One"]') is None

    def test_missing_required_fields(self):
        assert parse_label_extraction('{"vintage": 2018}') is None

    def test_empty(self):
        assert parse_label_extraction("") is None
        assert parse_label_extraction(None) is None
