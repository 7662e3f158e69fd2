"""
Tests for environment-backed config and feature flags.
"""

from cellar_match.config import Config
from cellar_match.feature_flags import get_feature_flags


class TestFeatureFlags:
    def test_all_on_by_default(self, monkeypatch):
        for name in ("FEATURE_SEMANTIC_PAIRING", "FEATURE_RESOLUTION_DEBUG", "FEATURE_PAIRING_REASONS"):
            monkeypatch.delenv(name, raising=False)
        flags = get_feature_flags()
        assert flags.feature_semantic_pairing
        assert flags.feature_resolution_debug
        assert flags.feature_pairing_reasons

    def test_env_override(self, monkeypatch):
        monkeypatch.setenv("FEATURE_SEMANTIC_PAIRING", "false")
        assert get_feature_flags().feature_semantic_pairing is False


class TestConfig:
    def test_cors_origins(self, monkeypatch):
        monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")
        assert Config.cors_origins() == ["https://a.example", "https://b.example"]

    def test_default_limit(self, monkeypatch):
        monkeypatch.delenv("PAIRING_DEFAULT_LIMIT", raising=False)
        assert Config.default_recommendation_limit() == 10
        monkeypatch.setenv("PAIRING_DEFAULT_LIMIT", "5")
        assert Config.default_recommendation_limit() == 5
        monkeypatch.setenv("PAIRING_DEFAULT_LIMIT", "lots")
        assert Config.default_recommendation_limit() == 10

    def test_default_limit_clamped(self, monkeypatch):
        monkeypatch.setenv("PAIRING_DEFAULT_LIMIT", "500")
        assert Config.default_recommendation_limit() == Config.MAX_RECOMMENDATION_LIMIT
        monkeypatch.setenv("PAIRING_DEFAULT_LIMIT", "0")
        assert Config.default_recommendation_limit() == 1

    def test_log_level_uppercased(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert Config.log_level() == "DEBUG"
