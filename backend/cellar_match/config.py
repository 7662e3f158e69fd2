"""
Centralized configuration for the Cellar Match backend.

All matching and scoring constants are defined here to avoid scattered
magic numbers. Services take them as constructor defaults, so any of them
can be overridden per instance.
"""

import os
from typing import List


class Config:
    """Application configuration constants."""

    # === Catalog Resolution ===
    MATCH_ACCEPT_THRESHOLD = 0.85            # Strictly greater than this to accept
    GENERIC_PRODUCER_MIN_SIMILARITY = 0.40   # Generic varietal names need this producer match

    # Name/producer weights for specific wine names ("Opus One")
    NAME_WEIGHT = 0.70
    PRODUCER_WEIGHT = 0.30
    # Generic varietal names ("Chardonnay") lean on the producer instead
    GENERIC_NAME_WEIGHT = 0.40
    GENERIC_PRODUCER_WEIGHT = 0.60

    # Completeness bonus: prefer richer catalog records on near-ties
    BONUS_VINTAGE = 0.01
    BONUS_COUNTRY = 0.01
    BONUS_REGION = 0.01
    BONUS_ENRICHMENT = 0.02

    NEAR_MISS_LIMIT = 5

    # === Rule-Based Pairing ===
    RULE_WEIGHT_WINE_TYPE = 0.40
    RULE_WEIGHT_BODY = 0.25
    RULE_WEIGHT_TANNIN = 0.20
    RULE_WEIGHT_ACIDITY = 0.15
    NEUTRAL_SCORE = 50                       # Missing or unknown characteristic
    GOOD_PAIRING_THRESHOLD = 70

    # === Hybrid Ranking ===
    SEMANTIC_WEIGHT = 0.6
    RULE_WEIGHT = 0.4
    SEMANTIC_OVERFETCH_FACTOR = 2            # Fetch 2x limit from vector search for re-ranking
    DEFAULT_RECOMMENDATION_LIMIT = 10
    MAX_RECOMMENDATION_LIMIT = 50

    # === Environment ===
    @staticmethod
    def log_level() -> str:
        """Log level (DEBUG, INFO, WARNING, ERROR)."""
        return os.getenv("LOG_LEVEL", "INFO").upper()

    @staticmethod
    def is_dev() -> bool:
        """Development mode (relaxed CORS, verbose startup log)."""
        return os.getenv("DEV_MODE", "false").lower() == "true"

    @staticmethod
    def cors_origins() -> List[str]:
        """Comma-separated allowed origins. Default: local dev frontend."""
        raw = os.getenv("CORS_ORIGINS", "http://localhost:3000")
        return [origin.strip() for origin in raw.split(",") if origin.strip()]

    @staticmethod
    def default_recommendation_limit() -> int:
        """Default number of pairing recommendations returned, clamped to 1..MAX_RECOMMENDATION_LIMIT."""
        try:
            limit = int(os.getenv("PAIRING_DEFAULT_LIMIT", str(Config.DEFAULT_RECOMMENDATION_LIMIT)))
        except ValueError:
            return Config.DEFAULT_RECOMMENDATION_LIMIT
        return max(1, min(limit, Config.MAX_RECOMMENDATION_LIMIT))
