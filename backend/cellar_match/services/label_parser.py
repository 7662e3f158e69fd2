"""
Parse the label extraction model's JSON output.

The extraction model is asked for a JSON object but often wraps it in a
Markdown code block. Parsing never raises: malformed output yields None
and the caller treats the scan as unreadable.
"""

import json
import logging
from typing import Optional

from pydantic import ValidationError

from ..models.wine import ExtractedLabel

logger = logging.getLogger(__name__)


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```json ... ``` or ``` ... ``` block, if any."""
    cleaned = text.strip()
    if cleaned.startswith("```json"):
        cleaned = cleaned[7:]
    elif cleaned.startswith("```"):
        cleaned = cleaned[3:]
    if cleaned.endswith("```"):
        cleaned = cleaned[:-3]
    return cleaned.strip()


def parse_label_extraction(response_text: Optional[str]) -> Optional[ExtractedLabel]:
    """
    Parse extraction output into an ExtractedLabel.

    Accepts camelCase ("wineName") or snake_case ("wine_name") keys.

    Returns:
        ExtractedLabel, or None if the text is empty, not JSON, or missing
        the wine/producer names
    """
    if not response_text or not response_text.strip():
        return None

    try:
        data = json.loads(strip_code_fences(response_text))
    except json.JSONDecodeError as e:
        logger.warning(f"Label extraction is not valid JSON: {e}")
        return None

    if not isinstance(data, dict):
        logger.warning(f"Label extraction is not a JSON object: {type(data).__name__}")
        return None

    try:
        return ExtractedLabel.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Label extraction failed validation: {e.error_count()} error(s)")
        return None
