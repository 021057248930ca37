"""Parsing of JSON answers into pydantic models."""

from __future__ import annotations

import json
import logging
from typing import Any

from pydantic import BaseModel, ValidationError

log = logging.getLogger(__name__)


def _strip_code_fence(text: str) -> str:
    json_text = text.strip()
    # Gemini often wraps JSON in a markdown block even when asked not to
    if json_text.startswith("```json") and json_text.endswith("```"):
        json_text = json_text[7:-3].strip()
        log.debug("Extracted JSON from markdown wrapper.")
    elif json_text.startswith("```") and json_text.endswith("```"):
        json_text = json_text[3:-3].strip()
        log.debug("Extracted content from generic markdown wrapper.")
    return json_text


def load_json(text: str) -> Any:
    """Decode a possibly fenced JSON answer; raises ``json.JSONDecodeError``."""
    return json.loads(_strip_code_fence(text))


def parse_structured[M: BaseModel](text: str, model: type[M]) -> M | None:
    """Validate ``text`` against ``model``.

    Returns None (and logs why) when the text is not JSON or does not match
    the schema; callers treat that like an empty response.
    """
    try:
        data = load_json(text)
    except json.JSONDecodeError as e:
        log.warning("Failed to decode JSON from response text: %s", e)
        return None
    try:
        return model.model_validate(data)
    except ValidationError:
        log.error(
            "Response JSON did not match the %s schema.", model.__name__, exc_info=True
        )
        return None
