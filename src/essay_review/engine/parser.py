"""Multi-layer JSON extraction and critique item validation.

Handles non-ideal model outputs through three extraction strategies:
1. Direct JSON parse
2. Code-fence extraction (```json ... ```)
3. Outermost brace or bracket extraction

Items are validated one by one: entries without a usable phrase are dropped,
unknown polarities fall back to "needs-improvement", and every surviving
item gets its id at this point, from its position in the model's list.
"""

import json
import re
from collections.abc import Iterator
from typing import Any

from pydantic import ValidationError

from ..logging import logger
from ..schemas.critique import CritiqueItem
from .annotator import fallback_id

VALID_POLARITIES = {"good", "needs-improvement"}
DEFAULT_POLARITY = "needs-improvement"

_FENCE = re.compile(r"```(?:json)?\s*\n?(.*?)```", re.DOTALL)
_OBJECT = re.compile(r"\{.*\}", re.DOTALL)
_ARRAY = re.compile(r"\[.*\]", re.DOTALL)


def _candidates(raw: str) -> Iterator[str]:
    yield raw
    fence_match = _FENCE.search(raw)
    if fence_match:
        yield fence_match.group(1).strip()
    for pattern in (_OBJECT, _ARRAY):
        match = pattern.search(raw)
        if match:
            yield match.group(0)


def extract_json(raw: str) -> dict | list | None:
    for candidate in _candidates(raw):
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, (dict, list)):
            return data
    return None


def validate_highlight(item_data: dict[str, Any], index: int) -> CritiqueItem | None:
    phrase = item_data.get("text", item_data.get("phrase"))
    if not isinstance(phrase, str) or not phrase.strip():
        return None

    polarity = item_data.get("type", item_data.get("polarity"))
    if polarity not in VALID_POLARITIES:
        logger.debug(f"Unknown highlight type {polarity!r}, using {DEFAULT_POLARITY}")
        polarity = DEFAULT_POLARITY

    reason = item_data.get("reason", item_data.get("explanation"))
    item_id = item_data.get("id")

    try:
        return CritiqueItem(
            phrase=phrase,
            polarity=polarity,
            explanation=str(reason) if reason is not None else None,
            id=str(item_id) if item_id else fallback_id(index),
        )
    except ValidationError as e:
        logger.debug(f"Highlight validation failed: {e}")
        return None


def parse_highlights(raw: str) -> list[CritiqueItem]:
    data = extract_json(raw)
    if data is None:
        logger.warning("Failed to extract JSON from highlights output")
        return []

    raw_items = data.get("highlights", []) if isinstance(data, dict) else data
    if not isinstance(raw_items, list):
        return []

    items = []
    for index, item_data in enumerate(raw_items):
        if not isinstance(item_data, dict):
            continue
        item = validate_highlight(item_data, index)
        if item is not None:
            items.append(item)

    return items
