"""
Post-processing policy for critique items returned by the model.

Applies deterministic rules independent of prompting:
- drop_blank: removes items whose phrase is only whitespace
- deduplicate: keeps the first item per phrase (case-insensitive) and polarity,
  and the first item per id
- apply_highlight_policy: chains both and truncates to max_highlights

Ids are never reassigned here; they were fixed when the items were parsed.
"""

from collections.abc import Sequence

from ..config import scoring_config
from ..logging import logger
from ..schemas.critique import CritiqueItem


def drop_blank(items: Sequence[CritiqueItem]) -> list[CritiqueItem]:
    return [item for item in items if item.phrase.strip()]


def deduplicate(items: Sequence[CritiqueItem]) -> list[CritiqueItem]:
    seen_phrases: set[tuple[str, str]] = set()
    seen_ids: set[str] = set()
    result = []
    for item in items:
        key = (item.phrase.lower(), item.polarity)
        if key in seen_phrases or (item.id is not None and item.id in seen_ids):
            logger.debug(f"Dropping duplicate highlight '{item.phrase}' ({item.id})")
            continue
        seen_phrases.add(key)
        if item.id is not None:
            seen_ids.add(item.id)
        result.append(item)
    return result


def apply_highlight_policy(
    items: Sequence[CritiqueItem], max_highlights: int | None = None
) -> list[CritiqueItem]:
    if max_highlights is None:
        max_highlights = scoring_config.highlights.max_highlights
    return deduplicate(drop_blank(items))[:max_highlights]
