"""Extraction of criterion scores and narrative from examiner feedback text.

The examiner blob is free text of uncertain shape. Each labeled score is
looked up independently, so a missing or garbled line only costs that one
field. The blob's own "Overall Score" is surfaced but never trusted: the
overall band shown to users is always recomputed by the scorer.
"""

import re

from ..config import scoring_config
from ..logging import logger
from ..schemas.scores import ParsedFeedback, SubScores

SCORE_LABELS = {
    "task_response": "Task Response:",
    "coherence_cohesion": "Coherence & Cohesion:",
    "lexical_resource": "Lexical Resource:",
    "grammar": "Grammar:",
}
OVERALL_LABEL = "Overall Score:"
NARRATIVE_LABEL = "Feedback:"

_NUMBER = r"\s*(\d[\d.]*)"


def extract_score(blob: str, label: str) -> float | None:
    match = re.search(re.escape(label) + _NUMBER, blob)
    if match is None:
        return None

    raw = match.group(1).rstrip(".")
    try:
        value = float(raw)
    except ValueError:
        logger.debug(f"Malformed score after '{label}': {match.group(1)!r}")
        return None

    band = scoring_config.band
    if not band.min_score <= value <= band.max_score:
        logger.debug(f"Score after '{label}' out of range: {value}")
        return None
    return value


def extract_narrative(blob: str) -> str:
    index = blob.find(NARRATIVE_LABEL)
    if index == -1:
        return ""
    return blob[index + len(NARRATIVE_LABEL) :].strip()


def parse_feedback(blob: str) -> ParsedFeedback:
    scores = SubScores(**{field: extract_score(blob, label) for field, label in SCORE_LABELS.items()})
    return ParsedFeedback(
        scores=scores,
        stated_overall_score=extract_score(blob, OVERALL_LABEL),
        narrative=extract_narrative(blob),
    )
