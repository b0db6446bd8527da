"""Phrase location, overlap resolution and segmentation of essay text.

Turns an essay plus a list of critique items into an ordered, gap-free list
of segments ready for sequential rendering:

1. Locate every case-insensitive occurrence of every phrase (overlapping
   self-occurrences included, no word-boundary logic)
2. Order ranges by start, longer range first on ties
3. Merge: the first range in sort order keeps its label; a later range that
   overlaps and reaches further only stretches it, a contained one vanishes
4. Cut the text into plain and annotated segments

Concatenating the segments' text always reproduces the input text exactly.

Matching uses ``re.IGNORECASE`` rather than comparing lower-cased copies, so
offsets always index the input text. It folds a few characters that
``str.lower`` keeps distinct: "sun" matches "ſun" (long s) and "k" matches
the Kelvin sign.
"""

import re
from collections.abc import Sequence

from ..exceptions import DuplicateIdError, InvalidRangeError
from ..schemas.critique import Annotation, CritiqueItem, MatchRange, Segment

ID_PREFIX = "highlight"


def fallback_id(index: int) -> str:
    return f"{ID_PREFIX}-{index}"


def assign_ids(items: Sequence[CritiqueItem]) -> list[CritiqueItem]:
    """Give every item a stable id, ``highlight-<position>`` when it has none.

    Items that already carry an id are returned unchanged, so calling this on
    its own output is a no-op.
    """
    resolved = [
        item if item.id else item.model_copy(update={"id": fallback_id(index)})
        for index, item in enumerate(items)
    ]

    seen: set[str] = set()
    for item in resolved:
        if item.id in seen:
            raise DuplicateIdError(f"Duplicate critique id '{item.id}'")
        seen.add(item.id)
    return resolved


def locate_ranges(text: str, items: Sequence[CritiqueItem]) -> list[MatchRange]:
    ranges: list[MatchRange] = []

    for item in items:
        # Offsets index the original text even where lower() would change length.
        pattern = re.compile(re.escape(item.phrase), re.IGNORECASE)
        cursor = 0
        while cursor < len(text):
            match = pattern.search(text, cursor)
            if match is None:
                break
            ranges.append(
                MatchRange(
                    start=match.start(),
                    end=match.end(),
                    polarity=item.polarity,
                    explanation=item.explanation,
                    id=item.id,
                )
            )
            # Step by one so "aa" is found twice in "aaa".
            cursor = match.start() + 1

    return ranges


def order_ranges(ranges: Sequence[MatchRange]) -> list[MatchRange]:
    return sorted(ranges, key=lambda r: (r.start, -r.end))


def merge_ranges(ranges: Sequence[MatchRange]) -> list[MatchRange]:
    """Reduce ordered ranges to non-overlapping winners.

    ``ranges`` must already be ordered by :func:`order_ranges`. The winner's
    label is never replaced, even when a later range extends its end.
    """
    winners: list[MatchRange] = []

    for candidate in ranges:
        if not winners or candidate.start >= winners[-1].end:
            winners.append(candidate.model_copy())
        elif candidate.end > winners[-1].end:
            winners[-1] = winners[-1].model_copy(update={"end": candidate.end})
        # else: contained in the last winner, discarded

    return winners


def _check_range(rng: MatchRange, text_length: int, cursor: int) -> None:
    if rng.start < 0 or rng.start >= rng.end or rng.end > text_length:
        raise InvalidRangeError(
            f"Range [{rng.start}, {rng.end}) for '{rng.id}' is invalid for text of length {text_length}"
        )
    if rng.start < cursor:
        raise InvalidRangeError(
            f"Range [{rng.start}, {rng.end}) for '{rng.id}' overlaps the previous range"
        )


def build_segments(
    text: str, ranges: Sequence[MatchRange], focused_id: str | None = None
) -> list[Segment]:
    """Cut ``text`` into plain and annotated segments along merged ``ranges``."""
    segments: list[Segment] = []
    cursor = 0

    for rng in ranges:
        _check_range(rng, len(text), cursor)
        if rng.start > cursor:
            segments.append(Segment(text=text[cursor : rng.start], start=cursor, end=rng.start))
        segments.append(
            Segment(
                text=text[rng.start : rng.end],
                start=rng.start,
                end=rng.end,
                annotation=Annotation(
                    polarity=rng.polarity,
                    explanation=rng.explanation,
                    id=rng.id,
                    is_focused=focused_id is not None and rng.id == focused_id,
                ),
            )
        )
        cursor = rng.end

    if cursor < len(text) or not segments:
        segments.append(Segment(text=text[cursor:], start=cursor, end=len(text)))

    return segments


def annotate(
    text: str,
    items: Sequence[CritiqueItem] | None = None,
    focused_id: str | None = None,
) -> list[Segment]:
    """Segment ``text`` with the located phrases of ``items``.

    ``focused_id`` only toggles ``is_focused`` on matching annotations; the
    partition itself depends on ``text`` and ``items`` alone.
    """
    resolved = assign_ids(items or [])
    winners = merge_ranges(order_ranges(locate_ranges(text, resolved)))
    return build_segments(text, winners, focused_id)
