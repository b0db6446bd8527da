"""Feedback pipeline orchestration.

Coordinates the full essay review:
1. Ask the model for the examiner narrative and the highlight list (concurrently)
2. Parse criterion scores out of the narrative and recompute the overall band
3. Parse, validate and filter the highlight list
4. Annotate the essay with the surviving highlights
5. Return a complete FeedbackResponse with metadata and timing

A failed model call yields an error entry and empty fields for the part it
would have produced; the other part is still returned.
"""

import asyncio
import time

from ..config import settings
from ..logging import logger
from ..policy.highlights import apply_highlight_policy
from ..schemas.critique import CritiqueItem
from ..schemas.request import FeedbackRequest
from ..schemas.response import Error, FeedbackResponse, Meta, Usage
from .annotator import annotate
from .feedback_parser import parse_feedback
from .model_client import ModelClient
from .parser import extract_json, parse_highlights
from .prompt import (
    build_feedback_prompt,
    build_highlights_prompt,
    get_feedback_system_prompt,
    get_highlights_system_prompt,
)
from .scorer import aggregate_scores, color_tier


async def _generate_feedback(
    request: FeedbackRequest, model_client: ModelClient
) -> tuple[str, Usage, Error | None]:
    try:
        raw, usage = await model_client.generate(
            get_feedback_system_prompt(),
            build_feedback_prompt(request.essay, request.task_type, request.prompt),
            temperature=settings.feedback_temperature,
            max_tokens=settings.feedback_max_tokens,
        )
    except Exception as e:
        logger.error(f"Feedback model failure: {e}")
        return "", Usage(), Error(code="MODEL_FAILURE", message=f"feedback: {e}")
    return raw, usage, None


async def _generate_highlights(
    request: FeedbackRequest, model_client: ModelClient
) -> tuple[list[CritiqueItem], Usage, Error | None]:
    try:
        raw, usage = await model_client.generate(
            get_highlights_system_prompt(),
            build_highlights_prompt(request.essay, request.prompt),
            temperature=settings.highlights_temperature,
            max_tokens=settings.highlights_max_tokens,
            json_mode=True,
        )
    except Exception as e:
        logger.error(f"Highlights model failure: {e}")
        return [], Usage(), Error(code="MODEL_FAILURE", message=f"highlights: {e}")

    items = parse_highlights(raw)
    if not items and raw.strip() and extract_json(raw) is None:
        return [], usage, Error(
            code="MODEL_PARSE_FAILURE",
            message="Model returned highlights output that is not valid JSON",
        )
    return items, usage, None


async def run_feedback(request: FeedbackRequest, model_client: ModelClient) -> FeedbackResponse:
    start_time = time.time()
    errors: list[Error] = []

    (feedback, feedback_usage, feedback_error), (items, highlights_usage, highlights_error) = (
        await asyncio.gather(
            _generate_feedback(request, model_client),
            _generate_highlights(request, model_client),
        )
    )
    errors.extend(e for e in (feedback_error, highlights_error) if e is not None)

    parsed = parse_feedback(feedback)
    overall = aggregate_scores(parsed.scores)
    if (
        overall is not None
        and parsed.stated_overall_score is not None
        and overall != parsed.stated_overall_score
    ):
        logger.info(
            f"Stated overall {parsed.stated_overall_score} differs from computed {overall}; "
            "using computed"
        )

    highlights = apply_highlight_policy(items)
    segments = annotate(request.essay, highlights)

    latency_ms = int((time.time() - start_time) * 1000)
    usage = Usage(
        input_tokens=feedback_usage.input_tokens + highlights_usage.input_tokens,
        output_tokens=feedback_usage.output_tokens + highlights_usage.output_tokens,
    )

    logger.info(
        f"Feedback complete: task_type={request.task_type} overall={overall} "
        f"highlights={len(highlights)} segments={len(segments)} latency_ms={latency_ms}"
    )

    return FeedbackResponse(
        feedback=feedback,
        narrative=parsed.narrative,
        scores=parsed.scores,
        overall_score=overall,
        stated_overall_score=parsed.stated_overall_score,
        tier=color_tier(overall),
        highlights=highlights,
        segments=segments,
        meta=Meta(
            request_id=request.request_id or "",
            task_type=request.task_type,
            model_id=settings.model_id,
            latency_ms=latency_ms,
            usage=usage,
        ),
        errors=errors,
    )
