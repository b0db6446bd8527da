"""
Scoring endpoints.

POST /v1/score aggregates four criterion bands directly; POST
/v1/feedback/parse reads them out of an examiner feedback blob first.
"""

from fastapi import APIRouter

from ..engine.feedback_parser import parse_feedback
from ..engine.scorer import aggregate, aggregate_scores, color_tier
from ..schemas.request import ParseRequest, ScoreRequest
from ..schemas.response import ParseResponse, ScoreResponse

router = APIRouter(prefix="/v1")


@router.post("/score", response_model=ScoreResponse)
async def score(body: ScoreRequest) -> ScoreResponse:
    overall = aggregate(
        body.task_response, body.coherence_cohesion, body.lexical_resource, body.grammar
    )
    return ScoreResponse(overall_score=overall, tier=color_tier(overall))


@router.post("/feedback/parse", response_model=ParseResponse)
async def parse(body: ParseRequest) -> ParseResponse:
    parsed = parse_feedback(body.feedback)
    overall = aggregate_scores(parsed.scores)
    return ParseResponse(
        scores=parsed.scores,
        stated_overall_score=parsed.stated_overall_score,
        overall_score=overall,
        tier=color_tier(overall),
        narrative=parsed.narrative,
    )
