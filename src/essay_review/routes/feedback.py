"""
POST /v1/feedback endpoint.

Accepts an essay with its task type and optional task prompt, runs the full
feedback pipeline, and returns scores, narrative, highlights and annotated
segments. Requires bearer token auth.
"""

from fastapi import APIRouter, Depends, HTTPException, Request

from ..auth import require_auth
from ..config import settings
from ..engine.pipeline import run_feedback
from ..logging import get_request_id, request_id_ctx
from ..schemas.request import FeedbackRequest
from ..schemas.response import FeedbackResponse

router = APIRouter(prefix="/v1")


@router.post("/feedback", response_model=FeedbackResponse)
async def feedback(
    request: Request,
    body: FeedbackRequest,
    _token: str = Depends(require_auth),
) -> FeedbackResponse:
    rid = body.request_id or get_request_id()
    request_id_ctx.set(rid)
    body.request_id = rid

    if not body.essay.strip():
        raise HTTPException(
            status_code=422,
            detail={"code": "EMPTY_ESSAY", "message": "Essay is required"},
        )
    if len(body.essay) > settings.max_essay_length:
        raise HTTPException(
            status_code=422,
            detail={
                "code": "ESSAY_TOO_LONG",
                "message": f"Essay exceeds maximum length of {settings.max_essay_length}",
            },
        )

    model_client = getattr(request.app.state, "model_client", None)
    if model_client is None:
        raise HTTPException(
            status_code=503,
            detail={"code": "MODEL_UNAVAILABLE", "message": "Model API key is not configured"},
        )

    return await run_feedback(body, model_client)
