"""POST /v1/annotate: segment a text with caller-supplied critique items."""

from fastapi import APIRouter, HTTPException

from ..engine.annotator import annotate
from ..exceptions import AnnotationError
from ..schemas.request import AnnotateRequest
from ..schemas.response import AnnotateResponse

router = APIRouter(prefix="/v1")


@router.post("/annotate", response_model=AnnotateResponse)
async def annotate_text(body: AnnotateRequest) -> AnnotateResponse:
    try:
        segments = annotate(body.text, body.items, body.focused_id)
    except AnnotationError as e:
        raise HTTPException(
            status_code=422,
            detail={"code": "INVALID_ANNOTATION", "message": str(e)},
        ) from e
    return AnnotateResponse(segments=segments)
