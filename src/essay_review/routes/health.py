"""
GET /health endpoint for liveness and readiness checks.
"""

from fastapi import APIRouter, Request

from ..config import settings

router = APIRouter()


@router.get("/health")
async def health(request: Request) -> dict:
    model_client = getattr(request.app.state, "model_client", None)

    return {
        "status": "ok",
        "model_id": settings.model_id,
        "model_backend": "connected" if model_client else "unavailable",
    }
