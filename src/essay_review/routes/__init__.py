from .annotate import router as annotate_router
from .feedback import router as feedback_router
from .health import router as health_router
from .scores import router as scores_router

__all__ = ["annotate_router", "feedback_router", "health_router", "scores_router"]
