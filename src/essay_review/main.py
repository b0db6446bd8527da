"""FastAPI application entry point.

The lifespan handler creates the model client when an API key is configured
and stores it on app.state; without a key the pure scoring and annotation
routes still work and /v1/feedback answers 503.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .engine.model_client import ModelClient
from .logging import logger, print_settings
from .routes import annotate_router, feedback_router, health_router, scores_router

logger.info("Starting Essay Review Service")

print_settings(settings)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.model_api_key:
        app.state.model_client = ModelClient()
        logger.info(f"Model client initialized: {settings.openai_base_url} / {settings.model_id}")
    else:
        app.state.model_client = None
        logger.warning("ESSAY_MODEL_API_KEY is not set; /v1/feedback is disabled")

    yield


app = FastAPI(title="Essay Review Service", version="0.1.0", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[origin.strip() for origin in settings.cors_origins.split(",")],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(feedback_router)
app.include_router(annotate_router)
app.include_router(scores_router)
