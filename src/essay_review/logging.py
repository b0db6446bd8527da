"""Structured logging with per-request ID tracking.

A contextvar carries the request_id through the async feedback pipeline and
a filter stamps it onto every record emitted by the ``essay_review`` logger.
"""

import logging
import os
import uuid
from collections.abc import Mapping
from contextvars import ContextVar
from typing import Any

request_id_ctx: ContextVar[str] = ContextVar("request_id", default="")


def get_request_id() -> str:
    rid = request_id_ctx.get()
    if not rid:
        rid = uuid.uuid4().hex[:12]
        request_id_ctx.set(rid)
    return rid


class RequestIdFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        record.request_id = request_id_ctx.get("") or "-"
        return True


def setup_logging() -> logging.Logger:
    logger = logging.getLogger("essay_review")
    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s [%(levelname)s] [%(request_id)s] %(name)s: %(message)s")
        )
        handler.addFilter(RequestIdFilter())
        logger.addHandler(handler)
    level = os.environ.get("ESSAY_LOG_LEVEL", "INFO").upper()
    logger.setLevel(getattr(logging, level, logging.INFO))
    return logger


logger = setup_logging()


SENSITIVE_KEYS = ("auth", "token", "key", "secret", "pass")


def mask_value(key: str, value: Any) -> str:
    if any(fragment in key.lower() for fragment in SENSITIVE_KEYS):
        return "*" * max(6, len(str(value)))
    return str(value)


def print_settings(obj: object) -> None:
    """Log every setting on ``obj``, masking anything that looks like a secret."""
    if not obj:
        return

    data: Mapping[str, Any] | None = None
    if hasattr(obj, "model_dump"):
        data = obj.model_dump()  # type: ignore[attr-defined]
    elif hasattr(obj, "__dict__"):
        data = vars(obj)

    if not data:
        return

    logger.info("=== Settings ===")
    for key, value in data.items():
        logger.info(f"{key}: {mask_value(key, value)}")
