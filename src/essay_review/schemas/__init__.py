"""
Schemas for the essay review API.
"""

from .critique import Annotation, CritiqueItem, MatchRange, Polarity, Segment
from .request import AnnotateRequest, FeedbackRequest, ParseRequest, ScoreRequest
from .response import (
    AnnotateResponse,
    Error,
    FeedbackResponse,
    Meta,
    ParseResponse,
    ScoreResponse,
    Usage,
)
from .scores import ParsedFeedback, SubScores, Tier

__all__ = [
    "AnnotateRequest",
    "AnnotateResponse",
    "Annotation",
    "CritiqueItem",
    "Error",
    "FeedbackRequest",
    "FeedbackResponse",
    "MatchRange",
    "Meta",
    "ParseRequest",
    "ParseResponse",
    "ParsedFeedback",
    "Polarity",
    "ScoreRequest",
    "ScoreResponse",
    "Segment",
    "SubScores",
    "Tier",
    "Usage",
]
