from typing import Any

from pydantic import BaseModel, Field

from .critique import CritiqueItem, Segment
from .scores import SubScores, Tier


class Usage(BaseModel):
    input_tokens: int = 0
    output_tokens: int = 0


class Meta(BaseModel):
    request_id: str
    task_type: str
    model_id: str
    latency_ms: int = 0
    usage: Usage = Field(default_factory=Usage)


class Error(BaseModel):
    code: str
    message: str
    details: Any | None = None


class FeedbackResponse(BaseModel):
    feedback: str = ""
    narrative: str = ""
    scores: SubScores = Field(default_factory=SubScores)
    overall_score: float | None = None
    stated_overall_score: float | None = None
    tier: Tier | None = None
    highlights: list[CritiqueItem] = Field(default_factory=list)
    segments: list[Segment] = Field(default_factory=list)
    meta: Meta
    errors: list[Error] = Field(default_factory=list)


class AnnotateResponse(BaseModel):
    segments: list[Segment]


class ScoreResponse(BaseModel):
    overall_score: float | None = None
    tier: Tier | None = None


class ParseResponse(BaseModel):
    scores: SubScores
    stated_overall_score: float | None = None
    overall_score: float | None = None
    tier: Tier | None = None
    narrative: str = ""
