"""
Schemas for feedback, annotation and scoring requests.
"""

from pydantic import BaseModel, Field

from .critique import CritiqueItem


class FeedbackRequest(BaseModel):
    request_id: str | None = None
    essay: str
    task_type: str = "Task 2"
    prompt: str | None = None


class AnnotateRequest(BaseModel):
    text: str
    items: list[CritiqueItem] = Field(default_factory=list)
    focused_id: str | None = None


class ScoreRequest(BaseModel):
    task_response: float | None = None
    coherence_cohesion: float | None = None
    lexical_resource: float | None = None
    grammar: float | None = None


class ParseRequest(BaseModel):
    feedback: str
