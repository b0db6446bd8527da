"""
Schemas for critique items and the segments rendered from them.
"""

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

Polarity = Literal["good", "needs-improvement"]


class CritiqueItem(BaseModel):
    # Model output uses text/type/reason; both spellings are accepted.
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    phrase: str = Field(min_length=1, validation_alias=AliasChoices("phrase", "text"))
    polarity: Polarity = Field(validation_alias=AliasChoices("polarity", "type"))
    explanation: str | None = Field(
        default=None, validation_alias=AliasChoices("explanation", "reason")
    )
    id: str | None = None


class MatchRange(BaseModel):
    start: int
    end: int
    polarity: Polarity
    explanation: str | None = None
    id: str


class Annotation(BaseModel):
    polarity: Polarity
    explanation: str | None = None
    id: str
    is_focused: bool = False


class Segment(BaseModel):
    text: str
    start: int
    end: int
    annotation: Annotation | None = None
