from enum import Enum

from pydantic import BaseModel, Field


class Tier(str, Enum):
    HIGH = "high"
    GOOD = "good"
    FAIR = "fair"
    LOW = "low"


class SubScores(BaseModel):
    task_response: float | None = None
    coherence_cohesion: float | None = None
    lexical_resource: float | None = None
    grammar: float | None = None

    @property
    def complete(self) -> bool:
        return None not in (
            self.task_response,
            self.coherence_cohesion,
            self.lexical_resource,
            self.grammar,
        )


class ParsedFeedback(BaseModel):
    scores: SubScores = Field(default_factory=SubScores)
    stated_overall_score: float | None = None
    narrative: str = ""
