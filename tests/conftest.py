import pytest
from fastapi.testclient import TestClient

from src.essay_review.config import settings
from src.essay_review.main import app
from src.essay_review.schemas.critique import CritiqueItem
from src.essay_review.schemas.response import Usage

SAMPLE_ESSAY = (
    "Some people believe that technology has made our lives more complicated. "
    "In my opinion, technology have improved daily life in many ways."
)

SAMPLE_FEEDBACK = (
    "Task Response: 7.0\n"
    "Coherence & Cohesion: 6.5\n"
    "Lexical Resource: 7.0\n"
    "Grammar: 6.0\n"
    "\n"
    "Overall Score: 6.5\n"
    "\n"
    "Feedback: Your essay presents clear ideas but needs stronger logical linking. "
    "Vocabulary is appropriate but could be more precise."
)

SAMPLE_HIGHLIGHTS = (
    '{"highlights": ['
    '{"text": "technology have improved", "type": "needs-improvement", "reason": "Subject-verb agreement"},'
    '{"text": "In my opinion", "type": "good", "reason": "Clear position"}'
    "]}"
)


class MockModelClient:
    """Answers the JSON-mode call with highlights and the other call with feedback."""

    def __init__(self, feedback: str = SAMPLE_FEEDBACK, highlights: str = SAMPLE_HIGHLIGHTS):
        self.feedback = feedback
        self.highlights = highlights
        self.calls: list[dict] = []

    async def generate(self, system_prompt, user_prompt, temperature=0.7, max_tokens=None, json_mode=False):
        self.calls.append({"system": system_prompt, "user": user_prompt, "json_mode": json_mode})
        if json_mode:
            return self.highlights, Usage(input_tokens=120, output_tokens=60)
        return self.feedback, Usage(input_tokens=100, output_tokens=50)


@pytest.fixture
def sample_items() -> list[CritiqueItem]:
    return [
        CritiqueItem(phrase="technology have improved", polarity="needs-improvement", explanation="Agreement"),
        CritiqueItem(phrase="In my opinion", polarity="good", explanation="Clear position"),
    ]


@pytest.fixture
def model_client() -> MockModelClient:
    return MockModelClient()


@pytest.fixture
def client(monkeypatch, model_client):
    monkeypatch.setattr(settings, "auth_token", "test-token")
    app.state.model_client = model_client
    return TestClient(app)


AUTH_HEADER = {"Authorization": "Bearer test-token"}
