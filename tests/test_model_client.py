from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from src.essay_review.engine.model_client import ModelClient


def _response(content="{}", usage=None):
    response = MagicMock()
    response.choices = [MagicMock()]
    response.choices[0].message.content = content
    response.usage = usage
    return response


@pytest.fixture
def model_client():
    with patch("src.essay_review.engine.model_client.settings") as mock_settings:
        mock_settings.openai_base_url = "http://localhost:11434/v1"
        mock_settings.model_api_key = "test-key"
        mock_settings.model_timeout = 30.0
        mock_settings.model_id = "gpt-4o-mini"
        client = ModelClient()
    return client


class TestModelClientInit:
    def test_uses_settings_values(self, model_client):
        assert model_client.model_id == "gpt-4o-mini"


class TestModelClientGenerate:
    async def test_successful_generation(self, model_client):
        usage = MagicMock(prompt_tokens=100, completion_tokens=50)
        model_client.client.chat.completions.create = AsyncMock(
            return_value=_response("Task Response: 7", usage)
        )

        content, result_usage = await model_client.generate("system", "user")
        assert content == "Task Response: 7"
        assert result_usage.input_tokens == 100
        assert result_usage.output_tokens == 50

    async def test_empty_content_returns_empty_string(self, model_client):
        model_client.client.chat.completions.create = AsyncMock(return_value=_response(None))

        content, usage = await model_client.generate("system", "user")
        assert content == ""
        assert usage.input_tokens == 0

    async def test_call_arguments(self, model_client):
        model_client.client.chat.completions.create = AsyncMock(return_value=_response())

        await model_client.generate("sys", "usr", temperature=0.5, max_tokens=800, json_mode=True)

        kwargs = model_client.client.chat.completions.create.call_args[1]
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["temperature"] == 0.5
        assert kwargs["max_tokens"] == 800
        assert kwargs["response_format"] == {"type": "json_object"}
        assert kwargs["messages"] == [
            {"role": "system", "content": "sys"},
            {"role": "user", "content": "usr"},
        ]

    async def test_plain_text_mode(self, model_client):
        model_client.client.chat.completions.create = AsyncMock(return_value=_response())

        await model_client.generate("sys", "usr")

        kwargs = model_client.client.chat.completions.create.call_args[1]
        assert "response_format" not in kwargs
        assert "max_tokens" not in kwargs

    async def test_raises_on_api_error(self, model_client):
        model_client.client.chat.completions.create = AsyncMock(
            side_effect=Exception("Connection refused")
        )
        with pytest.raises(Exception, match="Connection refused"):
            await model_client.generate("system", "user")
