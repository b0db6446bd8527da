"""
Async LLM client wrapper using the OpenAI SDK.

Talks to OpenAI or any OpenAI-compatible endpoint. Temperature, token limit
and JSON mode are chosen per call because the examiner narrative and the
highlight list are generated with different settings.
"""

from openai import AsyncOpenAI

from ..config import settings
from ..logging import logger
from ..schemas.response import Usage


class ModelClient:
    def __init__(self):
        self.client = AsyncOpenAI(
            base_url=settings.openai_base_url,
            api_key=settings.model_api_key,
            timeout=settings.model_timeout,
        )
        self.model_id = settings.model_id

    async def generate(
        self,
        system_prompt: str,
        user_prompt: str,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        json_mode: bool = False,
    ) -> tuple[str, Usage]:
        kwargs: dict = {
            "model": self.model_id,
            "messages": [
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
            "temperature": temperature,
        }
        if max_tokens is not None:
            kwargs["max_tokens"] = max_tokens
        if json_mode:
            kwargs["response_format"] = {"type": "json_object"}

        try:
            response = await self.client.chat.completions.create(**kwargs)
        except Exception as e:
            logger.error(f"Model call failed: {e}")
            raise

        content = response.choices[0].message.content or ""
        usage = Usage()
        if response.usage:
            usage = Usage(
                input_tokens=response.usage.prompt_tokens or 0,
                output_tokens=response.usage.completion_tokens or 0,
            )
        return content, usage
