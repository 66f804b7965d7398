"""OpenAI LLM client."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from policysync.core.llm import LLMClient
from policysync.core.response import LLMResponse, TokenUsage


if TYPE_CHECKING:
    from policysync.config.settings import Settings
    from policysync.core.types import JSON


class OpenAIClient(LLMClient):
    """OpenAI API client."""

    def __init__(self, settings: Settings) -> None:
        from openai import AsyncOpenAI  # noqa: PLC0415
        self.client = AsyncOpenAI(api_key=settings.llm.openai_api_key)
        self.model = settings.llm.openai_model
        self.max_tokens = settings.llm.max_tokens

    async def chat(self, messages: list[JSON], temperature: float = 0.0) -> LLMResponse:
        kwargs: dict[str, Any] = {
            "model": self.model, "messages": messages,
            "temperature": temperature, "max_tokens": self.max_tokens,
        }
        response = await self.client.chat.completions.create(**kwargs)
        message = response.choices[0].message
        usage = None
        if response.usage:
            usage = TokenUsage(
                prompt_tokens=response.usage.prompt_tokens,
                completion_tokens=response.usage.completion_tokens,
                total_tokens=response.usage.total_tokens,
            )
        return LLMResponse(
            content=message.content or "",
            finish_reason=response.choices[0].finish_reason or "stop", usage=usage,
        )
