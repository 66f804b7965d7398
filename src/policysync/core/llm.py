"""LLM client abstraction for multiple providers."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from policysync.config.settings import LLMProviderEnum, Settings
from policysync.core.message import Conversation


if TYPE_CHECKING:
    from policysync.core.response import LLMResponse
    from policysync.core.types import JSON

logger = logging.getLogger(__name__)


class LLMClient(ABC):
    """Abstract base class for LLM clients."""

    @abstractmethod
    async def chat(
        self,
        messages: list[JSON],
        temperature: float = 0.0,
    ) -> LLMResponse:
        """Send a chat completion request."""
        ...

    async def generate(self, system_prompt: str, user_prompt: str) -> str:
        """Run a single system + user exchange and return the reply text."""
        conversation = Conversation()
        conversation.add_system(system_prompt)
        conversation.add_user(user_prompt)
        response = await self.chat(conversation.to_openai_format())
        if response.usage:
            logger.debug("LLM usage: %d tokens", response.usage.total_tokens)
        if response.truncated:
            logger.warning("LLM reply was truncated (finish_reason=%s)", response.finish_reason)
        return response.content

    @classmethod
    def create(cls, settings: Settings | None = None, mock: bool = False) -> LLMClient:
        """Factory method to create the appropriate LLM client."""
        if mock:
            from policysync.core.mock_llm import MockLLMClient  # noqa: PLC0415

            return MockLLMClient()
        if settings is None:
            settings = Settings()
        if settings.llm.provider == LLMProviderEnum.OPENAI:
            from policysync.core.providers.openai import OpenAIClient  # noqa: PLC0415

            return OpenAIClient(settings)
        elif settings.llm.provider == LLMProviderEnum.ANTHROPIC:
            from policysync.core.providers.anthropic import AnthropicClient  # noqa: PLC0415

            return AnthropicClient(settings)
        else:
            msg = f"Unknown LLM provider: {settings.llm.provider}"
            raise ValueError(msg)
