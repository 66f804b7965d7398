"""LLM provider implementations."""

from policysync.core.providers.anthropic import AnthropicClient
from policysync.core.providers.openai import OpenAIClient


__all__ = ["OpenAIClient", "AnthropicClient"]
