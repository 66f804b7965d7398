"""Tests for the rule extractor agent and the LLM layer."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from policysync.agents.extractor import RULE_COLUMNS, SYSTEM_PROMPT, RuleExtractorAgent
from policysync.config.settings import LLMProviderEnum, Settings
from policysync.core.errors import GenerationError
from policysync.core.llm import LLMClient
from policysync.core.mock_llm import MOCK_RULES_TABLE, MockLLMClient
from policysync.core.response import LLMResponse
from policysync.tools.table import parse_markdown_table


if TYPE_CHECKING:
    from policysync.core.types import JSON


class RecordingLLM(LLMClient):
    def __init__(self, reply: str = "| a |", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.messages: list[JSON] = []

    async def chat(self, messages: list[JSON], temperature: float = 0.0) -> LLMResponse:
        self.messages = messages
        if self.error:
            raise self.error
        return LLMResponse(content=self.reply)


def test_system_prompt_lists_all_columns() -> None:
    assert len(RULE_COLUMNS) == 11
    assert ", ".join(RULE_COLUMNS) in SYSTEM_PROMPT
    assert "Output ONLY a markdown table" in SYSTEM_PROMPT


@pytest.mark.asyncio
async def test_extract_sends_system_and_user_messages() -> None:
    llm = RecordingLLM(reply="| rule_id |")
    reply = await RuleExtractorAgent(llm).extract("Policy body")
    assert reply == "| rule_id |"
    assert llm.messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert llm.messages[1]["role"] == "user"
    assert llm.messages[1]["content"] == (
        "Extract eligibility rules from the following 340B manufacturer policy text:\n\nPolicy body"
    )


@pytest.mark.asyncio
async def test_extract_returns_reply_unvalidated() -> None:
    llm = RecordingLLM(reply="Sorry, I cannot help with that.")
    assert await RuleExtractorAgent(llm).extract("text") == "Sorry, I cannot help with that."


@pytest.mark.asyncio
async def test_model_failure_becomes_generation_error() -> None:
    llm = RecordingLLM(error=RuntimeError("rate limited"))
    with pytest.raises(GenerationError, match="rate limited") as exc_info:
        await RuleExtractorAgent(llm).extract("text")
    assert isinstance(exc_info.value.__cause__, RuntimeError)


@pytest.mark.asyncio
async def test_mock_llm_returns_parseable_table() -> None:
    mock = MockLLMClient()
    reply = await RuleExtractorAgent(mock).extract("Any policy text")
    assert reply == MOCK_RULES_TABLE
    rows = parse_markdown_table(reply)
    assert rows[0] == list(RULE_COLUMNS)
    assert all(len(row) == 11 for row in rows)
    assert mock.call_count == 1


def test_create_mock_client() -> None:
    assert isinstance(LLMClient.create(Settings(), mock=True), MockLLMClient)


def test_create_openai_client() -> None:
    pytest.importorskip("openai")
    from policysync.core.providers.openai import OpenAIClient

    settings = Settings()
    settings.llm.provider = LLMProviderEnum.OPENAI
    settings.llm.openai_api_key = "sk-test"
    client = LLMClient.create(settings)
    assert isinstance(client, OpenAIClient)
    assert client.model == settings.llm.openai_model


def test_create_anthropic_client() -> None:
    pytest.importorskip("anthropic")
    from policysync.core.providers.anthropic import AnthropicClient

    settings = Settings()
    settings.llm.provider = LLMProviderEnum.ANTHROPIC
    settings.llm.anthropic_api_key = "test-key"
    assert isinstance(LLMClient.create(settings), AnthropicClient)
