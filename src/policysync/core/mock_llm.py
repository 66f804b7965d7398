"""Mock LLM client for running without API keys."""

from __future__ import annotations

from typing import TYPE_CHECKING

from policysync.core.llm import LLMClient
from policysync.core.response import LLMResponse, TokenUsage


if TYPE_CHECKING:
    from policysync.core.types import JSON


MOCK_RULES_TABLE = """| rule_id | entity_type | scope_area | requirement_type | condition_summary | applies_to_drugs | data_requirements | geography_or_location | effective_date | exceptions_or_notes | evidence_excerpt |
|---|---|---|---|---|---|---|---|---|---|---|
| R-001 | Covered entity | Contract pharmacy | Registration | Register contract pharmacies on 340B ESP | All covered drugs | Pharmacy NPI, address | United States | 2024-01-01 | Hospital-owned pharmacies exempt | "must register on 340B ESP" |
| R-002 | Covered entity | Contract pharmacy | Claims data | Submit claims data within 45 days of dispense | All covered drugs | Rx number, date of service, NDC | United States | 2024-01-01 | None | "submit claims data, including" |
| R-003 | Covered entity | Single contract pharmacy | Designation | One contract pharmacy allowed when no in-house pharmacy exists | All covered drugs | Designation form | Within 40 miles of parent site | 2024-01-01 | Grantees excluded | "a single contract pharmacy location" |"""


class MockLLMClient(LLMClient):
    """Mock LLM client that returns a fixed rule table."""

    def __init__(self, table: str = MOCK_RULES_TABLE) -> None:
        self._table = table
        self._call_count = 0

    @property
    def call_count(self) -> int:
        return self._call_count

    async def chat(self, messages: list[JSON], temperature: float = 0.0) -> LLMResponse:
        self._call_count += 1
        last_msg = ""
        for msg in reversed(messages):
            if msg.get("role") == "user":
                last_msg = str(msg.get("content", ""))
                break
        prompt_tokens = len(last_msg) // 4
        return LLMResponse(content=self._table, finish_reason="stop",
                           usage=TokenUsage(prompt_tokens=prompt_tokens, completion_tokens=300,
                                            total_tokens=prompt_tokens + 300))
