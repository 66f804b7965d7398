"""Rule extractor agent for turning policy text into a rule table."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from policysync.core.errors import GenerationError


if TYPE_CHECKING:
    from policysync.core.llm import LLMClient

logger = logging.getLogger(__name__)

RULE_COLUMNS = (
    "rule_id",
    "entity_type",
    "scope_area",
    "requirement_type",
    "condition_summary",
    "applies_to_drugs",
    "data_requirements",
    "geography_or_location",
    "effective_date",
    "exceptions_or_notes",
    "evidence_excerpt",
)

SYSTEM_PROMPT = f"""You are a 340B Manufacturer Policy Parser.

Your job is to read the full text of a single manufacturer's 340B policy and extract all eligibility-related rules and conditions into a detailed structured table.

Create one row per distinct condition, not one per paragraph.
Split multi-condition sentences into separate rule rows.
Never merge "register on 340B ESP" with "submit claims data" - separate rows.

Output ONLY a markdown table with these columns:

{", ".join(RULE_COLUMNS)}

Do not modify the wording."""


class RuleExtractorAgent:
    """Agent that asks the LLM for a markdown table of eligibility rules.

    The reply is returned verbatim; column count and header names are not
    checked here.
    """

    def __init__(self, llm: LLMClient) -> None:
        self.llm = llm

    @property
    def system_prompt(self) -> str:
        return SYSTEM_PROMPT

    def format_input(self, policy_text: str) -> str:
        return f"Extract eligibility rules from the following 340B manufacturer policy text:\n\n{policy_text}"

    async def extract(self, policy_text: str) -> str:
        """Generate the rule table for one policy document.

        Raises:
            GenerationError: If the model call fails.
        """
        logger.debug("Requesting rule table for %d characters of policy text", len(policy_text))
        try:
            return await self.llm.generate(self.system_prompt, self.format_input(policy_text))
        except Exception as e:
            msg = f"Rule extraction failed: {e}"
            raise GenerationError(msg) from e
