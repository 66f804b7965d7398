from policysync.agents.extractor.agent import RULE_COLUMNS, SYSTEM_PROMPT, RuleExtractorAgent

__all__ = ["RULE_COLUMNS", "SYSTEM_PROMPT", "RuleExtractorAgent"]
