"""Agents module - LLM-backed pipeline steps."""

from __future__ import annotations

from policysync.agents.extractor import RuleExtractorAgent


__all__ = ["RuleExtractorAgent"]
