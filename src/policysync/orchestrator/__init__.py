"""Orchestration of the policy sync run."""

from policysync.orchestrator.sync import PolicySync

__all__ = ["PolicySync"]
