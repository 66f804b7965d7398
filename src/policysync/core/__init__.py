"""Core module - Base classes and shared types."""

from __future__ import annotations

from policysync.core.errors import (
    EmptyTableError,
    ExtractionError,
    FetchError,
    GenerationError,
    SyncError,
)
from policysync.core.llm import LLMClient
from policysync.core.message import Conversation, Message
from policysync.core.models import ManufacturerEntry, RunStatus, SyncDetail, SyncResult
from policysync.core.response import LLMResponse, TokenUsage
from policysync.core.types import MessageRole, Row


__all__ = [
    # Messages
    "Conversation",
    # Errors
    "EmptyTableError",
    "ExtractionError",
    "FetchError",
    "GenerationError",
    # LLM
    "LLMClient",
    "LLMResponse",
    # Models
    "ManufacturerEntry",
    "Message",
    # Types
    "MessageRole",
    "Row",
    "RunStatus",
    "SyncDetail",
    "SyncError",
    "SyncResult",
    "TokenUsage",
]
