"""Message models for LLM requests."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from policysync.core.types import MessageRole


class Message(BaseModel):
    """A message in the conversation."""

    role: MessageRole
    content: str

    model_config = {"frozen": True}


class Conversation(BaseModel):
    """A conversation history."""

    messages: list[Message] = Field(default_factory=list)

    def add(self, message: Message) -> None:
        """Add a message to the conversation."""
        self.messages.append(message)

    def add_system(self, content: str) -> None:
        """Add a system message."""
        self.add(Message(role=MessageRole.SYSTEM, content=content))

    def add_user(self, content: str) -> None:
        """Add a user message."""
        self.add(Message(role=MessageRole.USER, content=content))

    def to_openai_format(self) -> list[dict[str, Any]]:
        """Convert to OpenAI API format."""
        return [{"role": msg.role.value, "content": msg.content} for msg in self.messages]
