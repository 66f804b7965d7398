"""Application settings and configuration."""

from __future__ import annotations

import os
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class LLMProviderEnum(str, Enum):
    """Supported LLM providers."""

    OPENAI = "openai"
    ANTHROPIC = "anthropic"


class LLMSettings(BaseModel):
    """LLM provider configuration."""

    provider: LLMProviderEnum = LLMProviderEnum.OPENAI
    openai_api_key: str = ""
    openai_model: str = "gpt-4o-mini"
    anthropic_api_key: str = ""
    anthropic_model: str = "claude-sonnet-4-20250514"
    max_tokens: int = 8192


class SyncSettings(BaseModel):
    """Policy sync configuration."""

    output_dir: str = "output"
    registry_file: str | None = None
    user_agent: str = "policysync/0.1.0"


class Settings(BaseSettings):
    """Application configuration.

    Settings are loaded from environment variables or .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    # LLM Configuration
    llm: LLMSettings = Field(default_factory=LLMSettings)

    # Sync Configuration
    sync: SyncSettings = Field(default_factory=SyncSettings)

    # Logging
    log_level: str = "INFO"

    def __init__(self, **data: Any) -> None:
        """Initialize settings with environment variable overrides."""
        super().__init__(**data)
        self._load_env_overrides()

    def _load_env_overrides(self) -> None:
        """Load environment variable overrides for nested settings."""
        # LLM overrides
        if provider := os.getenv("LLM_PROVIDER"):
            self.llm.provider = LLMProviderEnum(provider)
        if key := os.getenv("OPENAI_API_KEY"):
            self.llm.openai_api_key = key
        if model := os.getenv("OPENAI_MODEL"):
            self.llm.openai_model = model
        if key := os.getenv("ANTHROPIC_API_KEY"):
            self.llm.anthropic_api_key = key
        if model := os.getenv("ANTHROPIC_MODEL"):
            self.llm.anthropic_model = model
        if max_tokens := os.getenv("LLM_MAX_TOKENS"):
            self.llm.max_tokens = int(max_tokens)

        # Sync overrides
        if output_dir := os.getenv("SYNC_OUTPUT_DIR"):
            self.sync.output_dir = output_dir
        if registry := os.getenv("POLICY_REGISTRY_FILE"):
            self.sync.registry_file = registry
        if agent := os.getenv("SYNC_USER_AGENT"):
            self.sync.user_agent = agent
