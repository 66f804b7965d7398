"""Tests for settings and the manufacturer registry."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from policysync.config.registry import (
    MANUFACTURER_POLICIES,
    load_registry,
    select_entries,
)
from policysync.config.settings import LLMProviderEnum, Settings


if TYPE_CHECKING:
    from pathlib import Path


class TestRegistry:
    def test_builtin_registry_order(self) -> None:
        entries = load_registry()
        assert [e.id for e in entries] == list(MANUFACTURER_POLICIES)
        assert len(entries) == 17
        assert entries[0].id == "abbvie"
        assert entries[-1].id == "teva"
        assert entries[0].source_url == "https://340besp.com/resources/abbvie/policy.pdf"

    def test_load_from_file_preserves_order(self, tmp_path: Path) -> None:
        path = tmp_path / "registry.json"
        path.write_text(json.dumps({"zeta": "https://z.test/p.pdf", "alpha": "https://a.test/p.pdf"}))
        assert [e.id for e in load_registry(path)] == ["zeta", "alpha"]

    def test_load_rejects_non_object(self, tmp_path: Path) -> None:
        path = tmp_path / "registry.json"
        path.write_text(json.dumps(["https://a.test/p.pdf"]))
        with pytest.raises(ValueError, match="JSON object"):
            load_registry(path)

    def test_load_rejects_non_string_url(self, tmp_path: Path) -> None:
        path = tmp_path / "registry.json"
        path.write_text(json.dumps({"abbvie": 42}))
        with pytest.raises(ValueError, match="abbvie"):
            load_registry(path)

    def test_select_entries_keeps_registry_order(self) -> None:
        selected = select_entries(load_registry(), ["teva", "abbvie"])
        assert [e.id for e in selected] == ["abbvie", "teva"]

    def test_select_entries_unknown_id(self) -> None:
        with pytest.raises(ValueError, match="nosuchco"):
            select_entries(load_registry(), ["abbvie", "nosuchco"])


class TestSettings:
    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        for var in ("LLM_PROVIDER", "OPENAI_MODEL", "SYNC_OUTPUT_DIR", "POLICY_REGISTRY_FILE"):
            monkeypatch.delenv(var, raising=False)
        settings = Settings(_env_file=None)
        assert settings.llm.provider == LLMProviderEnum.OPENAI
        assert settings.llm.openai_model == "gpt-4o-mini"
        assert settings.sync.output_dir == "output"
        assert settings.sync.registry_file is None

    def test_flat_env_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LLM_PROVIDER", "anthropic")
        monkeypatch.setenv("SYNC_OUTPUT_DIR", "/tmp/policies")
        monkeypatch.setenv("POLICY_REGISTRY_FILE", "registry.json")
        monkeypatch.setenv("LLM_MAX_TOKENS", "4096")
        settings = Settings(_env_file=None)
        assert settings.llm.provider == LLMProviderEnum.ANTHROPIC
        assert settings.sync.output_dir == "/tmp/policies"
        assert settings.sync.registry_file == "registry.json"
        assert settings.llm.max_tokens == 4096

    def test_nested_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("SYNC_OUTPUT_DIR", raising=False)
        monkeypatch.setenv("SYNC__OUTPUT_DIR", "nested-output")
        assert Settings(_env_file=None).sync.output_dir == "nested-output"
