"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import fitz
import pytest

from policysync.core.models import ManufacturerEntry
from policysync.storage.snapshots import SnapshotStore


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def project_root() -> Path:
    """Get project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def temp_output_dir(tmp_path: Path) -> Generator[Path, None, None]:
    """Create temporary output directory."""
    output_dir = tmp_path / "output"
    output_dir.mkdir()
    yield output_dir


@pytest.fixture
def store(temp_output_dir: Path) -> SnapshotStore:
    return SnapshotStore(temp_output_dir)


@pytest.fixture
def registry() -> list[ManufacturerEntry]:
    return [
        ManufacturerEntry(id="abbvie", source_url="https://example.test/abbvie.pdf"),
        ManufacturerEntry(id="amgen", source_url="https://example.test/amgen.pdf"),
        ManufacturerEntry(id="pfizer", source_url="https://example.test/pfizer.pdf"),
    ]


@pytest.fixture
def sample_pdf_bytes() -> bytes:
    """Build a small two-page PDF in memory."""
    doc = fitz.open()
    doc.new_page().insert_text((72, 72), "Contract pharmacy policy")
    doc.new_page().insert_text((72, 72), "Claims data requirement")
    data = doc.tobytes()
    doc.close()
    return data
