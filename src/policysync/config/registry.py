"""Manufacturer policy source registry.

The registry maps a short manufacturer id to the URL of its 340B policy PDF.
Iteration order is the insertion order of the mapping; it drives the order of
the run-status ``updates`` list, so it must stay deterministic.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import TYPE_CHECKING

from policysync.core.models import ManufacturerEntry


if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping


MANUFACTURER_POLICIES: dict[str, str] = {
    "abbvie": "https://340besp.com/resources/abbvie/policy.pdf",
    "alkermes": "https://340besp.com/resources/alkermes/policy.pdf",
    "amgen": "https://340besp.com/resources/amgen/policy.pdf",
    "astrazeneca": "https://340besp.com/resources/astrazeneca/policy.pdf",
    "biogen": "https://340besp.com/resources/biogen/policy.pdf",
    "bristolmyerssquibb": "https://340besp.com/resources/bristolmyerssquibb/policy.pdf",
    "elililly": "https://340besp.com/resources/elililly/policy.pdf",
    "gilead": "https://340besp.com/resources/gilead/policy.pdf",
    "glaxosmithkline": "https://340besp.com/resources/glaxosmithkline/policy.pdf",
    "janssen": "https://340besp.com/resources/janssen/policy.pdf",
    "merck": "https://340besp.com/resources/merck/policy.pdf",
    "novartis": "https://340besp.com/resources/novartis/policy.pdf",
    "pfizer": "https://340besp.com/resources/pfizer/policy.pdf",
    "regeneron": "https://340besp.com/resources/regeneron/policy.pdf",
    "roche": "https://340besp.com/resources/roche/policy.pdf",
    "sanofi": "https://340besp.com/resources/sanofi/policy.pdf",
    "teva": "https://340besp.com/resources/teva/policy.pdf",
}


def entries_from_mapping(mapping: Mapping[str, str]) -> list[ManufacturerEntry]:
    """Build registry entries from an id -> URL mapping, preserving order."""
    return [ManufacturerEntry(id=key, source_url=url) for key, url in mapping.items()]


def load_registry(path: str | Path | None = None) -> list[ManufacturerEntry]:
    """Load the manufacturer registry.

    Args:
        path: Optional JSON file holding an object of id -> URL. When omitted
            the built-in registry is used.

    Returns:
        Registry entries in file (or built-in) order.

    Raises:
        ValueError: If the file is not a JSON object of strings.
    """
    if path is None:
        return entries_from_mapping(MANUFACTURER_POLICIES)

    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        msg = f"Registry file must contain a JSON object: {path}"
        raise ValueError(msg)
    for key, url in data.items():
        if not isinstance(url, str) or not url:
            msg = f"Registry entry {key!r} must map to a URL string"
            raise ValueError(msg)
    return entries_from_mapping(data)


def select_entries(entries: list[ManufacturerEntry], ids: Iterable[str]) -> list[ManufacturerEntry]:
    """Keep only the given manufacturer ids, in registry order."""
    wanted = set(ids)
    known = {entry.id for entry in entries}
    if unknown := sorted(wanted - known):
        msg = f"Unknown manufacturer id(s): {', '.join(unknown)}"
        raise ValueError(msg)
    return [entry for entry in entries if entry.id in wanted]
