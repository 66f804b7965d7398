"""Tools module - External capability implementations."""

from __future__ import annotations

from policysync.tools.fetch import DocumentFetcher
from policysync.tools.pdf import PDFTextExtractor
from policysync.tools.table import parse_markdown_table, rows_to_csv


__all__ = [
    "DocumentFetcher",
    "PDFTextExtractor",
    "parse_markdown_table",
    "rows_to_csv",
]
