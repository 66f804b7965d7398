"""Markdown table parsing and CSV serialization."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from policysync.core.types import Row


# A markdown separator line such as |---|:---:|
SEPARATOR_RE = re.compile(r"^[\s|:\-]+$")

# Characters that force a CSV cell to be quoted
CSV_SPECIAL = (",", '"', "\n")


def parse_markdown_table(markdown: str) -> list[Row]:
    """Parse the pipe-delimited lines of a markdown table into rows.

    The header row is returned like any other row. Lines that do not start
    with a pipe are ignored, so prose around the table is skipped.
    """
    rows: list[Row] = []
    for line in markdown.split("\n"):
        if not line.strip() or SEPARATOR_RE.match(line):
            continue
        if not line.startswith("|"):
            continue
        cells = [cell.strip() for cell in line.split("|")]
        # Drop the empty pieces outside the leading and trailing pipes; interior
        # empty cells stay so columns keep their positions
        cells = cells[1:]
        if cells and not cells[-1]:
            cells = cells[:-1]
        if any(cells):
            rows.append(cells)
    return rows


def escape_csv_cell(cell: str) -> str:
    escaped = cell.replace('"', '""')
    if any(ch in escaped for ch in CSV_SPECIAL):
        return f'"{escaped}"'
    return escaped


def rows_to_csv(rows: list[Row]) -> str:
    """Serialize rows as CSV text without a trailing newline."""
    return "\n".join(",".join(escape_csv_cell(cell) for cell in row) for row in rows)
