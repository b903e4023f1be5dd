"""Detection of table-like runs of lines in extracted text."""

import re

from ..core.document import DetectedTable

_WIDE_GAP = re.compile(r"\s{3,}")
_THREE_NUMBERS = re.compile(r"\d+.*\d+.*\d+")


def is_table_line(line: str) -> bool:
    return "\t" in line or bool(_WIDE_GAP.search(line)) or bool(_THREE_NUMBERS.search(line))


def detect_tables(text: str, min_rows: int = 2) -> list[DetectedTable]:
    """Group consecutive table-like lines into tables of at least ``min_rows``."""
    tables = []
    current: list[str] = []

    for line in text.split("\n"):
        if is_table_line(line):
            current.append(line)
            continue
        if len(current) >= min_rows:
            tables.append(DetectedTable(rows=current))
        current = []

    if len(current) >= min_rows:
        tables.append(DetectedTable(rows=current))

    return tables
