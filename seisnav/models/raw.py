"""
Raw navigation log (ingested text, undecoded).

The ingestion stage loads every input file into this structure before
filtering and decoding.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass
class RawNavigationLog:
    """Concatenated text lines of one or more log files."""

    source_files: list[Path]
    lines: list[str]  # file order, then line order
    year: int  # acquisition year shared by every file

    @property
    def line_count(self) -> int:
        return len(self.lines)
