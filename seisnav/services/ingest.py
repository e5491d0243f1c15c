"""
Line ingestion.

Reads one or more navigation logs into a single ordered list of lines and
resolves the acquisition year shared by all of them.
"""

import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Iterable, Optional, Union

from seisnav.errors import ConfigurationError
from seisnav.models.raw import RawNavigationLog


logger = logging.getLogger(__name__)

PathLike = Union[str, os.PathLike]


def as_path_list(paths: Union[PathLike, Iterable[PathLike]]) -> list[Path]:
    """Accept a single path or an ordered collection of paths."""
    if isinstance(paths, (str, os.PathLike)):
        return [Path(paths)]
    return [Path(p) for p in paths]


def modification_year(filepath: Path) -> int:
    """Local-time year of the file's last modification."""
    return datetime.fromtimestamp(filepath.stat().st_mtime).year


def resolve_year(paths: list[Path], year: Optional[int] = None) -> int:
    """
    Resolve the acquisition year for a batch of files.

    Args:
        paths: Input files, in processing order
        year: Explicit year applied to every file, if given

    Returns:
        The single year shared by all files

    Raises:
        ConfigurationError: If the files resolve to more than one year
    """
    years = {}
    for filepath in paths:
        years[filepath] = year if year is not None else modification_year(filepath)

    distinct = sorted(set(years.values()))
    if len(distinct) > 1:
        detail = ", ".join(f"{p.name}={y}" for p, y in years.items())
        raise ConfigurationError(
            f"The year of acquisition must be the same for all files ({detail})"
        )
    return distinct[0]


def read_lines(filepath: Path, encoding: str = "utf-8-sig") -> list[str]:
    """Read every line of a text file, without line terminators."""
    with open(filepath, "r", encoding=encoding, errors="replace") as f:
        return f.read().splitlines()


def ingest(
    paths: Union[PathLike, Iterable[PathLike]],
    year: Optional[int] = None,
    encoding: str = "utf-8-sig",
) -> RawNavigationLog:
    """
    Load navigation logs and resolve their acquisition year.

    Lines are concatenated in file order. The year is resolved per file
    before merging, because day-of-year decoding depends on it.
    """
    filepaths = as_path_list(paths)
    if not filepaths:
        raise ConfigurationError("At least one input file is required")

    resolved_year = resolve_year(filepaths, year)

    lines: list[str] = []
    for filepath in filepaths:
        file_lines = read_lines(filepath, encoding)
        logger.debug(f"Read {len(file_lines)} lines from {filepath}")
        lines.extend(file_lines)

    logger.info(
        f"Ingested {len(lines)} lines from {len(filepaths)} file(s), year {resolved_year}"
    )
    return RawNavigationLog(source_files=filepaths, lines=lines, year=resolved_year)
