"""
Record filtering and pairing validation.

Each stage works on a list of raw sentences and keeps the original
order of the lines it retains.
"""

import logging
from typing import Optional

import pandas as pd

from seisnav.models.navigation import RECORD_KIND_CODES, NavigationMetadata
from seisnav.services.columns import RECORD_WIDTH, decode_ticks


logger = logging.getLogger(__name__)


def drop_wrong_length(lines: list[str], width: int = RECORD_WIDTH) -> list[str]:
    """Keep lines of exactly ``width`` characters; others are corrupt."""
    return [line for line in lines if len(line) == width]


def drop_duplicates(lines: list[str]) -> list[str]:
    """Remove exact repeats, keeping the first occurrence of each line."""
    return list(dict.fromkeys(lines))


def drop_unknown_kinds(
    lines: list[str],
    kinds: tuple[str, ...] = RECORD_KIND_CODES,
) -> list[str]:
    """Keep vessel and source sentences; headers and other types go."""
    return [line for line in lines if line[:1] in kinds]


def filter_records(
    lines: list[str],
    metadata: Optional[NavigationMetadata] = None,
) -> list[str]:
    """
    Length, duplicate and record-type filtering, in that order.

    When ``metadata`` is given, the number of lines each stage rejected is
    recorded on it.
    """
    sized = drop_wrong_length(lines)
    unique = drop_duplicates(sized)
    typed = drop_unknown_kinds(unique)

    if metadata is not None:
        metadata.rejected_length = len(lines) - len(sized)
        metadata.rejected_duplicate = len(sized) - len(unique)
        metadata.rejected_kind = len(unique) - len(typed)
    return typed


def drop_unpaired(lines: list[str], log_dropped: bool = True) -> list[str]:
    """
    Remove sentences whose tick occurs only once.

    A vessel sentence and its source sentence carry the same tick
    (day-of-year and time, columns 71-79). A tick seen a single time means
    the other half of the pair was lost, so the survivor is discarded.
    A shot that legitimately has one sentence is dropped as well.

    Raises:
        FormatError: If a tick is not numeric
    """
    if not lines:
        return []

    ticks = pd.Series(decode_ticks(lines))
    counts = ticks.map(ticks.value_counts())
    paired = (counts > 1).to_numpy()

    kept = [line for line, keep in zip(lines, paired) if keep]
    dropped = len(lines) - len(kept)
    if dropped and log_dropped:
        logger.warning(f"Dropped {dropped} unpaired sentence(s) with a unique tick")
        for line, keep in zip(lines, paired):
            if not keep:
                logger.debug(f"Unpaired sentence: {line!r}")
    return kept
