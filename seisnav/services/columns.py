"""
Fixed-column field decoding for P1-90 style sentences.

Every decoded field is described once in a column table; a single slicing
routine applies the table to a batch of lines.
"""

from dataclasses import dataclass
from typing import Callable

import numpy as np
import pandas as pd

from seisnav.errors import FormatError


Decoder = Callable[[pd.Series, "ColumnSpec"], np.ndarray]


def _numeric(values: pd.Series, spec: "ColumnSpec") -> pd.Series:
    stripped = values.str.strip()
    try:
        numbers = pd.to_numeric(stripped, errors="raise").astype(np.float64)
    except (ValueError, TypeError) as e:
        raise FormatError(spec.name, spec.start, spec.end, str(e)) from e

    blank = numbers.isna()
    if blank.any():
        row = int(np.argmax(blank.to_numpy()))
        raise FormatError(
            spec.name, spec.start, spec.end, f"empty value in record {row + 1}"
        )
    return numbers


def as_int(values: pd.Series, spec: "ColumnSpec") -> np.ndarray:
    numbers = _numeric(values, spec)
    fractional = numbers != np.floor(numbers)
    if fractional.any():
        row = int(np.argmax(fractional.to_numpy()))
        raise FormatError(
            spec.name,
            spec.start,
            spec.end,
            f"'{values.iloc[row]}' is not an integer (record {row + 1})",
        )
    return numbers.to_numpy().astype(np.int64)


def as_float(values: pd.Series, spec: "ColumnSpec") -> np.ndarray:
    return _numeric(values, spec).to_numpy().astype(np.float64)


def as_optional_int(values: pd.Series, spec: "ColumnSpec") -> np.ndarray:
    """Lenient integer field: blank or non-numeric content becomes NaN."""
    return pd.to_numeric(values.str.strip(), errors="coerce").to_numpy().astype(np.float64)


def as_char(values: pd.Series, spec: "ColumnSpec") -> np.ndarray:
    return values.to_numpy().astype(str)


@dataclass(frozen=True)
class ColumnSpec:
    """A field at 1-indexed, inclusive columns ``start``..``end``."""

    name: str
    start: int
    end: int
    decoder: Decoder

    def slice(self, lines: pd.Series) -> pd.Series:
        return lines.str.slice(self.start - 1, self.end)

    def decode(self, lines: pd.Series) -> np.ndarray:
        return self.decoder(self.slice(lines), self)


P190_COLUMNS: tuple[ColumnSpec, ...] = (
    ColumnSpec("record_kind", 1, 1, as_char),
    ColumnSpec("line", 2, 13, as_int),
    ColumnSpec("vessel_id", 17, 17, as_optional_int),
    ColumnSpec("source_id", 18, 18, as_optional_int),
    ColumnSpec("point", 20, 25, as_int),
    ColumnSpec("lat_deg", 26, 27, as_int),
    ColumnSpec("lat_min", 28, 29, as_int),
    ColumnSpec("lat_sec", 30, 34, as_float),
    ColumnSpec("lat_hemisphere", 35, 35, as_char),
    ColumnSpec("lon_deg", 36, 38, as_int),
    ColumnSpec("lon_min", 39, 40, as_int),
    ColumnSpec("lon_sec", 41, 45, as_float),
    ColumnSpec("lon_hemisphere", 46, 46, as_char),
    ColumnSpec("julian_day", 71, 73, as_int),
    ColumnSpec("hour", 74, 75, as_int),
    ColumnSpec("minute", 76, 77, as_int),
    ColumnSpec("second", 78, 79, as_int),
)

POSITION_TIME_FIELDS = (
    "record_kind",
    "lat_deg",
    "lat_min",
    "lat_sec",
    "lat_hemisphere",
    "lon_deg",
    "lon_min",
    "lon_sec",
    "lon_hemisphere",
    "julian_day",
    "hour",
    "minute",
    "second",
)

# SPS records share the position and time columns only
SPS_COLUMNS: tuple[ColumnSpec, ...] = tuple(
    spec for spec in P190_COLUMNS if spec.name in POSITION_TIME_FIELDS
)

# Day-of-year and time of day read as one number; pairs vessel and source
# sentences of the same shot.
TICK_COLUMN = ColumnSpec("tick", 71, 79, as_int)

RECORD_WIDTH = 80


def decode_fields(
    lines: list[str],
    columns: tuple[ColumnSpec, ...] = P190_COLUMNS,
) -> dict[str, np.ndarray]:
    """
    Decode every column of the table for a batch of lines.

    Returns:
        Mapping of field name to an array with one entry per line
    """
    series = pd.Series(lines, dtype=object)
    return {spec.name: spec.decode(series) for spec in columns}


def decode_ticks(lines: list[str]) -> np.ndarray:
    return TICK_COLUMN.decode(pd.Series(lines, dtype=object))
