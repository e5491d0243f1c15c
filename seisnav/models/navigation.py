"""
Navigation data model.

Decoded records are held as a structure of arrays:
- one numpy array per field, all of equal length
- index i of every array describes the same pulse event
- rows are ordered by utc_seconds once assembled
"""

from dataclasses import dataclass, replace
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional

import numpy as np
import pandas as pd
from numpy.typing import NDArray


class RecordKind(Enum):
    """Record type, taken from the first character of a sentence."""

    VESSEL = "V"
    SOURCE = "S"


RECORD_KIND_CODES = tuple(kind.value for kind in RecordKind)

FIELD_NAMES = (
    "record_kind",
    "vessel_id",
    "source_id",
    "line",
    "point",
    "utc_seconds",
    "latitude",
    "longitude",
)


def _optional_int(value) -> Optional[int]:
    if np.isnan(value):
        return None
    return int(value)


@dataclass
class NavigationMetadata:
    """Where a record set came from and what was rejected on the way."""

    source_files: list[Path]
    year: int
    leap_rule: str
    lines_read: int = 0
    rejected_length: int = 0
    rejected_duplicate: int = 0
    rejected_kind: int = 0
    rejected_unpaired: int = 0

    @property
    def rejected_total(self) -> int:
        return (
            self.rejected_length
            + self.rejected_duplicate
            + self.rejected_kind
            + self.rejected_unpaired
        )


@dataclass(frozen=True)
class NavigationRecord:
    """A single pulse event."""

    record_kind: RecordKind
    vessel_id: Optional[int]  # None when the column is blank
    source_id: Optional[int]
    line: Optional[int]  # None for SPS records
    point: Optional[int]
    utc_seconds: float  # seconds since 1970-01-01 UTC
    latitude: float  # decimal degrees, north positive
    longitude: float  # decimal degrees, east positive


@dataclass
class NavigationData:
    """Time-ordered navigation records of a survey."""

    metadata: NavigationMetadata

    record_kind: NDArray[np.str_]  # 'V' or 'S'
    vessel_id: NDArray[np.float64]  # NaN when blank
    source_id: NDArray[np.float64]
    line: NDArray  # int64, or NaN-filled float64 for SPS
    point: NDArray
    utc_seconds: NDArray[np.float64]
    latitude: NDArray[np.float64]
    longitude: NDArray[np.float64]

    def __post_init__(self):
        lengths = {name: len(getattr(self, name)) for name in FIELD_NAMES}
        if len(set(lengths.values())) > 1:
            raise ValueError(f"Navigation arrays differ in length: {lengths}")

    def __len__(self) -> int:
        return len(self.utc_seconds)

    @classmethod
    def empty(cls, metadata: NavigationMetadata) -> "NavigationData":
        return cls(
            metadata=metadata,
            record_kind=np.array([], dtype="<U1"),
            vessel_id=np.array([], dtype=np.float64),
            source_id=np.array([], dtype=np.float64),
            line=np.array([], dtype=np.int64),
            point=np.array([], dtype=np.int64),
            utc_seconds=np.array([], dtype=np.float64),
            latitude=np.array([], dtype=np.float64),
            longitude=np.array([], dtype=np.float64),
        )

    def take(self, indices: NDArray[np.intp]) -> "NavigationData":
        """Return a copy with every array indexed by ``indices``."""
        arrays = {name: getattr(self, name)[indices] for name in FIELD_NAMES}
        return replace(self, **arrays)

    def sort_by_time(self) -> "NavigationData":
        """Return a copy ordered by utc_seconds, stable for equal times."""
        order = np.argsort(self.utc_seconds, kind="stable")
        return self.take(order)

    def of_kind(self, kind: RecordKind) -> "NavigationData":
        return self.take(np.flatnonzero(self.record_kind == kind.value))

    def vessel(self) -> "NavigationData":
        return self.of_kind(RecordKind.VESSEL)

    def source(self) -> "NavigationData":
        return self.of_kind(RecordKind.SOURCE)

    def record(self, index: int) -> NavigationRecord:
        return NavigationRecord(
            record_kind=RecordKind(str(self.record_kind[index])),
            vessel_id=_optional_int(self.vessel_id[index]),
            source_id=_optional_int(self.source_id[index]),
            line=_optional_int(self.line[index]),
            point=_optional_int(self.point[index]),
            utc_seconds=float(self.utc_seconds[index]),
            latitude=float(self.latitude[index]),
            longitude=float(self.longitude[index]),
        )

    def records(self) -> Iterator[NavigationRecord]:
        for i in range(len(self)):
            yield self.record(i)

    def get_time_range(self) -> Optional[tuple[float, float]]:
        if len(self) == 0:
            return None
        return float(np.min(self.utc_seconds)), float(np.max(self.utc_seconds))

    def to_dataframe(self) -> pd.DataFrame:
        """Tabular view of the records, one row per pulse event."""
        df = pd.DataFrame({name: getattr(self, name) for name in FIELD_NAMES})
        df["utc_time"] = pd.to_datetime(df["utc_seconds"], unit="s", utc=True)
        return df
