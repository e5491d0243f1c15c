"""
UKOOA P1-90 navigation reader.

Reads the data section of one or more P1-90 files into time-ordered
NavigationData. Header records are skipped; positions are assumed to be
geographic DMS. Datum and projection information from the header is not
interpreted.
"""

import logging
from typing import Iterable, Optional, Union

import numpy as np

from seisnav.config import ReaderSettings, resolve_settings
from seisnav.models.navigation import NavigationData, NavigationMetadata
from seisnav.services.columns import decode_fields
from seisnav.services.ingest import PathLike, ingest
from seisnav.services.record_filter import drop_unpaired, filter_records
from seisnav.utils.calendar import gregorian, utc_seconds
from seisnav.utils.coordinates import dms_to_latitude, dms_to_longitude


logger = logging.getLogger(__name__)


def assemble(
    fields: dict[str, np.ndarray],
    year: int,
    metadata: NavigationMetadata,
    leap_rule: str = "julian",
) -> NavigationData:
    """
    Build NavigationData from decoded columns.

    Args:
        fields: Output of decode_fields
        year: Acquisition year for the day-of-year conversion
        metadata: Metadata attached to the result
        leap_rule: Leap-year rule for the day-of-year conversion

    Returns:
        NavigationData in input order (not yet sorted). Identifier fields
        missing from ``fields`` are filled with NaN.
    """
    n = len(fields["record_kind"])
    missing = np.full(n, np.nan)

    day, month = gregorian(fields["julian_day"], year, leap_rule)
    utc = utc_seconds(
        year, month, day, fields["hour"], fields["minute"], fields["second"]
    )

    latitude = dms_to_latitude(
        fields["lat_deg"], fields["lat_min"], fields["lat_sec"], fields["lat_hemisphere"]
    )
    longitude = dms_to_longitude(
        fields["lon_deg"], fields["lon_min"], fields["lon_sec"], fields["lon_hemisphere"]
    )

    return NavigationData(
        metadata=metadata,
        record_kind=fields["record_kind"],
        vessel_id=fields.get("vessel_id", missing),
        source_id=fields.get("source_id", missing),
        line=fields.get("line", missing),
        point=fields.get("point", missing),
        utc_seconds=np.asarray(utc, dtype=np.float64),
        latitude=np.asarray(latitude, dtype=np.float64),
        longitude=np.asarray(longitude, dtype=np.float64),
    )


class P190Reader:
    """Reader for P1-90 files."""

    name = "p190"

    def read(
        self,
        paths: Union[PathLike, Iterable[PathLike]],
        year: Optional[int] = None,
        settings: Optional[ReaderSettings] = None,
    ) -> NavigationData:
        settings = resolve_settings(settings)
        raw = ingest(paths, year, settings.encoding)

        metadata = NavigationMetadata(
            source_files=raw.source_files,
            year=raw.year,
            leap_rule=settings.leap_rule,
            lines_read=raw.line_count,
        )
        lines = self._filter(raw.lines, metadata, settings)

        if not lines:
            logger.warning(f"No valid P1-90 records in {len(raw.source_files)} file(s)")
            return NavigationData.empty(metadata)

        fields = decode_fields(lines)
        data = assemble(fields, raw.year, metadata, settings.leap_rule).sort_by_time()

        logger.info(
            f"Assembled {len(data)} records "
            f"({metadata.rejected_total} of {metadata.lines_read} lines rejected)"
        )
        return data

    def _filter(
        self,
        lines: list[str],
        metadata: NavigationMetadata,
        settings: ReaderSettings,
    ) -> list[str]:
        typed = filter_records(lines, metadata)
        paired = drop_unpaired(typed, settings.log_dropped)
        metadata.rejected_unpaired = len(typed) - len(paired)

        logger.debug(
            f"Filtered lines: length={metadata.rejected_length} "
            f"duplicate={metadata.rejected_duplicate} kind={metadata.rejected_kind} "
            f"unpaired={metadata.rejected_unpaired}"
        )
        return paired


def read_p190(
    paths: Union[PathLike, Iterable[PathLike]],
    year: Optional[int] = None,
    settings: Optional[ReaderSettings] = None,
) -> NavigationData:
    """
    Read P1-90 files and return time-ordered navigation records.

    Args:
        paths: A file path or an ordered list of paths
        year: Acquisition year. Taken from the file modification time if
            omitted; all files must then share the same year.
        settings: Reader options (defaults from the environment)
    """
    return P190Reader().read(paths, year, settings)
