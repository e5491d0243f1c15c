"""
SPS navigation reader.

Decodes source positions from a single SPS file with the same column
layout as P1-90 sentences. Unlike the P1-90 reader it does not filter by
width, remove duplicates, check pairing or sort: source records are
returned in file order. Only the position and time columns are decoded;
line, point and identifiers are left as NaN.
"""

import logging
from typing import Iterable, Optional, Union

from seisnav.config import ReaderSettings, resolve_settings
from seisnav.errors import ConfigurationError
from seisnav.models.navigation import NavigationData, NavigationMetadata, RecordKind
from seisnav.services.columns import SPS_COLUMNS, decode_fields
from seisnav.services.ingest import PathLike, as_path_list, read_lines
from seisnav.services.p190_reader import assemble


logger = logging.getLogger(__name__)

HEADER_CODE = "H"


def skip_header(lines: list[str]) -> list[str]:
    """Drop the leading block of header records."""
    for i, line in enumerate(lines):
        if not line.startswith(HEADER_CODE):
            return lines[i:]
    return []


class SpsReader:
    """Reader for SPS files (source records only)."""

    name = "sps"

    def read(
        self,
        paths: Union[PathLike, Iterable[PathLike]],
        year: Optional[int] = None,
        settings: Optional[ReaderSettings] = None,
    ) -> NavigationData:
        filepaths = as_path_list(paths)
        if len(filepaths) != 1:
            raise ConfigurationError("The SPS reader takes exactly one file")
        if year is None:
            raise ConfigurationError("The SPS reader requires an explicit year")

        settings = resolve_settings(settings)
        filepath = filepaths[0]
        lines = read_lines(filepath, settings.encoding)
        body = [line for line in skip_header(lines) if line.strip()]
        source_lines = [line for line in body if line.startswith(RecordKind.SOURCE.value)]

        metadata = NavigationMetadata(
            source_files=filepaths,
            year=year,
            leap_rule=settings.leap_rule,
            lines_read=len(lines),
            rejected_kind=len(body) - len(source_lines),
        )
        if not source_lines:
            logger.warning(f"No SPS records in {filepath}")
            return NavigationData.empty(metadata)

        fields = decode_fields(source_lines, SPS_COLUMNS)
        source = assemble(fields, year, metadata, settings.leap_rule)

        logger.info(f"Read {len(source)} source records from {filepath}")
        return source


def read_sps(
    path: PathLike,
    year: int,
    settings: Optional[ReaderSettings] = None,
) -> NavigationData:
    """Read source positions from an SPS file recorded in ``year``."""
    return SpsReader().read(path, year, settings)
