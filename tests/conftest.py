"""
Shared fixtures: synthetic P1-90 sentences and log files.
"""

import os
from datetime import datetime

import pytest


def build_p190_line(
    kind="V",
    line=1001,
    vessel_id=1,
    source_id=1,
    point=100,
    lat=(40, 30, 0.0, "N"),
    lon=(73, 15, 0.0, "W"),
    julian_day=1,
    time=(12, 23, 0),
):
    """Build an 80-character P1-90 sentence."""
    lat_deg, lat_min, lat_sec, lat_hem = lat
    lon_deg, lon_min, lon_sec, lon_hem = lon
    hour, minute, second = time
    text = (
        f"{kind:1s}"
        f"{line:>12d}"
        f"{'':3s}"
        f"{vessel_id:1d}{source_id:1d} "
        f"{point:>6d}"
        f"{lat_deg:02d}{lat_min:02d}{lat_sec:05.2f}{lat_hem:1s}"
        f"{lon_deg:03d}{lon_min:02d}{lon_sec:05.2f}{lon_hem:1s}"
        f"{'':24s}"
        f"{julian_day:03d}{hour:02d}{minute:02d}{second:02d} "
    )
    assert len(text) == 80
    return text


@pytest.fixture
def make_line():
    """Factory for P1-90 sentences."""
    return build_p190_line


@pytest.fixture
def write_log(tmp_path):
    """Write lines to a file and optionally stamp its modification year."""

    def _write(name, lines, year=None):
        filepath = tmp_path / name
        filepath.write_text("\n".join(lines) + "\n")
        if year is not None:
            stamp = datetime(year, 6, 15, 12, 0, 0).timestamp()
            os.utime(filepath, (stamp, stamp))
        return filepath

    return _write


@pytest.fixture
def header_lines():
    return [
        "H0100SURVEY AREA                 NORTH SEA BLOCK 12",
        "H0200DATE OF SURVEY              2021",
        "H1400GEODETIC DATUM              WGS84",
    ]
