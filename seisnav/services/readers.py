"""
Reader registry.

Maps format names to reader implementations so callers can select a
reader from configuration.
"""

from typing import Iterable, Optional, Protocol, Union

from seisnav.config import ReaderSettings
from seisnav.errors import ConfigurationError
from seisnav.models.navigation import NavigationData
from seisnav.services.ingest import PathLike
from seisnav.services.p190_reader import P190Reader
from seisnav.services.sps_reader import SpsReader


class NavigationReader(Protocol):
    """Reader interface for navigation log formats."""

    name: str

    def read(
        self,
        paths: Union[PathLike, Iterable[PathLike]],
        year: Optional[int] = None,
        settings: Optional[ReaderSettings] = None,
    ) -> NavigationData:
        ...


READERS: dict[str, NavigationReader] = {
    reader.name: reader for reader in (P190Reader(), SpsReader())
}


def get_reader(fmt: str) -> NavigationReader:
    try:
        return READERS[fmt.lower()]
    except KeyError:
        known = ", ".join(sorted(READERS))
        raise ConfigurationError(f"Unknown navigation format '{fmt}' (known: {known})") from None


def read_navigation(
    paths: Union[PathLike, Iterable[PathLike]],
    fmt: str = "p190",
    year: Optional[int] = None,
    settings: Optional[ReaderSettings] = None,
) -> NavigationData:
    """
    Read navigation logs with the reader registered for ``fmt``.
    """
    return get_reader(fmt).read(paths, year, settings)
