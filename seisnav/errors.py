"""
Error kinds raised by the navigation readers.

File access failures are not wrapped: they surface as the OSError
subclasses raised by open().
"""

from typing import Optional


class NavigationError(ValueError):
    """Base class for navigation log errors."""


class ConfigurationError(NavigationError):
    """Invocation parameters or settings are inconsistent (e.g. mixed years)."""


class FormatError(NavigationError):
    """A positional field could not be decoded."""

    def __init__(
        self,
        field: str,
        start: Optional[int] = None,
        end: Optional[int] = None,
        detail: str = "",
    ):
        self.field = field
        self.start = start
        self.end = end
        message = f"Cannot decode field '{field}'"
        if start is not None:
            message = f"{message} (columns {start}-{end})"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
