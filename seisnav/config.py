"""
Reader configuration.

Defaults come from environment variables so batch jobs can switch
behaviour without code changes.
"""

import os
from typing import Literal, Optional

from pydantic import BaseModel, Field, ValidationError

from seisnav.errors import ConfigurationError


LEAP_RULE_ENV = "SEISNAV_LEAP_RULE"
LOG_DROPPED_ENV = "SEISNAV_LOG_DROPPED"
ENCODING_ENV = "SEISNAV_ENCODING"


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default) not in ("0", "false", "False")


class ReaderSettings(BaseModel):
    """Options shared by the P1-90 and SPS readers."""

    # "julian": every year divisible by 4 is a leap year
    # "gregorian": century years must also be divisible by 400
    leap_rule: Literal["julian", "gregorian"] = "julian"
    log_dropped: bool = True
    encoding: str = Field(default="utf-8-sig", min_length=1)

    @classmethod
    def from_env(cls) -> "ReaderSettings":
        """Build settings from SEISNAV_* environment variables."""
        try:
            return cls(
                leap_rule=os.getenv(LEAP_RULE_ENV, "julian"),
                log_dropped=_env_flag(LOG_DROPPED_ENV, "1"),
                encoding=os.getenv(ENCODING_ENV, "utf-8-sig"),
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid reader settings: {e}") from e


def resolve_settings(settings: Optional[ReaderSettings] = None) -> ReaderSettings:
    if settings is None:
        return ReaderSettings.from_env()
    return settings

