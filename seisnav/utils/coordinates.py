"""
Coordinate conversion utilities.

Converts Degrees-Minutes-Seconds fields with a hemisphere letter into
signed decimal degrees. No datum or bounds handling is done here.
"""

from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray


def hemisphere_sign(hemisphere: ArrayLike, positive: str) -> NDArray[np.float64]:
    """
    +1 where the hemisphere letter equals ``positive``, -1 elsewhere.

    Anything other than the positive letter (including blanks) counts
    as the negative hemisphere.
    """
    letters = np.asarray(hemisphere, dtype=str)
    return np.where(letters == positive, 1.0, -1.0)


def dms_to_decimal(
    degrees: ArrayLike,
    minutes: ArrayLike,
    seconds: ArrayLike,
    hemisphere: ArrayLike,
    positive: str,
) -> Union[float, NDArray[np.float64]]:
    """
    Convert DMS to signed decimal degrees.

    Args:
        degrees, minutes, seconds: DMS components (scalars or arrays)
        hemisphere: Hemisphere letter(s), e.g. 'N'/'S' or 'E'/'W'
        positive: Letter of the positive hemisphere ('N' or 'E')

    Returns:
        Decimal degrees, a float for scalar input
    """
    magnitude = (
        np.asarray(degrees, dtype=np.float64)
        + np.asarray(minutes, dtype=np.float64) / 60
        + np.asarray(seconds, dtype=np.float64) / 3600
    )
    value = hemisphere_sign(hemisphere, positive) * magnitude
    if np.ndim(value) == 0:
        return float(value)
    return value


def dms_to_latitude(degrees, minutes, seconds, hemisphere):
    return dms_to_decimal(degrees, minutes, seconds, hemisphere, "N")


def dms_to_longitude(degrees, minutes, seconds, hemisphere):
    return dms_to_decimal(degrees, minutes, seconds, hemisphere, "E")
