"""Wind speed adjustment to the 2 m reference height."""

import numpy as np

from ..core.constants import (
    REFERENCE_WIND_HEIGHT,
    WIND_PROFILE_NUMERATOR,
    WIND_PROFILE_SCALE,
    WIND_PROFILE_OFFSET,
)

# The profile logarithm is positive only above this height (m)
MIN_WIND_HEIGHT = (WIND_PROFILE_OFFSET + 1.0) / WIND_PROFILE_SCALE


def adjust_wind_speed(wind_speed, height=REFERENCE_WIND_HEIGHT):
    """
    Adjust wind speed measured at ``height`` to 2 m (Eq. 33).

        u2 = uz * 4.87 / ln(67.8 zw - 5.42)

    Speeds already measured at 2 m are returned unchanged.

    Args:
        wind_speed: Measured wind speed (m/s)
        height: Measurement height above ground (m)

    Returns:
        Wind speed at 2 m (m/s)
    """
    if np.ndim(height) == 0:
        if height == REFERENCE_WIND_HEIGHT:
            return wind_speed
        return wind_speed * (WIND_PROFILE_NUMERATOR / np.log(WIND_PROFILE_SCALE * height - WIND_PROFILE_OFFSET))

    height = np.asarray(height, dtype=np.float64)
    factor = np.where(
        height == REFERENCE_WIND_HEIGHT,
        1.0,
        WIND_PROFILE_NUMERATOR / np.log(WIND_PROFILE_SCALE * height - WIND_PROFILE_OFFSET)
    )
    return wind_speed * factor
