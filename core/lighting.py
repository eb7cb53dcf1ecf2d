"""
Mapping from sun position to light orientation and intensity.
"""

import math
from typing import Tuple

import numpy as np

NIGHT_ALTITUDE = -12.0  # Nautical twilight, light fully off
DAY_ALTITUDE = 0.0


def inverse_lerp(a: float, b: float, value: float) -> float:
    """
    Position of ``value`` between ``a`` and ``b``, clamped to [0, 1].

    Returns 0.0 when ``a`` and ``b`` are equal.
    """
    if a == b:
        return 0.0
    return float(np.clip((value - a) / (b - a), 0.0, 1.0))


def intensity_from_altitude(
    altitude_degrees: float,
    night_altitude: float = NIGHT_ALTITUDE,
    day_altitude: float = DAY_ALTITUDE
) -> float:
    """
    Light intensity for a sun altitude.

    Args:
        altitude_degrees: Sun altitude in degrees
        night_altitude: Altitude at or below which the light is off
        day_altitude: Altitude at or above which the light is at full intensity

    Returns:
        Intensity in [0, 1]
    """
    return inverse_lerp(night_altitude, day_altitude, altitude_degrees)


def orientation_from_position(azimuth: float, altitude: float) -> Tuple[float, float]:
    """
    Convert a sun position in radians to (pitch, yaw) in degrees.
    """
    return math.degrees(altitude), math.degrees(azimuth)
