"""
Core sun position calculation and light driving.
"""

from .sun_position import SunPositionCalculator, calculate_sun_position, correct_angle
from .lighting import intensity_from_altitude, inverse_lerp, orientation_from_position
from .sun_driver import SunOrientationDriver

__all__ = [
    'SunPositionCalculator',
    'calculate_sun_position',
    'correct_angle',
    'intensity_from_altitude',
    'inverse_lerp',
    'orientation_from_position',
    'SunOrientationDriver',
]
