"""
Data models for sun positions, day profiles, and lights.
"""

from .sun_state import SolarPosition, SunSample, DayProfile
from .light import OrientationSink, IntensitySink, DirectionalLight

__all__ = [
    'SolarPosition',
    'SunSample',
    'DayProfile',
    'OrientationSink',
    'IntensitySink',
    'DirectionalLight',
]
