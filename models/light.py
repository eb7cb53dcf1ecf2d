"""
Light sink interfaces and an in-memory directional light.
"""

from abc import ABC, abstractmethod
from typing import Tuple

from utils.geometry_utils import euler_to_direction


class OrientationSink(ABC):
    """Receives the orientation computed from the sun position."""

    @abstractmethod
    def set_rotation(self, pitch: float, yaw: float):
        """
        Apply a rotation.

        Args:
            pitch: Rotation about X in degrees (sun altitude)
            yaw: Rotation about Y in degrees (sun azimuth)
        """
        pass


class IntensitySink(ABC):
    """Receives the light intensity computed from the sun altitude."""

    @abstractmethod
    def set_intensity(self, intensity: float):
        """
        Apply an intensity.

        Args:
            intensity: Light intensity in [0, 1]
        """
        pass


class DirectionalLight(OrientationSink, IntensitySink):
    """Directional light state: rotation and intensity."""

    def __init__(self, name: str = "Sun", intensity: float = 1.0):
        self.name = name
        self.pitch = 0.0
        self.yaw = 0.0
        self.intensity = intensity

    def set_rotation(self, pitch: float, yaw: float):
        self.pitch = pitch
        self.yaw = yaw

    def set_intensity(self, intensity: float):
        self.intensity = intensity

    @property
    def direction(self) -> Tuple[float, float, float]:
        """Unit vector the light shines along."""
        return euler_to_direction(self.pitch, self.yaw)

    def __repr__(self) -> str:
        return (
            f"DirectionalLight(name={self.name!r}, pitch={self.pitch:.2f}, "
            f"yaw={self.yaw:.2f}, intensity={self.intensity:.3f})"
        )
