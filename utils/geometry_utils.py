"""
Geometry utility functions for light orientation.
"""

import math
from typing import Tuple

import numpy as np


def euler_to_direction(pitch: float, yaw: float) -> Tuple[float, float, float]:
    """
    Calculate the forward vector of an object rotated by pitch and yaw.

    Scene axes: +Y is up, +Z is north, +X is east, so a yaw equal to a
    compass azimuth (0 = north, 90 = east) faces that direction. Yaw turns
    about Y, then pitch tilts about the local X axis (positive looks down).

    Args:
        pitch: Rotation about X in degrees
        yaw: Rotation about Y in degrees

    Returns:
        Unit direction vector (x, y, z)
    """
    pitch_rad = math.radians(pitch)
    yaw_rad = math.radians(yaw)
    direction = np.array([
        math.sin(yaw_rad) * math.cos(pitch_rad),
        -math.sin(pitch_rad),
        math.cos(yaw_rad) * math.cos(pitch_rad),
    ])
    return normalize_vector(direction)


def normalize_vector(vector) -> Tuple[float, float, float]:
    """
    Normalize a 3D vector to unit length.

    Args:
        vector: Input vector

    Returns:
        Normalized vector
    """
    v = np.asarray(vector, dtype=float)
    magnitude = np.linalg.norm(v)
    if magnitude == 0:
        return (0.0, 0.0, 0.0)
    return tuple(float(c) for c in v / magnitude)
