"""
Utility functions and helpers.
"""

from .config_loader import load_config, get_config_value
from .geometry_utils import euler_to_direction, normalize_vector
from .log_handler import setup_logging

__all__ = [
    'load_config',
    'get_config_value',
    'euler_to_direction',
    'normalize_vector',
    'setup_logging',
]
