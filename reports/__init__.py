"""
Report generation module for sun profiles.
"""

from .diagram_generator import DiagramGenerator

__all__ = [
    'DiagramGenerator',
]
