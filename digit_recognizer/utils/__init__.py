"""
Utilities package for stroke recognition.

This package provides the point type, geometry helpers and logging shared by
the buffer, normalizer and matcher.
"""

from .stroke_utils import (
    Point,
    GeometryUtils,
    PathUtils,
    DataValidator,
    round_half_up
)
from .logger import RecognitionLogger

__all__ = [
    'Point',
    'GeometryUtils',
    'PathUtils',
    'DataValidator',
    'round_half_up',
    'RecognitionLogger'
]
