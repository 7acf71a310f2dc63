"""
Shared utilities for stroke capture and normalization.

This module provides the point type and the small geometric helpers used by
the stroke buffer, the normalizer and the matcher.
"""

import math
import numbers
from typing import Any, Dict, Iterable, List, Tuple


def round_half_up(value: float) -> int:
    """Round to the nearest integer; halves round up (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


class Point:
    """Represents an immutable 2D point with integer coordinates."""

    __slots__ = ('_x', '_y')

    def __init__(self, x: float, y: float):
        self._x = round_half_up(x)
        self._y = round_half_up(y)

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    def __repr__(self):
        return f"Point({self._x}, {self._y})"

    def __eq__(self, other):
        if not isinstance(other, Point):
            return NotImplemented
        return self._x == other._x and self._y == other._y

    def __hash__(self):
        return hash((self._x, self._y))

    def __iter__(self):
        yield self._x
        yield self._y

    def translated(self, dx: int, dy: int) -> 'Point':
        """Return this point shifted by (dx, dy)."""
        return Point(self._x + dx, self._y + dy)

    def scaled(self, factor: float) -> 'Point':
        """Return this point with both coordinates multiplied by factor."""
        return Point(self._x * factor, self._y * factor)


class GeometryUtils:
    """Utility class for geometric calculations."""

    @staticmethod
    def calculate_squared_distance(p1: Point, p2: Point) -> int:
        """Calculate squared Euclidean distance; exact for integer points."""
        dx = p1.x - p2.x
        dy = p1.y - p2.y
        return dx * dx + dy * dy

    @staticmethod
    def calculate_midpoint(p1: Point, p2: Point) -> Point:
        """Midpoint of two points, each coordinate rounded half up."""
        # (a + b + 1) // 2 is floor((a + b) / 2 + 0.5) in integer arithmetic
        return Point((p1.x + p2.x + 1) // 2, (p1.y + p2.y + 1) // 2)

    @staticmethod
    def get_bounds(points: List[Point]) -> Tuple[int, int, int, int]:
        """Get bounding box of a stroke as (min_x, max_x, min_y, max_y)."""
        if not points:
            return 0, 0, 0, 0

        min_x = min(p.x for p in points)
        max_x = max(p.x for p in points)
        min_y = min(p.y for p in points)
        max_y = max(p.y for p in points)

        return min_x, max_x, min_y, max_y


class PathUtils:
    """Utility class for converting between path formats."""

    @staticmethod
    def convert_dict_to_points(path: List[Dict[str, float]]) -> List[Point]:
        """Convert path from dict format to Point objects."""
        return [Point(p['x'], p['y']) for p in path]

    @staticmethod
    def convert_points_to_dict(points: Iterable[Point]) -> List[Dict[str, int]]:
        """Convert Point objects to dict format."""
        return [{'x': p.x, 'y': p.y} for p in points]

    @staticmethod
    def convert_pairs_to_points(pairs: Iterable[Tuple[float, float]]) -> List[Point]:
        """Convert (x, y) tuples to Point objects."""
        return [Point(x, y) for x, y in pairs]


class DataValidator:
    """Utility class for validating captured path data."""

    @staticmethod
    def is_coordinate(value: Any) -> bool:
        """True for finite real numbers; strings and bools are rejected."""
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return False
        return math.isfinite(value)

    @staticmethod
    def validate_path_data(path: Any) -> bool:
        """Validate that path data is a list of dicts with numeric 'x' and 'y'."""
        if not isinstance(path, list):
            return False

        for point in path:
            if not isinstance(point, dict):
                return False
            if 'x' not in point or 'y' not in point:
                return False
            if not DataValidator.is_coordinate(point['x']) or not DataValidator.is_coordinate(point['y']):
                return False

        return True
