"""
Stroke buffer holding the points of the gesture currently being captured.
"""

import logging
from typing import Iterator, List, Optional

from ..config.settings import RecognizerConfig
from ..errors import CapacityExceeded, IndexOutOfRange
from ..utils.stroke_utils import Point

logger = logging.getLogger(__name__)


class StrokeBuffer:
    """
    Growable sequence of captured points with a fixed capacity.

    Points are append-only until reset. Once the normalizer has run, the
    buffer holds exactly ``capacity`` points and is flagged as normalized.
    """

    def __init__(self, capacity: Optional[int] = None, strict: bool = False):
        """
        Initialize an empty stroke buffer.

        Args:
            capacity: Maximum number of points. Defaults to
                RecognizerConfig.STROKE_CAPACITY.
            strict: If True, appending to a full buffer raises
                CapacityExceeded instead of being ignored.
        """
        self.capacity = RecognizerConfig.STROKE_CAPACITY if capacity is None else capacity
        self.strict = strict
        self._points: List[Point] = []
        self.normalized = False

    def reset(self):
        """Clear all captured points and the normalized flag."""
        self._points = []
        self.normalized = False

    def append(self, point: Point) -> bool:
        """
        Add a point at the end of the stroke.

        Returns:
            True if the point was stored, False if the buffer was full.

        Raises:
            CapacityExceeded: If the buffer is full and strict mode is on.
        """
        if len(self._points) >= self.capacity:
            if self.strict:
                raise CapacityExceeded(
                    f"Stroke buffer is full ({self.capacity} points)"
                )
            logger.debug(f"Ignoring point {point}: buffer full")
            return False

        self._points.append(point)
        self.normalized = False
        return True

    def length(self) -> int:
        """Number of points currently held."""
        return len(self._points)

    def point_at(self, i: int) -> Point:
        """Return the i-th point, 0 <= i < length()."""
        if not 0 <= i < len(self._points):
            raise IndexOutOfRange(
                f"Point index {i} outside [0, {len(self._points)})"
            )
        return self._points[i]

    def points(self) -> List[Point]:
        """Return a copy of the captured points."""
        return list(self._points)

    def load_normalized(self, points: List[Point]):
        """Replace the contents with the normalizer's output."""
        if len(points) > self.capacity:
            raise CapacityExceeded(
                f"Normalized stroke has {len(points)} points, "
                f"capacity is {self.capacity}"
            )
        self._points = list(points)
        self.normalized = True

    def is_empty(self) -> bool:
        return not self._points

    def is_full(self) -> bool:
        return len(self._points) >= self.capacity

    def __len__(self):
        return len(self._points)

    def __getitem__(self, i: int) -> Point:
        return self.point_at(i)

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points)

    def __repr__(self):
        state = 'normalized' if self.normalized else 'raw'
        return f"StrokeBuffer({len(self._points)}/{self.capacity}, {state})"
