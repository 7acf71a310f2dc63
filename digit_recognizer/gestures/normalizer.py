"""
Stroke normalization for elastic matching.

A captured stroke is made position, size and density independent by three
passes applied in a fixed order:

1. translate: slide the stroke so its bounding box starts at (0, 0)
2. scale: stretch it uniformly until the longer axis spans the canvas
3. densify: insert midpoints between the farthest consecutive points until
   the stroke holds exactly the stroke capacity

All coordinates stay integral; every rounding uses round-half-up.
"""

import logging
from typing import List, Optional

from ..config.settings import RecognizerConfig
from ..utils.stroke_utils import GeometryUtils, Point
from .stroke_buffer import StrokeBuffer

logger = logging.getLogger(__name__)


class Normalizer:
    """Translates, scales and densifies strokes."""

    def __init__(self, capacity: Optional[int] = None, canvas_target: Optional[float] = None):
        self.capacity = RecognizerConfig.STROKE_CAPACITY if capacity is None else capacity
        self.canvas_target = RecognizerConfig.CANVAS_TARGET if canvas_target is None else canvas_target

    def prepare(self, buffer: StrokeBuffer) -> StrokeBuffer:
        """
        Normalize a stroke buffer in place.

        A buffer that is already normalized is left untouched. An empty
        buffer is left empty; callers that need points should check first.

        Args:
            buffer: Captured stroke to normalize

        Returns:
            The same buffer, now holding exactly ``capacity`` points
        """
        if buffer.normalized or buffer.is_empty():
            return buffer

        points = self.normalize(buffer.points())
        buffer.load_normalized(points)
        return buffer

    def normalize(self, points: List[Point]) -> List[Point]:
        """Run translate, scale and densify on a point list."""
        if not points:
            return []

        points = self.translate(points)
        if len(points) >= 2:
            points = self.scale(points)
        else:
            # Nothing to interpolate from a single point; repeat it instead
            points = points * 2
        return self.densify(points)

    def translate(self, points: List[Point]) -> List[Point]:
        """Translate points so the minimum x and y are both zero."""
        if not points:
            return []

        min_x, _, min_y, _ = GeometryUtils.get_bounds(points)
        return [p.translated(-min_x, -min_y) for p in points]

    def scale(self, points: List[Point]) -> List[Point]:
        """
        Scale translated points so the longer axis spans the canvas.

        One factor is used for both axes so the aspect ratio is preserved.
        Strokes with fewer than 2 points, or whose points all coincide, are
        returned unchanged.
        """
        if len(points) < 2:
            return list(points)

        _, max_x, _, max_y = GeometryUtils.get_bounds(points)
        extent = max(max_x, max_y)
        if extent == 0:
            logger.debug("All points coincide; skipping scale")
            return list(points)

        factor = self.canvas_target / extent
        return [p.scaled(factor) for p in points]

    def densify(self, points: List[Point]) -> List[Point]:
        """
        Insert midpoints until the stroke holds exactly ``capacity`` points.

        Each round scans left to right for the consecutive pair with the
        largest distance; the first such pair wins ties. Strokes already at
        or above capacity are returned unchanged.

        Raises:
            ValueError: If fewer than 2 points are given
        """
        points = list(points)
        if len(points) >= self.capacity:
            return points
        if len(points) < 2:
            raise ValueError("Densification needs at least 2 points")

        while len(points) < self.capacity:
            index = self._farthest_pair_index(points)
            midpoint = GeometryUtils.calculate_midpoint(points[index], points[index + 1])
            points.insert(index + 1, midpoint)

        return points

    def _farthest_pair_index(self, points: List[Point]) -> int:
        """Index i of the first pair (i, i+1) with maximal distance."""
        max_index = 0
        max_distance = GeometryUtils.calculate_squared_distance(points[0], points[1])

        for i in range(1, len(points) - 1):
            # Squared integer distances compare exactly
            distance = GeometryUtils.calculate_squared_distance(points[i], points[i + 1])
            if distance > max_distance:
                max_distance = distance
                max_index = i

        return max_index
