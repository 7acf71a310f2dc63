"""
Elastic matcher for normalized strokes.

A normalized user stroke is compared index by index against every prototype
stroke. The score is the sum of the Euclidean distances between
corresponding points; the prototype with the lowest score wins, and ties go
to the lowest label.
"""

import logging
import time
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

import numpy as np

from ..errors import CapacityExceeded, EmptyStroke, InvalidPrototypeSet, LengthMismatch
from ..utils.stroke_utils import Point
from .normalizer import Normalizer
from .prototypes import PrototypeSet
from .stroke_buffer import StrokeBuffer

logger = logging.getLogger(__name__)


@dataclass
class ClassificationResult:
    """Result of elastic matching with label, score, all scores and timing."""
    label: int
    score: float
    scores: Tuple[float, ...]
    time_ms: float


def _as_array(stroke: Sequence[Point]) -> np.ndarray:
    return np.array([(p.x, p.y) for p in stroke], dtype=np.float64).reshape(-1, 2)


def score(stroke_a: Sequence[Point], stroke_b: Sequence[Point]) -> float:
    """
    Sum of distances between corresponding points of two strokes.

    Lower is more similar; the score is symmetric in its arguments.

    Raises:
        LengthMismatch: If the strokes have different lengths
    """
    if len(stroke_a) != len(stroke_b):
        raise LengthMismatch(
            f"Cannot score strokes of {len(stroke_a)} and {len(stroke_b)} points"
        )

    diff = _as_array(stroke_a) - _as_array(stroke_b)
    return float(np.hypot(diff[:, 0], diff[:, 1]).sum())


class ElasticMatcher:
    """Scores a user stroke against a prototype set and picks the best label."""

    def __init__(self, normalizer: Optional[Normalizer] = None):
        self.normalizer = normalizer or Normalizer()

    def classify(self, user_stroke: StrokeBuffer, prototypes: PrototypeSet) -> int:
        """
        Normalize the user stroke if needed and return the best label.

        Raises:
            EmptyStroke: If no point has been captured
            CapacityExceeded: If the stroke holds more points than the
                normalizer produces
            InvalidPrototypeSet: If the prototype set does not fit the stroke
        """
        return self.recognize(user_stroke, prototypes).label

    def recognize(self, user_stroke: StrokeBuffer, prototypes: PrototypeSet) -> ClassificationResult:
        """
        Normalize the user stroke if needed and score it against every label.

        Returns:
            ClassificationResult with the winning label, its score, the
            scores of all labels in label order, and timing
        """
        t0 = time.time() * 1000

        if user_stroke.is_empty():
            raise EmptyStroke("Cannot classify an empty stroke")
        self._validate_prototypes(prototypes)
        if len(user_stroke) > self.normalizer.capacity:
            raise CapacityExceeded(
                f"Stroke has {len(user_stroke)} points, "
                f"normalizer capacity is {self.normalizer.capacity}"
            )

        self.normalizer.prepare(user_stroke)
        if len(user_stroke) != prototypes.capacity:
            raise LengthMismatch(
                f"Normalized stroke has {len(user_stroke)} points, "
                f"prototypes have {prototypes.capacity}"
            )

        scores = self.score_all(user_stroke, prototypes)

        best_label = 0
        best_score = scores[0]
        for label in range(1, len(scores)):
            if scores[label] < best_score:
                best_score = scores[label]
                best_label = label

        t1 = time.time() * 1000
        logger.debug(f"Best label {best_label} with score {best_score:.2f}")
        return ClassificationResult(best_label, best_score, scores, t1 - t0)

    def score_all(self, stroke: Sequence[Point], prototypes: PrototypeSet) -> Tuple[float, ...]:
        """Score a normalized stroke against every prototype, in label order."""
        if len(stroke) != prototypes.capacity:
            raise LengthMismatch(
                f"Stroke has {len(stroke)} points, prototypes have {prototypes.capacity}"
            )

        diff = prototypes.as_array() - _as_array(stroke)[np.newaxis, :, :]
        totals = np.hypot(diff[:, :, 0], diff[:, :, 1]).sum(axis=1)
        return tuple(float(total) for total in totals)

    def _validate_prototypes(self, prototypes: PrototypeSet):
        if not isinstance(prototypes, PrototypeSet):
            raise InvalidPrototypeSet(
                f"Expected a PrototypeSet, got {type(prototypes).__name__}"
            )
        if prototypes.capacity != self.normalizer.capacity:
            raise InvalidPrototypeSet(
                f"Prototype strokes have {prototypes.capacity} points, "
                f"normalizer produces {self.normalizer.capacity}"
            )
