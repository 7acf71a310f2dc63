"""
Main recognizer class that coordinates stroke capture, normalization and matching.
"""

from typing import Dict, List, Optional

from ..config.settings import RecognizerConfig
from ..errors import EmptyStroke
from ..gestures.matcher import ClassificationResult, ElasticMatcher
from ..gestures.normalizer import Normalizer
from ..gestures.prototypes import PrototypeSet, load_stroke_data
from ..gestures.stroke_buffer import StrokeBuffer
from ..utils.logger import RecognitionLogger
from ..utils.stroke_utils import DataValidator, PathUtils, Point


class ElasticRecognizer:
    """
    Unistroke digit recognizer using elastic matching.

    The recognizer owns one stroke buffer for the capture collaborator to
    feed. The prototype set is shared read-only, so extra sessions for
    concurrent capture can be created with ``new_session()`` and classified
    with ``recognize(session)``.
    """

    def __init__(self, prototypes: Optional[PrototypeSet] = None,
                 stroke_data: Optional[str] = None,
                 debug_file: Optional[str] = RecognizerConfig.DEFAULT_DEBUG_LOG):
        """
        Initialize the recognizer.

        Args:
            prototypes: Prototype set to match against. If None, it is loaded
                from ``stroke_data``.
            stroke_data: Path of a text stroke data file. Defaults to
                RecognizerConfig.DEFAULT_STROKE_DATA.
            debug_file: Optional file that receives one line per classification.

        Raises:
            IngestionError: If the prototypes have to be loaded and cannot be.
        """
        if prototypes is None:
            prototypes = load_stroke_data(stroke_data)

        self.prototypes = prototypes
        self.normalizer = Normalizer(capacity=prototypes.capacity)
        self.matcher = ElasticMatcher(self.normalizer)
        self.user_stroke = self.new_session()
        self.logger = RecognitionLogger(debug_file)
        self.logger.log_prototypes(prototypes)

    def new_session(self, strict: bool = False) -> StrokeBuffer:
        """Create an independent stroke buffer sized for the prototypes."""
        return StrokeBuffer(capacity=self.prototypes.capacity, strict=strict)

    def reset_user_stroke(self):
        """Discard the current stroke so the next point starts a new one."""
        self.user_stroke.reset()

    def add_user_point(self, x: float, y: float) -> bool:
        """Append a captured point; returns False once the stroke is full."""
        if not DataValidator.is_coordinate(x) or not DataValidator.is_coordinate(y):
            raise ValueError(f"Point coordinates must be finite numbers, got ({x!r}, {y!r})")
        return self.user_stroke.append(Point(x, y))

    def num_user_points(self) -> int:
        """Number of points in the current stroke."""
        return self.user_stroke.length()

    def get_user_point(self, i: int) -> Point:
        """Return the i-th point of the current stroke."""
        return self.user_stroke.point_at(i)

    def find_match(self) -> int:
        """Classify the current stroke and return the best digit."""
        return self.recognize().label

    def recognize(self, session: Optional[StrokeBuffer] = None) -> ClassificationResult:
        """
        Classify a stroke buffer.

        Args:
            session: Buffer to classify. Defaults to the recognizer's own stroke.

        Returns:
            ClassificationResult for the stroke

        Raises:
            EmptyStroke: If the stroke has no points
        """
        stroke = self.user_stroke if session is None else session
        num_raw_points = stroke.length()

        try:
            result = self.matcher.recognize(stroke, self.prototypes)
        except EmptyStroke as e:
            self.logger.log_rejected(str(e))
            raise

        self.logger.log_classification(result, num_raw_points)
        return result

    def classify_path(self, path: List[Dict[str, float]]) -> int:
        """
        Classify a path given as a list of dicts with 'x' and 'y' keys.

        The path is captured into a fresh buffer; points beyond the stroke
        capacity are ignored, as they are during live capture.

        Raises:
            ValueError: If the path is malformed
            EmptyStroke: If the path is empty
        """
        if not DataValidator.validate_path_data(path):
            raise ValueError("Path must be a list of dicts with numeric 'x' and 'y'")

        session = self.new_session()
        for point in PathUtils.convert_dict_to_points(path):
            if not session.append(point):
                break

        return self.recognize(session).label

    def close(self):
        """Release the debug log."""
        self.logger.close()
