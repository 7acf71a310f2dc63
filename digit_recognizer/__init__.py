"""
Digit Recognizer Package
Unistroke handwritten digit recognition by elastic matching.
"""

from .core.recognizer import ElasticRecognizer
from .gestures.matcher import ClassificationResult, ElasticMatcher, score
from .gestures.normalizer import Normalizer
from .gestures.prototypes import PrototypeSet, load_json_prototypes, load_stroke_data
from .gestures.stroke_buffer import StrokeBuffer
from .utils.stroke_utils import Point

__version__ = "1.0.0"
__all__ = [
    "ElasticRecognizer",
    "ElasticMatcher",
    "ClassificationResult",
    "Normalizer",
    "PrototypeSet",
    "StrokeBuffer",
    "Point",
    "score",
    "load_stroke_data",
    "load_json_prototypes",
]
