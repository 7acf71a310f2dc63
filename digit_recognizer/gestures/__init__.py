"""
Stroke capture, normalization and matching.

This module provides the stroke buffer, the three-pass normalizer, the
elastic matcher and the prototype set it matches against.
"""

from .stroke_buffer import StrokeBuffer
from .normalizer import Normalizer
from .matcher import ClassificationResult, ElasticMatcher, score
from .prototypes import (
    PrototypeSet,
    load_json_prototypes,
    load_stroke_data,
    save_json_prototypes
)

__all__ = [
    'StrokeBuffer',
    'Normalizer',
    'ClassificationResult',
    'ElasticMatcher',
    'score',
    'PrototypeSet',
    'load_json_prototypes',
    'load_stroke_data',
    'save_json_prototypes'
]
