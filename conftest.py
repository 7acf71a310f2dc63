"""Shared pytest fixtures for the digit recognizer tests.

Fixtures:
    horizontal_line: 150-point line from (0, 0) to (249, 0)
    prototype_set: ten distinct synthetic prototype strokes, digit 0 horizontal
    make_buffer: factory filling a StrokeBuffer from (x, y) pairs
    stroke_data_file: prototype_set written in the one-integer-per-line layout
"""

import math

import pytest

from digit_recognizer.config.settings import RecognizerConfig
from digit_recognizer.gestures.prototypes import PrototypeSet
from digit_recognizer.gestures.stroke_buffer import StrokeBuffer
from digit_recognizer.utils.stroke_utils import Point

N = RecognizerConfig.STROKE_CAPACITY
SPAN = 249


def _ramp(i):
    return i * SPAN / (N - 1)


def _shape(fn):
    return [Point(*fn(i)) for i in range(N)]


def build_prototype_strokes():
    """Ten synthetic 150-point strokes inside a 250x250 canvas."""
    half = N // 2
    return {
        0: _shape(lambda i: (_ramp(i), 0)),
        1: _shape(lambda i: (0, _ramp(i))),
        2: _shape(lambda i: (_ramp(i), _ramp(i))),
        3: _shape(lambda i: (_ramp(i), SPAN - _ramp(i))),
        4: _shape(lambda i: (125 + 124 * math.cos(2 * math.pi * i / (N - 1)),
                             125 + 124 * math.sin(2 * math.pi * i / (N - 1)))),
        5: _shape(lambda i: (SPAN - _ramp(i), SPAN)),
        6: _shape(lambda i: (SPAN, SPAN - _ramp(i))),
        7: _shape(lambda i: (0, SPAN * i / (half - 1)) if i < half
                  else (SPAN * (i - half) / (N - half - 1), SPAN)),
        8: _shape(lambda i: (_ramp(i), SPAN - abs(SPAN - 2 * _ramp(i)))),
        9: _shape(lambda i: (_ramp(i), 125 + 120 * math.sin(4 * math.pi * i / (N - 1)))),
    }


@pytest.fixture
def horizontal_line():
    return build_prototype_strokes()[0]


@pytest.fixture
def prototype_set():
    return PrototypeSet(build_prototype_strokes())


@pytest.fixture
def make_buffer():
    def _make(pairs, capacity=None, strict=False):
        buffer = StrokeBuffer(capacity=capacity, strict=strict)
        for x, y in pairs:
            buffer.append(Point(x, y))
        return buffer
    return _make


@pytest.fixture
def stroke_data_file(tmp_path, prototype_set):
    path = tmp_path / 'strokedata.txt'
    lines = []
    for label in prototype_set:
        for p in prototype_set[label]:
            lines.append(str(p.x))
            lines.append(str(p.y))
    path.write_text("\n".join(lines) + "\n")
    return path
