"""
Prototype strokes for the ten digits and the loaders that build them.

The prototype set maps each label 0..NUM_LABELS-1 to a stroke of exactly
STROKE_CAPACITY points. It is built once and never changes afterwards; the
backing numpy array is flagged read-only so every session can share it.

Two storage layouts are supported:

- the plain text layout of ``strokedata.txt``: one integer per line,
  x then y for every point, every point of digit 0 followed by digit 1 and
  so on up to digit 9
- a JSON document: ``{"prototypes": [{"label": 0, "points": [{"x": .., "y": ..}]}]}``
"""

import json
import logging
import os
from collections.abc import Mapping
from typing import Dict, Iterator, List, Optional, Sequence

import numpy as np

from ..config.settings import RecognizerConfig
from ..errors import IngestionError, InvalidPrototypeSet
from ..utils.stroke_utils import PathUtils, Point

logger = logging.getLogger(__name__)


class PrototypeSet(Mapping):
    """Immutable mapping from digit label to its normalized prototype stroke."""

    def __init__(self, strokes: Mapping[int, Sequence[Point]],
                 capacity: Optional[int] = None, num_labels: Optional[int] = None):
        """
        Build a prototype set from label -> stroke pairs.

        Raises:
            InvalidPrototypeSet: If labels are not exactly 0..num_labels-1 or
                a stroke does not hold exactly ``capacity`` points.
        """
        self.capacity = RecognizerConfig.STROKE_CAPACITY if capacity is None else capacity
        self.num_labels = RecognizerConfig.NUM_LABELS if num_labels is None else num_labels

        expected = set(range(self.num_labels))
        if set(strokes.keys()) != expected:
            missing = sorted(expected - set(strokes.keys()))
            extra = sorted(set(strokes.keys()) - expected, key=repr)
            raise InvalidPrototypeSet(
                f"Prototype labels must be 0..{self.num_labels - 1} "
                f"(missing {missing}, unexpected {extra})"
            )

        self._strokes: Dict[int, tuple] = {}
        for label in range(self.num_labels):
            stroke = tuple(strokes[label])
            if len(stroke) != self.capacity:
                raise InvalidPrototypeSet(
                    f"Prototype {label} has {len(stroke)} points, "
                    f"expected {self.capacity}"
                )
            self._strokes[label] = stroke

        self._array = np.array(
            [[(p.x, p.y) for p in self._strokes[label]] for label in range(self.num_labels)],
            dtype=np.int64,
        ).reshape(self.num_labels, self.capacity, 2)
        self._array.flags.writeable = False

    @classmethod
    def from_flat(cls, values: Sequence[int], capacity: Optional[int] = None,
                  num_labels: Optional[int] = None) -> 'PrototypeSet':
        """
        Build a prototype set from the flat x, y, x, y, ... integer sequence.

        Raises:
            IngestionError: If the sequence has the wrong length or holds
                non-integer values.
        """
        if capacity is None:
            capacity = RecognizerConfig.STROKE_CAPACITY
        if num_labels is None:
            num_labels = RecognizerConfig.NUM_LABELS
        expected = num_labels * capacity * 2

        try:
            data = np.asarray(values)
        except (TypeError, ValueError) as e:
            raise IngestionError(f"Prototype data is not numeric: {e}") from e

        if data.ndim != 1 or data.size != expected:
            raise IngestionError(
                f"Expected {expected} prototype coordinates, got {data.size}"
            )
        if not np.issubdtype(data.dtype, np.integer):
            raise IngestionError(
                f"Prototype coordinates must be integers, got {data.dtype}"
            )

        grouped = data.reshape(num_labels, capacity, 2)
        strokes = {
            label: PathUtils.convert_pairs_to_points(grouped[label].tolist())
            for label in range(num_labels)
        }
        return cls(strokes, capacity=capacity, num_labels=num_labels)

    def as_array(self) -> np.ndarray:
        """Read-only (num_labels, capacity, 2) array of all prototypes."""
        return self._array

    def __getitem__(self, label: int) -> tuple:
        return self._strokes[label]

    def __iter__(self) -> Iterator[int]:
        return iter(range(self.num_labels))

    def __len__(self):
        return self.num_labels

    def __repr__(self):
        return f"PrototypeSet({self.num_labels} labels x {self.capacity} points)"


def load_stroke_data(filename: Optional[str] = None, capacity: Optional[int] = None,
                     num_labels: Optional[int] = None) -> PrototypeSet:
    """
    Load prototypes from the one-integer-per-line text layout.

    Args:
        filename: Path to the data file. Defaults to
            RecognizerConfig.DEFAULT_STROKE_DATA.

    Raises:
        IngestionError: If the file is missing, unreadable, or holds the
            wrong number of integers.
    """
    filename = filename or RecognizerConfig.DEFAULT_STROKE_DATA
    if not os.path.exists(filename):
        logger.error(f"Stroke data file '{filename}' not found")
        raise IngestionError(f"Stroke data file '{filename}' not found")

    try:
        values = np.loadtxt(filename, dtype=np.int64, ndmin=1)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read stroke data from '{filename}': {e}")
        raise IngestionError(f"Could not parse '{filename}': {e}") from e

    prototypes = PrototypeSet.from_flat(values, capacity=capacity, num_labels=num_labels)
    logger.info(f"Loaded {len(prototypes)} prototype strokes from '{filename}'")
    return prototypes


def load_json_prototypes(filename: Optional[str] = None, capacity: Optional[int] = None,
                         num_labels: Optional[int] = None) -> PrototypeSet:
    """
    Load prototypes from a JSON file.

    Accepts either ``{"prototypes": [...]}`` or a bare list of
    ``{"label": int, "points": [{"x": int, "y": int}, ...]}`` entries.

    Raises:
        IngestionError: If the file is missing, is not valid JSON, or an
            entry is malformed.
        InvalidPrototypeSet: If the entries do not cover every label with
            full-length strokes.
    """
    filename = filename or RecognizerConfig.DEFAULT_JSON_PROTOTYPES
    if not os.path.exists(filename):
        logger.error(f"Prototype file '{filename}' not found")
        raise IngestionError(f"Prototype file '{filename}' not found")

    try:
        with open(filename, 'r', encoding='utf-8') as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as e:
        logger.error(f"Failed to load prototypes from '{filename}': {e}")
        raise IngestionError(f"Could not read '{filename}': {e}") from e

    entries = data.get('prototypes', data) if isinstance(data, dict) else data
    if not isinstance(entries, list):
        raise IngestionError(f"Invalid prototype format in '{filename}': expected a list")

    strokes: Dict[int, List[Point]] = {}
    for i, item in enumerate(entries):
        if not isinstance(item, dict) or 'label' not in item or 'points' not in item:
            raise IngestionError(f"Prototype entry {i} needs 'label' and 'points'")

        label = item['label']
        if not isinstance(label, int) or isinstance(label, bool):
            raise IngestionError(f"Prototype entry {i}: label must be an integer")
        if label in strokes:
            raise IngestionError(f"Prototype entry {i}: duplicate label {label}")

        points_data = item['points']
        if not isinstance(points_data, list):
            raise IngestionError(f"Prototype {label}: 'points' must be a list")

        points = []
        for j, point_data in enumerate(points_data):
            try:
                x, y = point_data['x'], point_data['y']
            except (KeyError, TypeError) as e:
                raise IngestionError(f"Prototype {label}: point {j} is malformed") from e
            if not isinstance(x, int) or not isinstance(y, int):
                raise IngestionError(f"Prototype {label}: point {j} must have integer coordinates")
            points.append(Point(x, y))
        strokes[label] = points

    prototypes = PrototypeSet(strokes, capacity=capacity, num_labels=num_labels)
    logger.info(f"Loaded {len(prototypes)} prototype strokes from '{filename}'")
    return prototypes


def save_json_prototypes(filename: str, prototypes: PrototypeSet):
    """Save a prototype set in the JSON layout read by load_json_prototypes."""
    data = {
        'prototypes': [
            {'label': label, 'points': PathUtils.convert_points_to_dict(prototypes[label])}
            for label in prototypes
        ]
    }

    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2)
