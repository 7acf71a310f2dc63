"""
Exceptions raised by the digit recognizer.

Each error also derives from the builtin the rest of the package raises for
the same situation, so callers catching ValueError or IndexError keep working.
"""


class RecognizerError(Exception):
    """Base class for all recognizer errors."""


class CapacityExceeded(RecognizerError, ValueError):
    """A point was appended to a stroke buffer that is already full."""


class IndexOutOfRange(RecognizerError, IndexError):
    """A point was requested outside the captured range of a stroke."""


class LengthMismatch(RecognizerError, ValueError):
    """Two strokes of different lengths were scored against each other."""


class InvalidPrototypeSet(RecognizerError, ValueError):
    """The prototype set is missing labels or holds short strokes."""


class EmptyStroke(RecognizerError, ValueError):
    """Classification was requested before any point was captured."""


class IngestionError(RecognizerError, ValueError):
    """Prototype data could not be read or has the wrong shape."""
