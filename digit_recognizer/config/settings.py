"""
Configuration settings for the elastic-matching digit recognizer.
"""

class RecognizerConfig:
    """Configuration constants for stroke normalization and matching."""

    # Stroke sizing
    STROKE_CAPACITY = 150  # Max points per stroke, and exact size once normalized
    NUM_LABELS = 10        # Prototype strokes for digits 0 through 9

    # Canvas size (in pixels) the longer axis of a stroke is stretched to
    CANVAS_TARGET = 250.0

    # Prototype data files
    DEFAULT_STROKE_DATA = 'strokedata.txt'
    DEFAULT_JSON_PROTOTYPES = 'prototypes.json'

    # Classification debug log (None disables the file)
    DEFAULT_DEBUG_LOG = None
