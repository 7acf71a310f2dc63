"""
Logging utilities for stroke classification.
"""

import datetime
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class RecognitionLogger:
    """Handles logging of classification sessions and results."""

    def __init__(self, debug_file: Optional[str] = None):
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'a', encoding='utf-8')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file: {e}")

    def log_prototypes(self, prototypes):
        """Log the prototype set a recognizer was built with."""
        logger.info(f"Using {prototypes!r}")

    def log_classification(self, result, num_raw_points: int):
        """Log a classification result."""
        timestamp = datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

        logger.info(
            f"Recognized digit {result.label} (score {result.score:.1f}) "
            f"from {num_raw_points} point(s) in {result.time_ms:.2f}ms"
        )
        ranked = sorted(range(len(result.scores)), key=lambda label: result.scores[label])
        logger.debug("Scores: " + ", ".join(
            f"{label}={result.scores[label]:.1f}" for label in ranked
        ))

        if self.debug_file:
            scores = " ".join(f"{s:.1f}" for s in result.scores)
            self.debug_file.write(
                f"[{timestamp}] points={num_raw_points} label={result.label} "
                f"score={result.score:.1f} scores=[{scores}]\n"
            )
            self.debug_file.flush()

    def log_rejected(self, reason: str):
        """Log a classification request that could not be served."""
        logger.warning(f"Classification skipped: {reason}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
