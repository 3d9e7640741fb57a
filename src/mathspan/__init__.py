"""mathspan - split mixed text/LaTeX into text and math segments.

Text segments are unescaped and passed through; math segments are handed to
a typesetting engine and its markup is spliced back in place.
"""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING

from mathspan.exceptions import EscapeSequenceError, MathspanError, SentinelLeakError
from mathspan.parsing import Segment, SegmentKind, parse_delimiters
from mathspan.render import MathRenderer, render_math

if TYPE_CHECKING:
    from mathspan.config import Settings

__version__ = "0.1.0"

__all__ = [
    "EscapeSequenceError",
    "MathRenderer",
    "MathspanError",
    "Segment",
    "SegmentKind",
    "SentinelLeakError",
    "parse_delimiters",
    "render_math",
    "setup_logging",
]


def setup_logging(settings: Settings) -> None:
    """Configure logging to the console and, optionally, a rotating file."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    # Console handler - less verbose
    console_handler = logging.StreamHandler()
    console_handler.setLevel(settings.log.level.upper())
    console_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
    root_logger.addHandler(console_handler)

    if not settings.log.to_file:
        return

    log_dir = settings.log.log_dir
    log_dir.mkdir(parents=True, exist_ok=True)
    log_file = log_dir / "mathspan.log"

    # File handler - detailed logging with rotation (10MB, keep 5 backups)
    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=10 * 1024 * 1024,
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(
        logging.Formatter(
            "%(asctime)s | %(levelname)-8s | %(name)s:%(lineno)d | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(file_handler)

    logging.info("Logging configured. Log file: %s", log_file.absolute())
