"""Diagnostic logging for buildmeter.

Rendered output owns stdout, so diagnostics go to stderr only and stay
quiet (WARNING) unless ``BUILDMETER_LOG_LEVEL`` asks for more.
"""

from __future__ import annotations

import logging
import sys

_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Attach a single stderr handler to the ``buildmeter`` logger.

    Safe to call more than once; existing handlers are replaced.  Unknown
    level names fall back to WARNING.
    """
    root_logger = logging.getLogger("buildmeter")
    resolved = logging.getLevelName(level.upper())
    root_logger.setLevel(resolved if isinstance(resolved, int) else logging.WARNING)

    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_FORMAT))
    root_logger.addHandler(handler)

    return root_logger
