"""Log classification models — severity tiers and the classification record."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LogLevel(str, Enum):
    """Severity buckets, highest priority first."""

    CRITICAL = "critical"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    DEBUG = "debug"


# Pattern sentinel recorded when no rule matched.
UNCLASSIFIED = "unclassified"


class LogClassification(BaseModel):
    """The result of classifying a single log line.

    ``timestamp`` is the moment of classification, not of the original
    event.  ``pattern`` is the source of the matching rule, or
    ``"unclassified"`` when nothing matched.
    """

    model_config = ConfigDict(frozen=True)

    level: LogLevel
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
    original: str
    pattern: str = UNCLASSIFIED
