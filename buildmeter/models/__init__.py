"""buildmeter data models — all Pydantic v2, all frozen (immutable)."""

from buildmeter.models.logs import UNCLASSIFIED, LogClassification, LogLevel
from buildmeter.models.snapshots import (
    AlertData,
    BuildMetricsSnapshot,
    MonitoringSnapshot,
    ProgressSnapshot,
    ProgressStats,
)

__all__ = [
    # logs
    "LogLevel",
    "LogClassification",
    "UNCLASSIFIED",
    # snapshots
    "ProgressStats",
    "ProgressSnapshot",
    "MonitoringSnapshot",
    "BuildMetricsSnapshot",
    "AlertData",
]
