"""Snapshot models — caller-supplied data bundles for a single render call.

Every snapshot is frozen and ignores unknown keys, so JSON payloads from
the command line can carry extra fields without failing validation.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProgressStats(BaseModel):
    """Optional statistics appended to a progress bar."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    file_count: int | None = Field(default=None, alias="fileCount")
    speed: str | None = None
    eta: str | None = None

    @field_validator("speed", "eta", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        # ``{"eta": 30}`` is as common as ``{"eta": "30s"}``
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ProgressSnapshot(BaseModel):
    """A single progress update.

    ``total > 0`` is checked by the renderer, which reports it as an
    ``InvalidProgressError`` instead of a validation failure.
    """

    model_config = ConfigDict(frozen=True)

    step: int = 0
    total: int = 10
    message: str = "Processing..."
    stats: ProgressStats = ProgressStats()


class MonitoringSnapshot(BaseModel):
    """Point-in-time state of a monitoring session."""

    model_config = ConfigDict(frozen=True)

    session_active: bool = False
    platform: str = "unknown"
    mode: str = "unknown"
    errors_detected: int = Field(default=0, ge=0)
    warnings_detected: int = Field(default=0, ge=0)
    claude_analyzing: bool = False
    last_event_time: datetime | None = None
    # Raw lines, LogClassification records or their dicts.  Coerced per
    # entry when rendered; malformed records are skipped there.
    recent_logs: list[Any] = []

    @property
    def is_empty(self) -> bool:
        """True when the caller supplied no field at all."""
        return not self.model_fields_set


class BuildMetricsSnapshot(BaseModel):
    """Aggregate counters for a running build."""

    model_config = ConfigDict(frozen=True)

    platform: str = "unknown"
    mode: str = "unknown"
    start_time: datetime | None = None
    current_phase: str = "unknown"
    total_errors: int = Field(default=0, ge=0)
    total_warnings: int = Field(default=0, ge=0)
    files_processed: int = Field(default=0, ge=0)
    claude_analysis_count: int = Field(default=0, ge=0)


class AlertData(BaseModel):
    """Content of a critical alert banner.

    Only the first three suggested actions are rendered.
    """

    model_config = ConfigDict(frozen=True)

    title: str = "Critical Event"
    message: str = "Unknown critical event occurred"
    suggested_actions: list[str] = []
    timestamp: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc)
    )
