"""Runtime configuration — env-driven display settings.

Centralized config using pydantic-settings.  Every setting can be
overridden with a ``BUILDMETER_*`` environment variable; there is no
configuration file.
"""

from __future__ import annotations

from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class DisplayConfig(BaseSettings):
    """Display configuration with environment variable overrides.

    Examples
    --------
    Override via environment::

        export BUILDMETER_LOG_LEVEL=DEBUG
        export BUILDMETER_COLOR_SYSTEM=truecolor
        export BUILDMETER_LOG_STREAM_LINES=10
    """

    model_config = SettingsConfigDict(env_prefix="BUILDMETER_")

    # Diagnostics (stderr); rendered output is unaffected
    log_level: str = "WARNING"

    # ANSI codes are always emitted; this only picks the palette encoding
    color_system: Literal["standard", "256", "truecolor"] = "standard"

    # Log stream sizes
    log_stream_lines: int = 5
    monitor_log_lines: int = 3


# Module-level singleton — import as `from buildmeter.config import config`
config = DisplayConfig()
