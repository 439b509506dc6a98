"""``buildmeter show`` / ``files`` / ``progress-monitor`` — progress bars.

Each call redraws the current terminal line; a newline is written once
the step reaches the total.  Malformed stats or monitoring JSON is
ignored silently.
"""

from __future__ import annotations

import typer

from buildmeter.cli._payload import err_console, int_arg, load_model
from buildmeter.models.snapshots import MonitoringSnapshot, ProgressSnapshot, ProgressStats
from buildmeter.monitor._formatting import InvalidProgressError
from buildmeter.monitor.renderer import TerminalRenderer, make_console

console = make_console()


def _progress_args(
    step: str | None,
    total: str | None,
    message: str | None,
    stats_json: str | None,
) -> ProgressSnapshot:
    return ProgressSnapshot(
        step=int_arg(step, 0),
        total=int_arg(total, 10),
        message=message or "Processing...",
        stats=load_model(stats_json, ProgressStats),
    )


def show_cmd(
    step: str | None = typer.Argument(None, help="Current step (default 0)."),
    total: str | None = typer.Argument(None, help="Total steps (default 10)."),
    message: str | None = typer.Argument(None, help="Text shown after the bar."),
    stats_json: str | None = typer.Argument(
        None, help='Optional stats, e.g. \'{"fileCount": 12, "eta": "30s"}\'.'
    ),
) -> None:
    """Show a progress bar with optional stats."""
    progress = _progress_args(step, total, message, stats_json)
    try:
        TerminalRenderer(console).show_progress(
            progress.step, progress.total, progress.message, progress.stats
        )
    except InvalidProgressError as exc:
        TerminalRenderer(err_console).show_error(str(exc))


def files_cmd(
    current: str | None = typer.Argument(None, help="Files processed (default 0)."),
    total: str | None = typer.Argument(None, help="Total files (default 1)."),
    filename: str | None = typer.Argument(None, help="File being processed."),
    bytes_per_second: str | None = typer.Argument(None, help="Transfer speed in bytes/s."),
) -> None:
    """Show file processing progress."""
    try:
        TerminalRenderer(console).show_file_progress(
            int_arg(current, 0),
            int_arg(total, 1),
            filename or "unknown",
            int_arg(bytes_per_second, 0),
        )
    except InvalidProgressError as exc:
        TerminalRenderer(err_console).show_error(str(exc))


def progress_monitor_cmd(
    step: str | None = typer.Argument(None, help="Current step (default 0)."),
    total: str | None = typer.Argument(None, help="Total steps (default 10)."),
    message: str | None = typer.Argument(None, help="Text shown after the bar."),
    stats_json: str | None = typer.Argument(None, help="Optional stats JSON."),
    monitoring_json: str | None = typer.Argument(None, help="Optional monitoring JSON."),
) -> None:
    """Show a progress bar followed by monitoring status and recent logs."""
    progress = _progress_args(step, total, message, stats_json)
    monitoring = load_model(monitoring_json, MonitoringSnapshot)
    try:
        TerminalRenderer(console).show_progress_with_monitoring(
            progress.step,
            progress.total,
            progress.message,
            progress.stats,
            monitoring,
        )
    except InvalidProgressError as exc:
        TerminalRenderer(err_console).show_error(str(exc))
