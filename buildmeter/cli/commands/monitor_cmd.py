"""Monitoring commands — status line, log stream, build metrics, alerts.

These commands validate their JSON payload: a malformed payload is
reported on stderr and rendering continues with the defaults.
"""

from __future__ import annotations

import typer

from buildmeter.cli._payload import int_arg, load_json, load_model
from buildmeter.config import config
from buildmeter.models.snapshots import AlertData, BuildMetricsSnapshot, MonitoringSnapshot
from buildmeter.monitor.renderer import TerminalRenderer, make_console

console = make_console()


def monitor_status_cmd(
    monitoring_json: str | None = typer.Argument(
        None,
        help='Monitoring data, e.g. \'{"session_active": true, "errors_detected": 2}\'.',
    ),
) -> None:
    """Show the real-time monitoring status line."""
    snapshot = load_model(monitoring_json, MonitoringSnapshot, label="monitoring data")
    TerminalRenderer(console).show_monitoring_status(snapshot)


def log_stream_cmd(
    log_entries_json: str | None = typer.Argument(
        None, help='JSON list of log lines, e.g. \'["ERROR: Build failed"]\'.'
    ),
    max_lines: str | None = typer.Argument(None, help="Entries to show (default 5)."),
) -> None:
    """Display the log stream with severity highlighting."""
    entries = load_json(log_entries_json, label="log entries")
    TerminalRenderer(console).show_log_stream(
        entries if entries is not None else [],
        int_arg(max_lines, config.log_stream_lines),
    )


def build_metrics_cmd(
    build_data_json: str | None = typer.Argument(
        None, help='Build data, e.g. \'{"platform": "android", "total_errors": 1}\'.'
    ),
) -> None:
    """Show build performance metrics."""
    snapshot = load_model(build_data_json, BuildMetricsSnapshot, label="build data")
    TerminalRenderer(console).show_build_metrics(snapshot)


def critical_alert_cmd(
    alert_json: str | None = typer.Argument(
        None, help='Alert data, e.g. \'{"title": "Build Failed", "message": "..."}\'.'
    ),
) -> None:
    """Display a critical event alert box."""
    alert = load_model(alert_json, AlertData, label="alert data")
    TerminalRenderer(console).show_critical_alert(alert)
