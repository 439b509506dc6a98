"""Main Typer application — imports and registers all CLI commands.

Entry point: ``buildmeter`` (configured via pyproject.toml scripts).

Running without a subcommand, or with an unknown one, prints the usage
text and exits successfully so calling build scripts never fail on it.
"""

from __future__ import annotations

import click
import typer
from rich.text import Text
from typer.core import TyperGroup

from buildmeter.cli.commands.classify import classify_log_cmd
from buildmeter.cli.commands.messages import error_cmd, message_cmd, success_cmd, warning_cmd
from buildmeter.cli.commands.monitor_cmd import (
    build_metrics_cmd,
    critical_alert_cmd,
    log_stream_cmd,
    monitor_status_cmd,
)
from buildmeter.cli.commands.progress_cmd import files_cmd, progress_monitor_cmd, show_cmd
from buildmeter.config import config
from buildmeter.logging_config import configure_logging
from buildmeter.monitor.renderer import make_console

console = make_console()

USAGE = """\
Usage: buildmeter [command] [args...]

Standard Commands:
  show <step> <total> <message> [stats_json] - Show progress bar with optional stats
  files <current> <total> <filename> [bytes_per_sec] - Show file processing progress
  message <text> - Show timestamped message
  success <text> - Show success message
  error <text> - Show error message
  warning <text> - Show warning message

Monitoring Commands:
  monitor-status [monitoring_data_json] - Show real-time monitoring status
  log-stream <log_entries_json> [max_lines] - Display log stream with error highlighting
  progress-monitor <step> <total> <message> [stats_json] [monitoring_data_json] - Combined progress and monitoring
  build-metrics [build_data_json] - Show build performance metrics
  critical-alert [alert_data_json] - Display critical event alert
  classify-log <log_line> - Classify log entry by error pattern

Standard Examples:
  buildmeter show 5 10 "Compiling files"
  buildmeter files 123 500 "main.cpp" 2048000
  buildmeter message "Starting build process"

Monitoring Examples:
  buildmeter monitor-status '{"session_active":true,"platform":"android","errors_detected":2}'
  buildmeter log-stream '["ERROR: Build failed","WARNING: Deprecated API"]'
  buildmeter progress-monitor 3 10 "Building" '{}' '{"session_active":true}'
  buildmeter build-metrics '{"platform":"android","total_errors":1}'
  buildmeter critical-alert '{"title":"Build Failed","message":"Compilation error in main.lua"}'
  buildmeter classify-log "ERROR: Failed to compile main.lua"\
"""


def print_usage() -> None:
    """Print the usage text to stdout."""
    console.print(Text(USAGE))


class UsageFallbackGroup(TyperGroup):
    """Command group that answers unknown subcommands with the usage text."""

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        if args and self.get_command(ctx, args[0]) is None:
            print_usage()
            ctx.exit(0)
        return super().resolve_command(ctx, args)


app = typer.Typer(
    name="buildmeter",
    cls=UsageFallbackGroup,
    help="buildmeter: ANSI progress bars, log classification and alert banners.",
    invoke_without_command=True,
    no_args_is_help=False,
    add_completion=False,
)


@app.callback()
def main_callback(ctx: typer.Context) -> None:
    """Configure diagnostics and print usage when no command is given."""
    configure_logging(config.log_level)
    if ctx.invoked_subcommand is None:
        print_usage()


# Positional arguments may start with a dash ("-5", "--- BUILD FAILED ---")
# and surplus trailing arguments are ignored.
LENIENT_ARGS = {"ignore_unknown_options": True, "allow_extra_args": True}


def _register(name: str, help: str, command) -> None:
    app.command(name=name, help=help, context_settings=LENIENT_ARGS)(command)


# Register subcommands
_register("show", "Show progress bar with optional stats.", show_cmd)
_register("files", "Show file processing progress.", files_cmd)
_register("message", "Show timestamped message.", message_cmd)
_register("success", "Show success message.", success_cmd)
_register("error", "Show error message.", error_cmd)
_register("warning", "Show warning message.", warning_cmd)
_register("monitor-status", "Show real-time monitoring status.", monitor_status_cmd)
_register("log-stream", "Display log stream with error highlighting.", log_stream_cmd)
_register("progress-monitor", "Combined progress and monitoring.", progress_monitor_cmd)
_register("build-metrics", "Show build performance metrics.", build_metrics_cmd)
_register("critical-alert", "Display critical event alert.", critical_alert_cmd)
_register("classify-log", "Classify log entry by error pattern.", classify_log_cmd)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
