"""Rich terminal renderer for buildmeter.

Turns progress counters, monitoring snapshots and alerts into fixed-layout
ANSI text.  Every method writes straight to the ``Console`` the renderer
was built with and keeps no state between calls.

Color scheme
------------
- bright red     : critical / lowest progress band / alert box
- red            : error
- yellow         : warning
- bright cyan    : info / file progress / section headers
- white          : debug
- bright magenta : completed progress
"""

from __future__ import annotations

from collections.abc import Sequence
from datetime import datetime
from typing import Any

from rich.console import Console
from rich.control import Control
from rich.segment import ControlType
from rich.text import Text

from buildmeter.config import config
from buildmeter.models.logs import LogLevel
from buildmeter.models.snapshots import (
    AlertData,
    BuildMetricsSnapshot,
    MonitoringSnapshot,
    ProgressStats,
)
from buildmeter.monitor._formatting import (
    band_style,
    center_cells,
    chunk,
    format_elapsed,
    format_speed,
    local_datetime,
    local_time,
    pad_cells,
    progress_percentage,
    render_bar,
    seconds_since,
    truncate_head,
    truncate_tail,
    wrap_words,
)
from buildmeter.monitor.classifier import coerce_log_entry

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

PROGRESS_BAR_WIDTH = 40
FILE_BAR_WIDTH = 35
MAX_FILENAME_LENGTH = 25
MAX_LOG_LINE_LENGTH = 80

# Alert box: "║ " + 77 cells of content + " ║"
ALERT_CONTENT_WIDTH = 77
ALERT_BOX_WIDTH = ALERT_CONTENT_WIDTH + 4
ALERT_WRAP_WIDTH = 75
ALERT_CONTINUATION_INDENT = "   "
MAX_SUGGESTED_ACTIONS = 3

# ---------------------------------------------------------------------------
# Level -> Rich style / icon mapping
# ---------------------------------------------------------------------------

_LEVEL_STYLES: dict[LogLevel, str] = {
    LogLevel.CRITICAL: "bright_red",
    LogLevel.ERROR: "red",
    LogLevel.WARNING: "yellow",
    LogLevel.INFO: "bright_cyan",
    LogLevel.DEBUG: "white",
}

_LEVEL_ICONS: dict[LogLevel, str] = {
    LogLevel.CRITICAL: "🔥",
    LogLevel.ERROR: "❌",
    LogLevel.WARNING: "⚠️ ",
    LogLevel.INFO: "ℹ️ ",
    LogLevel.DEBUG: "  ",
}

# Carriage return + erase to end of line: redraw the current row in place.
_REWIND_LINE = Control(ControlType.CARRIAGE_RETURN, (ControlType.ERASE_IN_LINE, 0))


def make_console(*, stderr: bool = False, file: Any = None) -> Console:
    """Build a Console that always emits ANSI codes and never re-wraps.

    Color-capability detection, ``NO_COLOR`` included, is skipped; ANSI
    codes are written whatever the output stream is.
    """
    return Console(
        file=file,
        stderr=stderr,
        force_terminal=True,
        no_color=False,
        color_system=config.color_system,
        soft_wrap=True,
        highlight=False,
        emoji=False,
    )


class TerminalRenderer:
    """Writes progress bars, monitoring status, log streams and alerts.

    Parameters
    ----------
    console:
        Rich Console sink.  A forced-terminal stdout console is created
        if not provided.
    log_stream_lines:
        Default number of entries shown by ``show_log_stream``.
    monitor_log_lines:
        Number of recent log entries shown under a combined progress bar.
    """

    def __init__(
        self,
        console: Console | None = None,
        *,
        log_stream_lines: int | None = None,
        monitor_log_lines: int | None = None,
    ) -> None:
        self.console = console or make_console()
        self.log_stream_lines = log_stream_lines or config.log_stream_lines
        self.monitor_log_lines = monitor_log_lines or config.monitor_log_lines

    # ------------------------------------------------------------------
    # Progress bars
    # ------------------------------------------------------------------

    def show_progress(
        self,
        step: int,
        total: int,
        message: str = "Processing...",
        stats: ProgressStats | None = None,
    ) -> None:
        """Draw the 40-cell progress bar, overwriting the current line.

        Raises ``InvalidProgressError`` when *total* is not positive.
        A newline is only written once ``step >= total``.
        """
        percentage = progress_percentage(step, total)
        bar = render_bar(step, total, PROGRESS_BAR_WIDTH)
        stats = stats or ProgressStats()

        line = Text.assemble(
            (f"[{bar}] {percentage}%", band_style(percentage)),
            self._stats_fragment(stats),
            f" | {message}",
        )
        self._write_in_place(line, complete=step >= total)

    def show_file_progress(
        self,
        current_file: int,
        total_files: int,
        filename: str,
        bytes_per_second: float = 0,
    ) -> None:
        """Draw the 35-cell file progress bar with speed and filename."""
        percentage = progress_percentage(current_file, total_files)
        bar = render_bar(current_file, total_files, FILE_BAR_WIDTH)

        parts = [f" | {current_file}/{total_files}"]
        if bytes_per_second > 0:
            parts.append(f" | {format_speed(bytes_per_second)}")
        parts.append(f" | {truncate_tail(filename, MAX_FILENAME_LENGTH)}")

        line = Text.assemble((f"[{bar}] {percentage}%", "bright_cyan"), *parts)
        self._write_in_place(line, complete=current_file >= total_files)

    @staticmethod
    def _stats_fragment(stats: ProgressStats) -> str:
        fragment = ""
        if stats.file_count:
            fragment += f" | {stats.file_count} files"
        if stats.speed:
            fragment += f" | {stats.speed}"
        if stats.eta:
            fragment += f" | ETA: {stats.eta}"
        return fragment

    def _write_in_place(self, line: Text, *, complete: bool) -> None:
        self.console.print(_REWIND_LINE, end="")
        self.console.print(line, end="\n" if complete else "")

    # ------------------------------------------------------------------
    # Monitoring
    # ------------------------------------------------------------------

    def show_monitoring_status(
        self,
        snapshot: MonitoringSnapshot | None = None,
        *,
        now: datetime | None = None,
    ) -> None:
        """Print the single-line monitoring status."""
        snapshot = snapshot or MonitoringSnapshot()

        if snapshot.session_active:
            indicator = ("[● MONITOR]", "bright_green")
        else:
            indicator = ("[○ MONITOR]", "bright_black")
        analyzing = "🧠" if snapshot.claude_analyzing else "  "

        line = Text.assemble(
            (indicator[0] + analyzing, indicator[1]),
            f" {snapshot.platform}/{snapshot.mode}",
        )
        if snapshot.errors_detected > 0:
            line.append(" ")
            line.append(f"❌{snapshot.errors_detected}", style="bright_red")
        if snapshot.warnings_detected > 0:
            line.append(" ")
            line.append(f"⚠️ {snapshot.warnings_detected}", style="bright_yellow")
        if snapshot.last_event_time is not None:
            line.append(f" | {seconds_since(snapshot.last_event_time, now)}s ago")

        self.console.print(line)

    def show_log_stream(
        self,
        entries: Sequence[Any],
        max_lines: int | None = None,
    ) -> None:
        """Print the most recent *max_lines* log entries, classified.

        Raw strings are classified on the fly; pre-classified records are
        shown as-is.  Writes nothing for an empty or non-list input.
        """
        if not isinstance(entries, (list, tuple)) or not entries:
            return
        if max_lines is None:
            max_lines = self.log_stream_lines
        if max_lines <= 0:
            return

        self.console.print(Text("[📜 LOG STREAM]", style="cyan"))

        for entry in entries[-max_lines:]:
            classified = coerce_log_entry(entry)
            if classified is None:
                continue
            text = truncate_head(classified.original, MAX_LOG_LINE_LENGTH)
            icon = _LEVEL_ICONS[classified.level]
            self.console.print(
                Text(
                    f"[{local_time(classified.timestamp)}] {icon} {text}",
                    style=_LEVEL_STYLES[classified.level],
                )
            )

    def show_progress_with_monitoring(
        self,
        step: int,
        total: int,
        message: str = "Processing...",
        stats: ProgressStats | None = None,
        monitoring: MonitoringSnapshot | None = None,
        *,
        now: datetime | None = None,
    ) -> None:
        """Progress bar, then monitoring status and recent logs if supplied."""
        self.show_progress(step, total, message, stats)

        if monitoring is None or monitoring.is_empty:
            return
        self.show_monitoring_status(monitoring, now=now)
        if monitoring.recent_logs:
            self.show_log_stream(monitoring.recent_logs, self.monitor_log_lines)

    def show_build_metrics(
        self,
        snapshot: BuildMetricsSnapshot | None = None,
        *,
        now: datetime | None = None,
    ) -> None:
        """Print the build metrics block."""
        snapshot = snapshot or BuildMetricsSnapshot()
        elapsed = (
            max(0, seconds_since(snapshot.start_time, now))
            if snapshot.start_time is not None
            else 0
        )

        self.console.print(Text("[📊 BUILD METRICS]", style="bright_cyan"))
        self.console.print(
            Text(
                f"Platform: {snapshot.platform} | Mode: {snapshot.mode} "
                f"| Elapsed: {format_elapsed(elapsed)}"
            )
        )
        self.console.print(
            Text(f"Phase: {snapshot.current_phase} | Files: {snapshot.files_processed}")
        )

        if snapshot.total_errors or snapshot.total_warnings:
            self.console.print(
                Text.assemble(
                    "Issues: ",
                    (f"{snapshot.total_errors} errors", "bright_red"),
                    ", ",
                    (f"{snapshot.total_warnings} warnings", "bright_yellow"),
                )
            )

        if snapshot.claude_analysis_count:
            self.console.print(
                Text(
                    f"Claude Analysis: {snapshot.claude_analysis_count} "
                    "AI insights generated"
                )
            )

    # ------------------------------------------------------------------
    # Critical alert
    # ------------------------------------------------------------------

    def show_critical_alert(self, alert: AlertData | None = None) -> None:
        """Draw the bordered critical alert box in bright red."""
        alert = alert or AlertData()
        self.console.print()
        self.console.print(
            Text("\n".join(build_alert_rows(alert)), style="bright_red")
        )
        self.console.print()

    # ------------------------------------------------------------------
    # One-line status messages
    # ------------------------------------------------------------------

    def show_message(self, text: str, *, now: datetime | None = None) -> None:
        """Print *text* behind a cyan local-time stamp."""
        stamp = local_time(now or datetime.now().astimezone())
        self.console.print(Text.assemble((f"[{stamp}]", "cyan"), f" {text}"))

    def show_success(self, text: str) -> None:
        self.console.print(Text.assemble(("[✅ SUCCESS]", "green"), f" {text}"))

    def show_error(self, text: str) -> None:
        self.console.print(Text.assemble(("[❌ ERROR]", "red"), f" {text}"))

    def show_warning(self, text: str) -> None:
        self.console.print(Text.assemble(("[⚠️  WARNING]", "yellow"), f" {text}"))


def _box_row(content: str) -> str:
    return f"║ {pad_cells(content, ALERT_CONTENT_WIDTH)} ║"


def build_alert_rows(alert: AlertData) -> list[str]:
    """Lay out the alert box; every row is ``ALERT_BOX_WIDTH`` cells wide."""
    rule = "═" * (ALERT_BOX_WIDTH - 2)
    separator = f"╠{rule}╣"

    rows = [
        f"╔{rule}╗",
        f"║{center_cells('🚨 CRITICAL ALERT 🚨', ALERT_BOX_WIDTH - 2)}║",
        separator,
        _box_row(truncate_head(alert.title, ALERT_CONTENT_WIDTH)),
        _box_row(f"Time: {local_datetime(alert.timestamp)}"),
        separator,
    ]
    rows.extend(_box_row(line) for line in wrap_words(alert.message, ALERT_WRAP_WIDTH))

    actions = alert.suggested_actions[:MAX_SUGGESTED_ACTIONS]
    if actions:
        rows.append(separator)
        rows.append(_box_row("Suggested Actions:"))
        continuation_width = ALERT_CONTENT_WIDTH - len(ALERT_CONTINUATION_INDENT)
        for index, action in enumerate(actions, start=1):
            first, *rest = chunk(f"{index}. {action}", ALERT_WRAP_WIDTH)
            rows.append(_box_row(first))
            remainder = "".join(rest)
            if remainder:
                rows.extend(
                    _box_row(ALERT_CONTINUATION_INDENT + piece)
                    for piece in chunk(remainder, continuation_width)
                )

    rows.append(f"╚{rule}╝")
    return rows
