"""``buildmeter message`` / ``success`` / ``error`` / ``warning``.

One-line status messages with a colored prefix.
"""

from __future__ import annotations

import typer

from buildmeter.monitor.renderer import TerminalRenderer, make_console

console = make_console()


def message_cmd(
    text: str = typer.Argument("Working...", help="Message text."),
) -> None:
    """Show a timestamped message."""
    TerminalRenderer(console).show_message(text)


def success_cmd(
    text: str = typer.Argument("Operation completed successfully", help="Message text."),
) -> None:
    """Show a success message."""
    TerminalRenderer(console).show_success(text)


def error_cmd(
    text: str = typer.Argument("Operation failed", help="Message text."),
) -> None:
    """Show an error message."""
    TerminalRenderer(console).show_error(text)


def warning_cmd(
    text: str = typer.Argument("Warning occurred", help="Message text."),
) -> None:
    """Show a warning message."""
    TerminalRenderer(console).show_warning(text)
