"""buildmeter CLI — Typer-based command-line interface.

Provides the ``buildmeter`` command with subcommands for progress bars,
status messages, monitoring status, log streams, build metrics, critical
alerts and log classification.

All output uses Rich with ANSI codes forced on.
"""
