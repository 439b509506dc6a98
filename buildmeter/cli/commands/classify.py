"""``buildmeter classify-log TEXT`` — classify one log line.

Prints the classification as indented JSON for scripting.
"""

from __future__ import annotations

import typer

from buildmeter.monitor.classifier import classify_log_entry


def classify_log_cmd(
    text: str = typer.Argument("Sample log entry", help="The log line to classify."),
) -> None:
    """Classify a log entry by severity pattern."""
    classification = classify_log_entry(text)
    typer.echo(classification.model_dump_json(indent=2))
