"""Lenient argument decoding shared by the CLI commands.

Command-line input never aborts a render: unparseable numbers fall back
to their documented defaults and malformed JSON falls back to an empty
payload.  Commands that validate their JSON pass a ``label`` so the
failure is also reported on stderr.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError
from rich.text import Text

from buildmeter.monitor.renderer import make_console

logger = logging.getLogger(__name__)

err_console = make_console(stderr=True)

ModelT = TypeVar("ModelT", bound=BaseModel)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def int_arg(raw: str | None, default: int) -> int:
    """Parse the leading integer of *raw*.

    ``"12abc"`` parses as 12.  A missing or unparseable value, or a zero,
    yields *default*.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        logger.debug("Not a number: %r, using %d", raw, default)
        return default
    return int(match.group(1)) or default


def report_invalid(label: str) -> None:
    """Print the non-fatal ``Error parsing <label> JSON`` notice on stderr."""
    err_console.print(Text(f"Error parsing {label} JSON"))


def load_json(raw: str | None, *, label: str | None = None) -> Any | None:
    """Decode a JSON argument, returning ``None`` when absent or malformed."""
    if not raw:
        return None
    try:
        return json.loads(raw)
    except json.JSONDecodeError as exc:
        logger.debug("Malformed JSON payload (%s): %s", label or "ignored", exc)
        if label:
            report_invalid(label)
        return None


def load_model(
    raw: str | None,
    model: type[ModelT],
    *,
    label: str | None = None,
) -> ModelT:
    """Decode a JSON object argument into *model*.

    Anything that is not a JSON object, or that fails validation, gives
    the model's defaults instead.
    """
    data = load_json(raw, label=label)
    if data is None:
        return model()
    if not isinstance(data, dict):
        logger.debug("Expected a JSON object for %s, got %s", model.__name__, type(data).__name__)
        if label:
            report_invalid(label)
        return model()

    try:
        return model.model_validate(data)
    except ValidationError as exc:
        logger.debug("Invalid %s payload: %s", model.__name__, exc)
        if label:
            report_invalid(label)
        return model()
