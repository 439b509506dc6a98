"""Log-entry severity classifier.

Maps one line of text to a severity bucket using ordered pattern tiers.
Tiers are checked critical > error > warning > info; within a tier the
rules are tried in listed order and the first match wins.  A line that
matches nothing is classified ``debug`` with pattern ``"unclassified"``.

Each rule keeps its own case sensitivity.  ``FATAL|Fatal|fatal`` and the
other bare keyword rules are case-sensitive on purpose; the phrase rules
are compiled with ``re.IGNORECASE``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from buildmeter.models.logs import UNCLASSIFIED, LogClassification, LogLevel

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Severity tiers (read-only, evaluated in order)
# ---------------------------------------------------------------------------

SEVERITY_TIERS: tuple[tuple[LogLevel, tuple[re.Pattern[str], ...]], ...] = (
    (
        LogLevel.CRITICAL,
        (
            re.compile(r"FATAL|Fatal|fatal"),
            re.compile(r"ERROR.*failed.*build", re.IGNORECASE),
            re.compile(r"Exception.*build", re.IGNORECASE),
            re.compile(r"BUILD FAILED", re.IGNORECASE),
            re.compile(r"compilation.*failed", re.IGNORECASE),
            re.compile(r"deployment.*failed", re.IGNORECASE),
        ),
    ),
    (
        LogLevel.ERROR,
        (
            re.compile(r"ERROR|Error"),
            re.compile(r"Exception"),
            re.compile(r"Failed to", re.IGNORECASE),
            re.compile(r"Could not", re.IGNORECASE),
            re.compile(r"Unable to", re.IGNORECASE),
            re.compile(r"not found", re.IGNORECASE),
        ),
    ),
    (
        LogLevel.WARNING,
        (
            re.compile(r"WARNING|Warning"),
            re.compile(r"deprecated", re.IGNORECASE),
            re.compile(r"missing", re.IGNORECASE),
            re.compile(r"skipping", re.IGNORECASE),
            re.compile(r"performance", re.IGNORECASE),
        ),
    ),
    (
        LogLevel.INFO,
        (
            re.compile(r"INFO|Info"),
            re.compile(r"Starting", re.IGNORECASE),
            re.compile(r"Completed", re.IGNORECASE),
            re.compile(r"Building", re.IGNORECASE),
            re.compile(r"Deploying", re.IGNORECASE),
        ),
    ),
)


def classify_log_entry(line: str) -> LogClassification:
    """Classify *line* into exactly one severity bucket.

    Examples
    --------
    >>> classify_log_entry("FATAL: build failed").level
    <LogLevel.CRITICAL: 'critical'>
    >>> classify_log_entry("just some text").pattern
    'unclassified'
    """
    for level, rules in SEVERITY_TIERS:
        for rule in rules:
            if rule.search(line):
                return LogClassification(
                    level=level,
                    original=line,
                    pattern=rule.pattern,
                )

    return LogClassification(
        level=LogLevel.DEBUG,
        original=line,
        pattern=UNCLASSIFIED,
    )


def coerce_log_entry(entry: Any) -> LogClassification | None:
    """Turn a raw line or a pre-classified record into a classification.

    Strings are classified, ``LogClassification`` instances pass through,
    and mappings (decoded JSON objects) are validated.  Anything else is
    logged and returns ``None`` so the caller can skip it.
    """
    if isinstance(entry, LogClassification):
        return entry
    if isinstance(entry, str):
        return classify_log_entry(entry)
    if isinstance(entry, Mapping):
        try:
            return LogClassification.model_validate(dict(entry))
        except ValidationError as exc:
            logger.warning(
                "Skipping malformed log record: %d validation error(s)",
                exc.error_count(),
            )
            return None

    logger.warning("Skipping log entry of type %s", type(entry).__name__)
    return None
