"""Shared test fixtures for buildmeter."""

from __future__ import annotations

import io
import re
from collections.abc import Callable
from datetime import datetime, timezone

import pytest

from buildmeter.monitor.renderer import TerminalRenderer, make_console

_ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]|\r")


def strip_ansi(text: str) -> str:
    """Remove ANSI escape sequences and carriage returns from *text*."""
    return _ANSI.sub("", text)


@pytest.fixture
def buffer() -> io.StringIO:
    """In-memory sink standing in for stdout."""
    return io.StringIO()


@pytest.fixture
def renderer(buffer: io.StringIO) -> TerminalRenderer:
    """A TerminalRenderer writing into ``buffer``."""
    return TerminalRenderer(make_console(file=buffer))


@pytest.fixture
def rendered(buffer: io.StringIO) -> Callable[[], str]:
    """Return everything written so far, ANSI codes included."""
    return buffer.getvalue


@pytest.fixture
def now() -> datetime:
    """A fixed reference instant for elapsed-time rendering."""
    return datetime(2026, 10, 17, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def plain(buffer: io.StringIO) -> Callable[[], str]:
    """Return everything written so far with ANSI codes removed."""
    return lambda: strip_ansi(buffer.getvalue())


@pytest.fixture
def strip() -> Callable[[str], str]:
    """The ANSI-stripping helper, for output captured elsewhere."""
    return strip_ansi
