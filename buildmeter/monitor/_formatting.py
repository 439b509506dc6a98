"""Shared layout helpers for the terminal renderers.

Pure arithmetic and string shaping: percentages, bar cells, color bands,
speed and elapsed-time strings, truncation and word wrapping.  Nothing in
this module writes to a console.
"""

from __future__ import annotations

import math
from datetime import datetime, timezone

from rich.cells import cell_len, chop_cells, set_cell_size

# Bar glyphs
FILLED_CELL = "█"
EMPTY_CELL = "░"

ELLIPSIS = "..."

# (lower bound inclusive, Rich style); checked from the top down.
PERCENT_BANDS: tuple[tuple[int, str], ...] = (
    (100, "bright_magenta"),
    (75, "bright_green"),
    (50, "bright_cyan"),
    (25, "bright_yellow"),
)
LOWEST_BAND_STYLE = "bright_red"

KILOBYTE = 1024
MEGABYTE = 1024 * 1024


class InvalidProgressError(ValueError):
    """Raised when a progress total is not a positive number."""


def round_half_up(value: float) -> int:
    """Round like a calculator: ``x.5`` always goes up.

    Python's ``round`` uses banker's rounding, which would show 12% for
    1 of 8 steps instead of 13%.
    """
    return math.floor(value + 0.5)


def _check_total(total: int) -> None:
    if total <= 0:
        raise InvalidProgressError(f"total must be positive, got {total}")


def progress_percentage(step: int, total: int) -> int:
    """Return ``round(100 * step / total)``."""
    _check_total(total)
    return round_half_up(100 * step / total)


def filled_cells(step: int, total: int, width: int) -> int:
    """Return the number of filled cells for a bar of *width* cells.

    Clamped to ``[0, width]`` so overshooting steps never break the bar.
    """
    _check_total(total)
    return max(0, min(width, round_half_up(width * step / total)))


def render_bar(step: int, total: int, width: int) -> str:
    """Return the bar body (without brackets)."""
    filled = filled_cells(step, total, width)
    return FILLED_CELL * filled + EMPTY_CELL * (width - filled)


def band_style(percentage: int) -> str:
    """Return the Rich style for the color band containing *percentage*."""
    for lower_bound, style in PERCENT_BANDS:
        if percentage >= lower_bound:
            return style
    return LOWEST_BAND_STYLE


def format_speed(bytes_per_second: float) -> str:
    """Format a transfer rate as ``B/s``, ``KB/s`` or ``MB/s``.

    Examples
    --------
    >>> format_speed(500)
    '500 B/s'
    >>> format_speed(2048)
    '2.0 KB/s'
    >>> format_speed(2097152)
    '2.0 MB/s'
    """
    if bytes_per_second > MEGABYTE:
        return f"{bytes_per_second / MEGABYTE:.1f} MB/s"
    if bytes_per_second > KILOBYTE:
        return f"{bytes_per_second / KILOBYTE:.1f} KB/s"
    return f"{bytes_per_second} B/s"


def truncate_tail(text: str, max_length: int) -> str:
    """Keep the end of *text*, prefixing ``...`` when it is too long.

    The result is never longer than *max_length*.
    """
    if len(text) <= max_length:
        return text
    return ELLIPSIS + text[-(max_length - len(ELLIPSIS)):]


def truncate_head(text: str, max_length: int) -> str:
    """Keep the start of *text*, suffixing ``...`` when it is too long.

    Measured in terminal cells, so wide glyphs count twice.
    """
    if cell_len(text) <= max_length:
        return text
    return set_cell_size(text, max_length - len(ELLIPSIS)) + ELLIPSIS


def pad_cells(text: str, width: int) -> str:
    """Right-pad *text* with spaces to *width* terminal cells.

    Wide glyphs (emoji, CJK) count as two cells.
    """
    return text + " " * max(0, width - cell_len(text))


def center_cells(text: str, width: int) -> str:
    """Center *text* within *width* terminal cells."""
    spare = max(0, width - cell_len(text))
    left = spare // 2
    return " " * left + text + " " * (spare - left)


def chunk(text: str, size: int) -> list[str]:
    """Split *text* into consecutive pieces of at most *size* terminal cells."""
    return chop_cells(text, size) or [""]


def wrap_words(message: str, width: int) -> list[str]:
    """Greedy word wrap.

    Words are appended to a line buffer; when the buffer plus the next
    word would exceed *width* the buffer is emitted and a new one starts
    with that word.  Widths are terminal cells; a single word wider than
    *width* is hard-split.
    """
    lines: list[str] = []
    buffer = ""
    for word in message.split():
        pieces = chunk(word, width)
        for piece in pieces[:-1]:
            if buffer:
                lines.append(buffer)
                buffer = ""
            lines.append(piece)
        word = pieces[-1]

        candidate = f"{buffer} {word}" if buffer else word
        if cell_len(candidate) > width:
            lines.append(buffer)
            buffer = word
        else:
            buffer = candidate

    if buffer:
        lines.append(buffer)
    return lines


def as_aware(moment: datetime) -> datetime:
    """Interpret a naive datetime as local time."""
    if moment.tzinfo is None:
        return moment.astimezone()
    return moment


def seconds_since(moment: datetime, now: datetime | None = None) -> int:
    """Whole seconds elapsed from *moment* to *now* (default: current time)."""
    now = now or datetime.now(timezone.utc)
    return math.floor((now - as_aware(moment)).total_seconds())


def format_elapsed(seconds: int) -> str:
    """Format *seconds* as ``Mm Ss``, omitting the minutes when zero."""
    minutes, secs = divmod(seconds, 60)
    if minutes > 0:
        return f"{minutes}m {secs}s"
    return f"{secs}s"


def local_time(moment: datetime) -> str:
    """Wall-clock time of *moment* in the local timezone."""
    return as_aware(moment).astimezone().strftime("%H:%M:%S")


def local_datetime(moment: datetime) -> str:
    """Date and wall-clock time of *moment* in the local timezone."""
    return as_aware(moment).astimezone().strftime("%Y-%m-%d %H:%M:%S")
