"""Duration parsing and formatting helpers."""
from __future__ import annotations

import re

UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}

_COLON_FORM = re.compile(r"([0-9]+):([0-9]+)(?::([0-9]+))?\s*\Z")
_UNIT_TOKEN = re.compile(r"\s*([0-9]+)([A-Za-z]?)[\s,]*")


class DurationError(ValueError):
    """Raised when a duration string cannot be turned into seconds."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid DURATION: {text}")
        self.text = text


def _parse_colon_form(text: str) -> int | None:
    match = _COLON_FORM.match(text)
    if match is None:
        return None
    first, second, third = match.groups()
    if third is None:
        minutes, seconds = int(first), int(second)
        if seconds > 59:
            return None
        return minutes * 60 + seconds
    hours, minutes, seconds = int(first), int(second), int(third)
    if minutes > 59 or seconds > 59:
        return None
    return hours * 3600 + minutes * 60 + seconds


def _parse_unit_form(text: str) -> int | None:
    total = 0
    position = 0
    while position < len(text):
        match = _UNIT_TOKEN.match(text, position)
        if match is None:
            return None
        value, unit = match.groups()
        multiplier = UNIT_SECONDS.get(unit.lower() or "s")
        if multiplier is None:
            return None
        total += int(value) * multiplier
        position = match.end()
    return total


def parse_duration(text: str) -> int:
    """Convert a duration string into a positive number of seconds.

    Two forms are understood, tried in order:

    * colon form, ``H:MM:SS`` or ``MM:SS`` (``MM`` and ``SS`` below 60 where
      they are not the leading field)
    * unit form, ``<int><unit>`` tokens such as ``1h30m`` or ``5m, 10s``;
      a bare integer counts as seconds and tokens may come in any order

    Args:
        text: Raw duration as typed by the user.

    Raises:
        DurationError: If neither form matches or the total is zero.
    """
    stripped = text.lstrip()
    if not stripped:
        raise DurationError(text)

    seconds = _parse_colon_form(stripped)
    if seconds is None:
        seconds = _parse_unit_form(stripped)
    if not seconds:
        raise DurationError(text)
    return seconds


def format_hhmmss(seconds: int) -> str:
    """Render seconds as ``MM:SS``, or ``HH:MM:SS`` once an hour is reached."""
    if seconds < 0:
        raise ValueError("seconds must not be negative")
    hours, remainder = divmod(seconds, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours > 0:
        return f"{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"
