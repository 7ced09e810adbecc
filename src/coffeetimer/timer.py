"""Countdown loop with repeat control."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from . import alert
from .clock import CancelToken
from .duration import format_hhmmss
from .logger import logger

DEFAULTS = {
    "message": "Time for coffee!",
    "alert_pulses": 3,
    "tick_seconds": 1,
}


@dataclass
class TimerState:
    """Mutable state of one countdown cycle."""

    remaining_seconds: int
    running: bool = True


def _write(stream: TextIO, text: str) -> None:
    stream.write(text)
    stream.flush()


def run_countdown(
    duration_text: str,
    seconds: int,
    *,
    message: str = DEFAULTS["message"],
    token: CancelToken,
    clock,
    stream: TextIO,
) -> bool:
    """Count ``seconds`` down to zero, then print ``message`` and ring the bell.

    The remaining time is redrawn in place once per tick. Every tick boundary
    checks ``token`` first.

    Returns:
        True if the countdown reached zero and the alert was emitted, False if
        it was cancelled before that.
    """
    _write(stream, f"Starting coffee timer: {duration_text} ({seconds} seconds)\n")
    state = TimerState(remaining_seconds=seconds)

    while not token.cancelled and state.remaining_seconds >= 0:
        _write(stream, f"\r⏳  {format_hhmmss(state.remaining_seconds)} remaining ")
        if state.remaining_seconds == 0:
            break
        clock.sleep(DEFAULTS["tick_seconds"])
        state.remaining_seconds -= 1

    state.running = False
    if token.cancelled:
        logger.debug("Countdown cancelled with %d second(s) left", state.remaining_seconds)
        return False

    _write(stream, f"\r✅  {message}  ({alert.timestamp_now(clock.now())})\n")
    alert.ring(DEFAULTS["alert_pulses"], token=token, clock=clock, stream=stream)
    return True


def run_timer(
    duration_text: str,
    seconds: int,
    *,
    message: str = DEFAULTS["message"],
    once: bool = False,
    token: CancelToken,
    clock,
    stream: TextIO,
) -> int:
    """Run countdown cycles until ``once`` stops it or ``token`` is cancelled.

    Returns the number of cycles that finished with an alert.
    """
    completed = 0
    while not token.cancelled:
        logger.debug("Cycle %d started", completed + 1)
        if not run_countdown(duration_text, seconds, message=message, token=token, clock=clock, stream=stream):
            break
        completed += 1
        logger.debug("Cycle %d completed", completed)
        if once:
            break

    if token.cancelled:
        _write(stream, "\nCancelled. Bye!\n")
    return completed
