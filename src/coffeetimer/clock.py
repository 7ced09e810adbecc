"""Clock and interrupt primitives used by the countdown loop."""
from __future__ import annotations

import signal
import time
from datetime import datetime
from typing import Any

from .logger import logger


class CancelToken:
    """Cancellation flag shared between the interrupt handler and the loop.

    Once cancelled it stays cancelled for the rest of the run.
    """

    def __init__(self) -> None:
        self._cancelled = False

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True


class SystemClock:
    """Real wall clock: blocking sleeps and local time."""

    def sleep(self, seconds: float) -> None:
        time.sleep(seconds)

    def now(self) -> datetime:
        return datetime.now()


def install_interrupt_handler(token: CancelToken) -> Any:
    """Route SIGINT to ``token.cancel()`` and return the previous handler."""

    def handle_interrupt(signum, frame):
        logger.debug("Interrupt received, cancelling timer")
        token.cancel()

    return signal.signal(signal.SIGINT, handle_interrupt)


def restore_interrupt_handler(previous: Any) -> None:
    if previous is not None:
        signal.signal(signal.SIGINT, previous)
