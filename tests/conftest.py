from datetime import datetime

import pytest


class FakeClock:
    """Records sleeps instead of blocking; optionally cancels after N sleeps."""

    def __init__(self, token=None, cancel_after=None):
        self.token = token
        self.cancel_after = cancel_after
        self.sleeps = []

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        if self.cancel_after is not None and len(self.sleeps) >= self.cancel_after:
            self.token.cancel()

    def now(self):
        return datetime(2024, 5, 17, 9, 30, 5)


@pytest.fixture
def fake_clock_cls():
    return FakeClock
