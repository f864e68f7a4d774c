"""
Clock sources for wall-clock based behaviour (the oxygen warning cooldown).
NO UI DEPENDENCIES.
"""
import time
from typing import Protocol


class Clock(Protocol):
    """Anything that can tell the current time in milliseconds."""

    def now_ms(self) -> float:
        ...


class SystemClock:
    """Monotonic wall clock."""

    def now_ms(self) -> float:
        return time.monotonic() * 1000.0


class ManualClock:
    """A clock that only moves when told to. Used for replays and tests."""

    def __init__(self, start_ms: float = 0.0):
        self._now = start_ms

    def now_ms(self) -> float:
        return self._now

    def advance(self, ms: float) -> None:
        if ms < 0:
            raise ValueError(f"cannot move a clock backwards ({ms} ms)")
        self._now += ms

    def __repr__(self) -> str:
        return f"ManualClock({self._now} ms)"
