"""Deterministic stand-in for QtScheduler."""
from __future__ import annotations

from typing import Callable, Optional


class FakeCall:
    def __init__(self, due: int, seq: int, callback: Callable[[], None]) -> None:
        self.due = due
        self.seq = seq
        self.callback: Optional[Callable[[], None]] = callback

    def cancel(self) -> None:
        self.callback = None

    @property
    def cancelled(self) -> bool:
        return self.callback is None


class FakeClock:
    def __init__(self) -> None:
        self.now = 0
        self._seq = 0
        self._calls: list[FakeCall] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> FakeCall:
        self._seq += 1
        call = FakeCall(self.now + delay_ms, self._seq, callback)
        self._calls.append(call)
        return call

    @property
    def pending(self) -> list[FakeCall]:
        return [c for c in self._calls if not c.cancelled]

    def advance(self, ms: int) -> None:
        """Run every callback due within the next `ms` milliseconds, in order."""
        target = self.now + ms
        while True:
            due = sorted((c for c in self.pending if c.due <= target), key=lambda c: (c.due, c.seq))
            if not due:
                break
            call = due[0]
            self._calls.remove(call)
            self.now = call.due
            callback = call.callback
            call.callback = None
            callback()
        self.now = target
