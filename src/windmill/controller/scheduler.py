"""
Deferred Callbacks
==================
The animator never talks to QTimer directly; it asks a Scheduler for a
cancelable one-shot callback. The Qt implementation delivers the callback on
the thread that owns the timer (the GUI thread).
"""
from __future__ import annotations

from typing import Callable, Optional, Protocol

from PySide6.QtCore import QTimer


class Cancelable(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> Cancelable: ...


class _TimerHandle:
    def __init__(self, scheduler: QtScheduler, generation: int) -> None:
        self._scheduler = scheduler
        self._generation = generation

    def cancel(self) -> None:
        self._scheduler._cancel(self._generation)


class QtScheduler:
    """
    Scheduler backed by one reusable single-shot QTimer.

    Only one callback is pending at a time: scheduling again replaces the
    previous callback, and a stale handle cannot cancel the newer one.
    """

    def __init__(self) -> None:
        self._timer = QTimer()
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._fire)
        self._callback: Optional[Callable[[], None]] = None
        self._generation = 0

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> _TimerHandle:
        self._generation += 1
        self._callback = callback
        self._timer.start(delay_ms)
        return _TimerHandle(self, self._generation)

    def _fire(self) -> None:
        callback = self._callback
        self._callback = None
        if callback is not None:
            callback()

    def _cancel(self, generation: int) -> None:
        if generation != self._generation:
            return
        self._timer.stop()
        self._callback = None
