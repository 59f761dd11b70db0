"""
Rotation Animator
=================
Drives the windmill with a fixed-delay, self-rescheduling tick.

Why is this file needed?
------------------------
1. Timing: Every tick advances the rotation by one degree, asks the owner to
   redraw and schedules the next tick after the same delay.
2. Safety: The animator only keeps a weak reference to its owner, so a tick
   that fires after the widget is gone is dropped instead of touching dead
   state.

Classes:
    Animator: Idle/Running state machine around one pending tick.
"""
from __future__ import annotations

import logging
import weakref
from typing import Optional, Protocol

from windmill.config import TICK_INTERVAL_MS
from windmill.controller.scheduler import Cancelable, Scheduler
from windmill.model.state import WindmillState

logger = logging.getLogger(__name__)


class AnimationTarget(Protocol):
    """Anything holding a WindmillState that can be asked to repaint."""
    state: WindmillState

    def request_redraw(self) -> None: ...


class Animator:
    def __init__(
        self,
        target: AnimationTarget,
        scheduler: Scheduler,
        interval_ms: int = TICK_INTERVAL_MS
    ) -> None:
        self._target_ref: Optional[weakref.ref[AnimationTarget]] = weakref.ref(target)
        self._scheduler = scheduler
        self.interval_ms = interval_ms
        self._pending: Optional[Cancelable] = None

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    @property
    def is_running(self) -> bool:
        return self._pending is not None

    @property
    def is_disposed(self) -> bool:
        return self._target_ref is None

    def start(self) -> None:
        """(Re)start the animation; any outstanding tick is replaced."""
        if self._target_ref is None:
            logger.debug("start() ignored, animator disposed")
            return
        self._cancel_pending()
        self._schedule()
        logger.debug(f"Rotation started ({self.interval_ms} ms per tick)")

    def stop(self) -> None:
        """Cancel the pending tick. No-op when idle."""
        if self._pending is None:
            return
        self._cancel_pending()
        logger.debug("Rotation stopped")

    def dispose(self) -> None:
        """Stop for good and forget the owner."""
        self._cancel_pending()
        self._target_ref = None

    def tick(self) -> None:
        """Advance one step, request a repaint and schedule the next tick."""
        # a direct call while running replaces the outstanding tick
        self._cancel_pending()
        target = self._target_ref() if self._target_ref is not None else None
        if target is None:
            logger.debug("Tick dropped, owner no longer alive")
            return

        target.state.advance()
        target.request_redraw()
        self._schedule()

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    def _schedule(self) -> None:
        self._pending = self._scheduler.call_later(self.interval_ms, self.tick)

    def _cancel_pending(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
