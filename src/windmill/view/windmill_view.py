"""
Windmill Widget
===============
The QWidget that hosts the animated windmill.

Why is this file needed?
------------------------
1. Host surface: It forwards Qt resize and paint events to the layout engine
   and the frame renderer.
2. Lifecycle: It owns the animator and makes sure no tick outlives the widget.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QSize
from PySide6.QtGui import QCloseEvent, QPainter, QPaintEvent, QResizeEvent
from PySide6.QtWidgets import QWidget

from windmill.config import WindmillConfig
from windmill.controller.animator import Animator
from windmill.controller.scheduler import QtScheduler, Scheduler
from windmill.model.state import WindmillState
from windmill.view.renderer import render
from windmill.view.surfaces import QPainterSurface, Surface

logger = logging.getLogger(__name__)


class WindmillView(QWidget):
    def __init__(
        self,
        config: Optional[WindmillConfig] = None,
        parent: Optional[QWidget] = None,
        scheduler: Optional[Scheduler] = None
    ) -> None:
        super().__init__(parent)
        self.config = config or WindmillConfig()
        self.state = WindmillState(fill_color=self.config.fill_color)
        self.animator = Animator(self, scheduler or QtScheduler(), self.config.interval_ms)

        # Tear down the animator together with the C++ widget
        animator = self.animator
        self.destroyed.connect(lambda *_: animator.dispose())

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def start_rotate(self) -> None:
        self.animator.start()

    def stop(self) -> None:
        self.animator.stop()

    def teardown(self) -> None:
        """Cancel the animation permanently."""
        self.animator.dispose()

    @property
    def is_rotating(self) -> bool:
        return self.animator.is_running

    def on_size_changed(self, width: int, height: int) -> None:
        self.state.resize(width, height)

    def on_draw(self, surface: Surface) -> None:
        state = self.state
        render(surface, state.constants, state.rotation_angle, state.fill_color, state.height)

    def request_redraw(self) -> None:
        self.update()

    # ------------------------------------------------------------------------------
    # Qt events
    # ------------------------------------------------------------------------------

    def sizeHint(self) -> QSize:
        return QSize(200, 400)

    def resizeEvent(self, event: QResizeEvent) -> None:
        super().resizeEvent(event)
        size = event.size()
        self.on_size_changed(size.width(), size.height())

    def paintEvent(self, event: QPaintEvent) -> None:
        painter = QPainter(self)
        try:
            self.on_draw(QPainterSurface(painter))
        finally:
            painter.end()

    def closeEvent(self, event: QCloseEvent) -> None:
        self.stop()
        super().closeEvent(event)
