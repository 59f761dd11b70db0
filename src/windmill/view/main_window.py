"""
Main Application Window
=======================
Demo window: the windmill on a dark background with Start / Stop actions.
"""
from PySide6.QtGui import QAction, QColor, QPalette
from PySide6.QtWidgets import QMainWindow, QToolBar

from windmill.config import WindmillConfig
from windmill.view.windmill_view import WindmillView


VISIBLE_APP_NAME = "Windmill"
BACKGROUND_COLOR = "#2B3A55"

class MainWindow(QMainWindow):
    def __init__(self, config: WindmillConfig) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(300, 520)

        # --- CENTRAL WIDGET ---
        self.windmill = WindmillView(config)
        palette = self.windmill.palette()
        palette.setColor(QPalette.ColorRole.Window, QColor(BACKGROUND_COLOR))
        self.windmill.setPalette(palette)
        self.windmill.setAutoFillBackground(True)
        self.setCentralWidget(self.windmill)

        # --- TOOLBAR ---
        toolbar = QToolBar()
        toolbar.setMovable(False)
        self.addToolBar(toolbar)

        self.act_start = QAction("Start", self)
        self.act_start.triggered.connect(self.windmill.start_rotate)
        toolbar.addAction(self.act_start)

        self.act_stop = QAction("Stop", self)
        self.act_stop.triggered.connect(self.windmill.stop)
        toolbar.addAction(self.act_stop)

    def closeEvent(self, event) -> None:
        self.windmill.teardown()
        super().closeEvent(event)
