"""
Run with: python -m windmill
"""
from __future__ import annotations

import logging
import sys
from typing import Any

from PySide6.QtCore import QCommandLineOption, QCommandLineParser, QSettings
from PySide6.QtWidgets import QApplication

from windmill.app.application import create_app
from windmill.config import load_config
from windmill.logging_config import setup_logging
from windmill.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def parse_arguments(app: QApplication) -> dict[str, Any]:
    """Parse command-line options into a plain dict (missing options are None)."""
    parser = QCommandLineParser()
    parser.setApplicationDescription("Animated windmill demo")
    parser.addHelpOption()
    parser.addVersionOption()

    opt_color = QCommandLineOption(["c", "color"], "Fill color (#RRGGBB, #AARRGGBB or a name).", "color")
    opt_interval = QCommandLineOption(["i", "interval"], "Tick interval in milliseconds.", "ms")
    opt_level = QCommandLineOption("log-level", "Logging level (debug, info, warning, ...).", "level", "info")
    opt_log_file = QCommandLineOption("log-file", "Also write the log to this file.", "path")
    for option in (opt_color, opt_interval, opt_level, opt_log_file):
        parser.addOption(option)

    parser.process(app)

    def _value(option: QCommandLineOption) -> str | None:
        return parser.value(option) if parser.isSet(option) else None

    return {
        "color": _value(opt_color),
        "interval_ms": _value(opt_interval),
        "log_level": parser.value(opt_level),
        "log_file": _value(opt_log_file),
    }


def main() -> int:
    """Main entry point for the application."""
    # 1. Create the Qt Application
    app = create_app()

    # 2. Setup Logging (Console + Optional File)
    args = parse_arguments(app)
    setup_logging(level=args["log_level"], log_file=args["log_file"])

    # 3. Resolve configuration (command line > settings file > defaults)
    config = load_config(
        QSettings(),
        overrides={"color": args["color"], "interval_ms": args["interval_ms"]},
    )
    logger.info(f"Fill color {config.fill_color.to_hex()}, tick every {config.interval_ms} ms")

    # 4. Show the window and start rotating
    win = MainWindow(config)
    win.show()
    win.windmill.start_rotate()

    # 5. Start Event Loop
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
