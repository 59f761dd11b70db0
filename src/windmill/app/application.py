"""
Qt application bootstrap for the windmill demo.

The organization/application ids decide where QSettings keeps the INI file
that `windmill.config.load_config` reads (`windmill/color`,
`windmill/interval_ms`).
"""
from __future__ import annotations

import sys
from importlib.metadata import PackageNotFoundError, version

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

ORG_ID = "windmill"
APP_ID = "windmill-demo"
DIST_NAME = "windmill-view"

VISIBLE_APP_NAME = "Windmill"


def app_version() -> str:
    try:
        return version(DIST_NAME)
    except PackageNotFoundError:
        # running from a source checkout via run.py
        return "0.0.0+dev"


def create_app(argv: list[str] | None = None) -> QApplication:
    """
    Return the process-wide QApplication, creating it on first use.

    Settings ids are applied before the instance exists so that a QSettings()
    built afterwards resolves to the windmill INI file.
    """
    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QCoreApplication.setApplicationVersion(app_version())
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance()
    if app is None:
        app = QApplication(argv if argv is not None else sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app
