from PySide6.QtWidgets import QApplication
from PySide6.QtCore import QCoreApplication

import os
import sys

ORG_ID = "ioscircles"
APP_ID = "ios-scale"

VISIBLE_APP_NAME = "IOS Scale"


def create_app(argv: list[str] | None = None) -> QApplication:
    """Create and configure the QApplication instance (reused if one exists)."""
    existing = QApplication.instance()
    if existing is not None:
        return existing

    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication(sys.argv if argv is None else argv)
    app.setApplicationDisplayName(QCoreApplication.translate("App", VISIBLE_APP_NAME))
    return app
