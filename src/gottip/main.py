"""
Application Initialization
==========================
This module constructs the Model-View-Controller pieces and starts the Qt
Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Configures logging and the QApplication.
2. Instantiates the state store (Controller).
3. Instantiates the Main Window (View), passing the store in.
"""
import logging
import os
import sys
from typing import Optional

from PySide6.QtCore import QCoreApplication
from PySide6.QtWidgets import QApplication

from gottip.config import APP_ID, ORG_ID, VISIBLE_APP_NAME
from gottip.controller.store import TipStore
from gottip.logging_config import setup_logging
from gottip.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app


def main(log_level: int = logging.INFO, log_file: Optional[str] = None) -> int:
    """
    Build and run the app.

    Args:
        log_level: Level for the gottip logger; DEBUG also logs rejected edits.
        log_file: Optional path to save logs to a file.
    """
    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=log_level, log_file=log_file)

    # 2. Create the Qt Application
    app = create_app()

    # 3. Initialize the state store
    store = TipStore()

    # 4. Initialize the Main Window, passing the store
    window = MainWindow(store)
    window.show()
    logger.info("%s started.", VISIBLE_APP_NAME)

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
