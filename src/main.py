#!/usr/bin/env python3
"""
Grounding Simulator - Main Application Entry Point

An engineering tool for estimating the grounding resistance of antenna
installations built from driven rods and radial conductors.
"""

import sys
import logging
from PyQt6.QtWidgets import QApplication

from utils.constants import APP_NAME, APP_VERSION, APP_ORGANIZATION, LOG_FILE_NAME, LOG_FORMAT

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format=LOG_FORMAT,
    handlers=[
        logging.FileHandler(LOG_FILE_NAME),
        logging.StreamHandler(sys.stdout)
    ]
)

logger = logging.getLogger(__name__)


def main():
    """Main application entry point."""
    try:
        app = QApplication(sys.argv)
        app.setApplicationName(APP_NAME)
        app.setApplicationVersion(APP_VERSION)
        app.setOrganizationName(APP_ORGANIZATION)

        # Import main window (delayed import for faster startup)
        from gui.main_window import MainWindow

        window = MainWindow()
        window.show()

        logger.info(f"{APP_NAME} application started successfully")

        return app.exec()

    except Exception as e:
        logger.error(f"Failed to start application: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
