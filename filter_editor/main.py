"""
CSS Filter Editor — Main Entry Point

Run this to start the GUI application. An optional first argument is used
as the initial filter value, e.g. "blur(2px) sepia(40%)".
"""

import logging
import os
import sys

import PySide6
from PySide6.QtWidgets import QApplication

from .ui.main_window import MainWindow


logger = logging.getLogger(__name__)


def main():
    """Launch the application."""
    logging.basicConfig(
        level=os.environ.get("FILTER_EDITOR_LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("PySide6 version: %s", PySide6.__version__)

    # Create Qt application
    app = QApplication(sys.argv)
    args = app.arguments()[1:]

    # Create and show main window
    window = MainWindow(initial_value=args[0] if args else None)
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
