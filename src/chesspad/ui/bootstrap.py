"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)

LOG_LEVEL_ENV = "CHESSPAD_LOG_LEVEL"


def configure_logging(level: str | int | None = None) -> None:
    """Route library loggers to stderr; *level* falls back to the environment."""
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    if isinstance(level, str):
        name = level.strip().upper()
        resolved = logging.getLevelName(name)
        if not isinstance(resolved, int):
            resolved = logging.WARNING
        level = resolved
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-7s %(name)s: %(message)s",
    )


def _configure_application(app: QApplication) -> None:
    """Apply app-wide identity and widget style."""
    from chesspad.ui.styles.theme import app_style

    app.setOrganizationName("chesspad")
    app.setApplicationName("chesspad")
    app.setStyle("Fusion")
    app.setStyleSheet(app_style(False))


def run_application(argv: list[str] | None = None) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from chesspad.ui.main_window import MainWindow

    configure_logging()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow()
    window.show()
    _LOGGER.debug("Main window shown")

    return app.exec()
