"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from kingside.ui.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

_LOGGER = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    """Send log records to stderr at *level* (a logging level name)."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        _LOGGER.warning("Unknown log level %r, using WARNING", level)
        numeric = logging.WARNING
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("kingside").setLevel(numeric)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from kingside.ui.styles.theme import APP_STYLE

    app.setApplicationName("Kingside")
    app.setStyle("Fusion")
    app.setStyleSheet(APP_STYLE)


def run_application(
    argv: list[str] | None = None,
    settings: AppSettings | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from kingside.ui.main_window import MainWindow

    settings = settings if settings is not None else AppSettings()
    configure_logging(settings.log_level)

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()

    return app.exec()
