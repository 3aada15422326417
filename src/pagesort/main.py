# -*- coding: utf-8 -*-
"""Application entry point."""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from pagesort.config import ConfigError, get_default_config, load_config
from pagesort.constants import APP_NAME
from pagesort.core.state import AppState
from pagesort.gui.main_window import MainWindow
from pagesort.models.list_state import ListKind
from pagesort.utils.logger import resolve_level, setup_session_logging


def global_exception_handler(exc_type, exc_value, exc_traceback):
    """Log uncaught errors before the default hook prints them."""
    error_msg = "".join(traceback.format_exception(exc_type, exc_value, exc_traceback))
    logging.getLogger().critical("Uncaught exception:\n%s", error_msg)
    sys.__excepthook__(exc_type, exc_value, exc_traceback)


def main() -> int:
    """Start the GUI application."""
    sys.excepthook = global_exception_handler
    try:
        settings = load_config()
        config_problem = None
    except ConfigError as exc:
        settings = get_default_config()
        config_problem = exc

    level = resolve_level(settings.get("logging", {}).get("level"))
    session_log_path = setup_session_logging(Path.cwd(), APP_NAME, level=level)
    logger = logging.getLogger(__name__)
    if config_problem is not None:
        logger.warning("Invalid settings, falling back to defaults: %s", config_problem)
    if session_log_path is not None:
        logger.info("Session log file: %s", session_log_path)

    app = QApplication(sys.argv)
    state = AppState(settings=settings)
    window = MainWindow(settings=settings, state=state)

    # Files given on the command line go to the tab that accepts them.
    added = {kind: panel.add_paths([a for a in sys.argv[1:] if kind.accepts(a)]) for kind, panel in window.panels.items()}
    if added[ListKind.IMAGE] and not added[ListKind.PDF]:
        window.tab_widget.setCurrentWidget(window.panels[ListKind.IMAGE])

    window.show()
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
