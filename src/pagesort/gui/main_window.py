# -*- coding: utf-8 -*-
"""Main window: one tab per working set."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from PyQt6.QtCore import QUrl
from PyQt6.QtGui import QDesktopServices
from PyQt6.QtWidgets import QMainWindow, QTabWidget, QWidget

from pagesort.constants import APP_NAME, APP_VERSION
from pagesort.core.state import AppState
from pagesort.gui.list_panel import ListPanel
from pagesort.models.list_state import ListKind

logger = logging.getLogger(__name__)

RunHandler = Callable[[ListKind, list[str]], None]

TAB_TITLES = {ListKind.PDF: "Merge PDFs", ListKind.IMAGE: "Images to PDF"}


class MainWindow(QMainWindow):
    """Hosts a ListPanel per ListKind; batch work is handed to `run_handler`."""

    def __init__(
        self,
        settings: dict[str, Any],
        state: AppState | None = None,
        run_handler: RunHandler | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.settings = settings
        self.state = state or AppState(settings=settings)
        self.run_handler = run_handler
        self.setWindowTitle(f"{APP_NAME} {APP_VERSION}")
        self.resize(900, 600)

        self.tab_widget = QTabWidget()
        self.panels: dict[ListKind, ListPanel] = {}
        for kind in ListKind:
            panel = ListPanel(kind, self.state.list_for(kind), settings=settings)
            panel.preview_requested.connect(self.open_external)
            panel.run_requested.connect(lambda files, k=kind: self._handle_run(k, files))
            self.panels[kind] = panel
            self.tab_widget.addTab(panel, TAB_TITLES[kind])
        self.setCentralWidget(self.tab_widget)

    def open_external(self, path: str) -> None:
        """Open a file in the OS default application."""
        logger.info("Opening %s in default application", path)
        if not QDesktopServices.openUrl(QUrl.fromLocalFile(path)):
            logger.error("No application could open %s", path)
            self.statusBar().showMessage(f"Could not open {path}", 5000)

    def _handle_run(self, kind: ListKind, files: list[str]) -> None:
        if self.run_handler is None:
            logger.info("No %s handler configured; %d file(s) ready", kind.value, len(files))
            self.statusBar().showMessage(f"{len(files)} file(s) ready for {TAB_TITLES[kind]}", 5000)
            return
        self.run_handler(kind, files)
