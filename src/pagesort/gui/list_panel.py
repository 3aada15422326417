# -*- coding: utf-8 -*-
"""List view plus the button row that issues commands to its engine."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QKeySequence, QShortcut
from PyQt6.QtWidgets import QFileDialog, QHBoxLayout, QLabel, QMessageBox, QPushButton, QVBoxLayout, QWidget

from pagesort.core.sortable_list import ReorderableSelectableList
from pagesort.gui.sortable_list_widget import SortableListWidget
from pagesort.models.list_state import ListKind

logger = logging.getLogger(__name__)


PANEL_TEXT = {
    ListKind.PDF: {"add": "Browse & Add PDFs", "run": "Merge PDFs", "filter": "PDF files (*.pdf)", "noun": "file"},
    ListKind.IMAGE: {
        "add": "Browse & Add Images",
        "run": "Convert to PDF",
        "filter": "Images (*.png *.jpg *.jpeg *.gif *.bmp)",
        "noun": "image",
    },
}


class ListPanel(QWidget):
    """Buttons around a SortableListWidget; everything goes through the engine's operations."""

    preview_requested = pyqtSignal(str)
    run_requested = pyqtSignal(list)

    def __init__(
        self,
        kind: ListKind,
        engine: ReorderableSelectableList,
        settings: dict[str, Any] | None = None,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.kind = kind
        self.engine = engine
        self.settings = settings or {}
        text = PANEL_TEXT[kind]

        self.list_widget = SortableListWidget(engine)
        self.list_widget.list_changed.connect(self._update_count)
        self.count_label = QLabel()

        self.add_button = QPushButton(text["add"])
        self.add_button.clicked.connect(self._browse)
        self.preview_button = QPushButton("Preview Selected")
        self.preview_button.clicked.connect(self.preview)
        self.remove_button = QPushButton("Remove Selected")
        self.remove_button.clicked.connect(self.engine.remove_checked)
        self.up_button = QPushButton("↑")
        self.up_button.clicked.connect(self.engine.move_up)
        self.down_button = QPushButton("↓")
        self.down_button.clicked.connect(self.engine.move_down)
        self.clear_button = QPushButton("Clear List")
        self.clear_button.clicked.connect(self.engine.clear)
        self.run_button = QPushButton(text["run"])
        self.run_button.clicked.connect(self.run)

        buttons = QHBoxLayout()
        for button in (
            self.add_button,
            self.preview_button,
            self.remove_button,
            self.up_button,
            self.down_button,
            self.clear_button,
        ):
            buttons.addWidget(button)
        buttons.addStretch(1)

        layout = QVBoxLayout(self)
        layout.addLayout(buttons)
        layout.addWidget(self.list_widget, 1)
        layout.addWidget(self.count_label)
        layout.addWidget(self.run_button)

        self._bind_hotkeys(self.settings.get("hotkeys", {}))
        self._update_count()

    def _bind_hotkeys(self, hotkeys: dict[str, str]) -> None:
        actions = {
            "move_up": self.engine.move_up,
            "move_down": self.engine.move_down,
            "remove": self.engine.remove_checked,
            "preview": self.preview,
            "clear": self.engine.clear,
        }
        for name, handler in actions.items():
            sequence = hotkeys.get(name)
            if sequence:
                QShortcut(QKeySequence(sequence), self).activated.connect(handler)

    def add_paths(self, paths: Iterable[str]) -> int:
        """Append the paths this panel's kind accepts; returns how many were added."""
        accepted: list[str] = []
        for path in paths:
            if self.kind.accepts(path):
                accepted.append(path)
            else:
                logger.warning("Skipping unsupported %s input: %s", self.kind.value, path)
        self.engine.append(accepted)
        return len(accepted)

    def preview(self) -> None:
        focus = self.engine.focus_index()
        if focus is None:
            self._inform("Preview", f"Please select a {PANEL_TEXT[self.kind]['noun']} from the list")
            return
        self.preview_requested.emit(str(self.engine.items[focus]))

    def run(self) -> None:
        if self.kind is ListKind.PDF and len(self.engine) < 2:
            self._inform("Merge", "Please add at least two PDF files")
            return
        if not len(self.engine):
            self._inform("Convert", "Please add at least one image file")
            return
        only_checked = False
        if self.engine.checked_positions() and self._scope_section().get("ask_scope", True):
            only_checked = self._ask_only_checked()
        files = [str(item) for item in self.engine.batch_items(only_checked)]
        logger.info("%s requested for %d file(s)", PANEL_TEXT[self.kind]["run"], len(files))
        self.run_requested.emit(files)

    def _scope_section(self) -> dict[str, Any]:
        return self.settings.get("merge" if self.kind is ListKind.PDF else "images", {})

    def _ask_only_checked(self) -> bool:
        answer = QMessageBox.question(
            self,
            "Scope",
            "Use only the checked files? (No = use all)",
        )
        return answer == QMessageBox.StandardButton.Yes

    def _inform(self, title: str, message: str) -> None:
        QMessageBox.information(self, title, message)

    def _browse(self) -> None:
        paths, _ = QFileDialog.getOpenFileNames(self, PANEL_TEXT[self.kind]["add"], "", PANEL_TEXT[self.kind]["filter"])
        if paths:
            self.add_paths(paths)

    def _update_count(self) -> None:
        self.count_label.setText(self.engine.summary())
