# -*- coding: utf-8 -*-
"""Row-per-item view that drives a ReorderableSelectableList."""

from __future__ import annotations

from pathlib import Path

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QCheckBox,
    QFrame,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from pagesort.core.sortable_list import ReorderableSelectableList


ROW_BG = {
    "dragging": "rgba(51, 153, 255, 34)",
    "active": "rgba(51, 153, 255, 68)",
    "idle": "transparent",
}


class _DragHandle(QLabel):
    """Grip glyph; press, move and release on it become a drag gesture."""

    def __init__(self, row: "_ListRow") -> None:
        super().__init__("≡")
        self.row = row
        self._last_y: float | None = None
        self.setCursor(Qt.CursorShape.OpenHandCursor)
        self.setFixedWidth(18)

    def mousePressEvent(self, event) -> None:
        if event.button() == Qt.MouseButton.LeftButton:
            self._last_y = event.globalPosition().y()
            self.row.owner.engine.begin_drag(self.row.index)
        event.accept()

    def mouseMoveEvent(self, event) -> None:
        if self._last_y is None:
            return
        y = event.globalPosition().y()
        delta, self._last_y = y - self._last_y, y
        self.row.owner.engine.drag_by(delta, self.row.owner.row_height)
        event.accept()

    def mouseReleaseEvent(self, event) -> None:
        self._last_y = None
        self.row.owner.engine.end_drag()
        event.accept()


class _ListRow(QFrame):
    """One list row: handle, checkbox, file name and delete button."""

    def __init__(self, owner: "SortableListWidget", index: int) -> None:
        super().__init__(owner.rows_host)
        self.owner = owner
        self.index = index
        self.setObjectName("sortableRow")

        self.handle = _DragHandle(self)
        self.check = QCheckBox()
        self.check.toggled.connect(lambda value: self.owner.engine.set_checked(self.index, value))
        self.label = QLabel()
        self.delete_button = QPushButton("✕")
        self.delete_button.setFixedWidth(26)
        self.delete_button.setToolTip("Remove this file from the list.")
        self.delete_button.clicked.connect(lambda: self.owner.engine.remove_at(self.index))

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 2, 4, 2)
        layout.setSpacing(6)
        layout.addWidget(self.handle)
        layout.addWidget(self.check)
        layout.addWidget(self.label, 1)
        layout.addWidget(self.delete_button)

    def mousePressEvent(self, event) -> None:
        engine = self.owner.engine
        if event.modifiers() & (Qt.KeyboardModifier.ControlModifier | Qt.KeyboardModifier.MetaModifier):
            engine.toggle_checked(self.index)
        else:
            engine.set_active(self.index)
        event.accept()

    def update_from(self, name: str, checked: bool, style: str) -> None:
        self.label.setText(name)
        self.label.setToolTip(name)
        self.check.blockSignals(True)
        self.check.setChecked(checked)
        self.check.blockSignals(False)
        self.setStyleSheet(f'QFrame[objectName="sortableRow"] {{ background: {ROW_BG[style]}; }}')


class SortableListWidget(QWidget):
    """Scrollable list view. Reads engine state only to render and calls its operations on input."""

    list_changed = pyqtSignal()

    def __init__(self, engine: ReorderableSelectableList, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.engine = engine
        self._rows: list[_ListRow] = []

        self.rows_host = QWidget()
        self.rows_layout = QVBoxLayout(self.rows_host)
        self.rows_layout.setContentsMargins(0, 0, 0, 0)
        self.rows_layout.setSpacing(1)
        self.rows_layout.addStretch(1)

        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setFrameShape(QFrame.Shape.NoFrame)
        self.scroll.setWidget(self.rows_host)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.addWidget(self.scroll)

        engine.changed = self._on_engine_changed
        engine.drag_changed = lambda _pos: self._restyle()
        self.refresh()

    @property
    def rows(self) -> list[_ListRow]:
        return list(self._rows)

    def row_height(self, pos: int) -> float:
        if 0 <= pos < len(self._rows):
            return float(self._rows[pos].height() or self._rows[pos].sizeHint().height())
        return 0.0

    def refresh(self) -> None:
        """Bring rows in line with the engine without recreating the ones that still exist.

        Rows are reused so a handle keeps its mouse grab while its item moves.
        """
        items = self.engine.items
        while len(self._rows) > len(items):
            row = self._rows.pop()
            self.rows_layout.removeWidget(row)
            row.deleteLater()
        while len(self._rows) < len(items):
            row = _ListRow(self, len(self._rows))
            self.rows_layout.insertWidget(len(self._rows), row)
            self._rows.append(row)
        self._restyle()

    def _restyle(self) -> None:
        items = self.engine.items
        dragging = self.engine.dragging_position
        active = self.engine.active
        for index, row in enumerate(self._rows):
            if dragging is not None and index == dragging:
                style = "dragging"
            elif index == active:
                style = "active"
            else:
                style = "idle"
            row.update_from(Path(str(items[index])).name, self.engine.is_checked(index), style)

    def _on_engine_changed(self) -> None:
        self.refresh()
        self.list_changed.emit()
