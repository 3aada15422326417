# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


class ChangeRecorder:
    """Counts change notifications and remembers the state seen at each one."""

    def __init__(self) -> None:
        self.calls = 0
        self.snapshots: list = []
        self.engine = None

    def __call__(self) -> None:
        self.calls += 1
        if self.engine is not None:
            self.snapshots.append(self.engine.snapshot())


@pytest.fixture
def four_items() -> list[str]:
    return ["A.pdf", "B.pdf", "C.pdf", "D.pdf"]


@pytest.fixture
def recorder() -> ChangeRecorder:
    return ChangeRecorder()


@pytest.fixture
def engine(four_items: list[str], recorder: ChangeRecorder):
    from pagesort.core.sortable_list import ReorderableSelectableList

    sortable = ReorderableSelectableList(four_items, on_change=recorder)
    recorder.engine = sortable
    return sortable


@pytest.fixture
def uniform_40():
    return lambda _pos: 40.0


@pytest.fixture
def default_config() -> dict:
    from pagesort.config import get_default_config

    return get_default_config()


@pytest.fixture(scope="session")
def qt_app():
    pytest.importorskip("PyQt6")
    os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
