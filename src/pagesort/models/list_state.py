# -*- coding: utf-8 -*-
"""Value types shared by the list engine and its hosts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from pagesort.utils.file_utils import is_image, is_pdf


class ListKind(str, Enum):
    """Kind of working set a list holds."""

    PDF = "pdf"
    IMAGE = "image"

    def accepts(self, path: str | Path) -> bool:
        return is_pdf(path) if self is ListKind.PDF else is_image(path)


@dataclass
class DragState:
    """In-progress drag: where it started, where the row is now, and the unresolved offset."""

    origin: int
    current: int
    accumulated: float = 0.0


@dataclass(frozen=True)
class ListSnapshot:
    """Immutable copy of a list's observable state."""

    items: tuple[Any, ...]
    checked: tuple[int, ...]
    active: int | None
    dragging: int | None = None
