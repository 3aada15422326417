# -*- coding: utf-8 -*-
"""Application state container."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from pagesort.core.sortable_list import ReorderableSelectableList
from pagesort.models.list_state import ListKind


@dataclass
class AppState:
    """One list engine per working set; views receive their engine from here."""

    settings: dict[str, Any] = field(default_factory=dict)
    lists: dict[ListKind, ReorderableSelectableList] = field(default_factory=dict)

    def __post_init__(self) -> None:
        strict = bool(self.settings.get("list", {}).get("strict_drag", False))
        for kind in ListKind:
            self.lists.setdefault(kind, ReorderableSelectableList(strict_drag=strict))

    def list_for(self, kind: ListKind) -> ReorderableSelectableList:
        return self.lists[kind]
