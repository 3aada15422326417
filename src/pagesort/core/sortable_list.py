# -*- coding: utf-8 -*-
"""Ordered working set with a checked subset, an active row and drag reordering.

Positions are zero-based indices into the current order. Every structural
edit rewrites the checked set, the active row and the drag row in the same
step, so each of them stays attached to its item rather than its old index.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Iterator
from dataclasses import replace
from typing import Any

from pagesort.models.list_state import DragState, ListSnapshot

logger = logging.getLogger(__name__)


ChangeCallback = Callable[[], None]
DragCallback = Callable[[int | None], None]
HeightLookup = Callable[[int], float]


class NotDragging(RuntimeError):
    """Raised by a strict list when a drag step arrives without a drag in progress."""


def _row_extent(height: float) -> float:
    """Row height for the swap threshold; negative or NaN extents count as a collapsed row."""
    value = float(height)
    return 0.0 if math.isnan(value) or value < 0 else value


class ReorderableSelectableList:
    """Owns the item order, checked set, active row and drag state of one list view."""

    def __init__(
        self,
        items: Iterable[Any] | None = None,
        on_change: ChangeCallback | None = None,
        strict_drag: bool = False,
    ) -> None:
        self._items: list[Any] = list(items or [])
        self._checked: set[int] = set()
        self._active: int | None = None
        self._drag: DragState | None = None
        self.strict_drag = strict_drag

        self.changed: ChangeCallback | None = on_change
        self.drag_changed: DragCallback | None = None

    # ---- read access ----

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(tuple(self._items))

    @property
    def items(self) -> tuple[Any, ...]:
        return tuple(self._items)

    @property
    def checked(self) -> dict[int, bool]:
        return {pos: True for pos in sorted(self._checked)}

    @property
    def active(self) -> int | None:
        return self._active

    @property
    def is_dragging(self) -> bool:
        return self._drag is not None

    @property
    def drag_state(self) -> DragState | None:
        return replace(self._drag) if self._drag is not None else None

    @property
    def dragging_position(self) -> int | None:
        """Row the host should paint as being dragged."""
        return self._drag.current if self._drag is not None else None

    def checked_positions(self) -> tuple[int, ...]:
        return tuple(sorted(self._checked))

    def is_checked(self, pos: int) -> bool:
        return pos in self._checked

    def checked_items(self) -> list[Any]:
        return [self._items[pos] for pos in sorted(self._checked)]

    def batch_items(self, only_checked: bool) -> list[Any]:
        """Items a batch action should use: the checked ones if asked and any exist, else all."""
        if only_checked and self._checked:
            return self.checked_items()
        return list(self._items)

    def focus_index(self) -> int | None:
        """Target row for preview and up/down: the active row, else the last checked row."""
        if self._active is not None:
            return self._active
        if self._checked:
            return max(self._checked)
        return None

    def summary(self) -> str:
        count = len(self._items)
        return f"{count} file{'' if count == 1 else 's'} selected"

    def snapshot(self) -> ListSnapshot:
        return ListSnapshot(
            items=tuple(self._items),
            checked=self.checked_positions(),
            active=self._active,
            dragging=self.dragging_position,
        )

    # ---- selection ----

    def toggle_checked(self, pos: int) -> None:
        if not self._in_range(pos):
            logger.debug("toggle_checked ignored, position %s out of range", pos)
            return
        self._checked ^= {pos}
        self._notify()

    def set_checked(self, pos: int, value: bool) -> None:
        if not self._in_range(pos) or (pos in self._checked) == bool(value):
            return
        if value:
            self._checked.add(pos)
        else:
            self._checked.discard(pos)
        self._notify()

    def set_active(self, pos: int | None) -> None:
        new_active = pos if pos is not None and self._in_range(pos) else None
        if new_active == self._active:
            return
        self._active = new_active
        self._notify()

    # ---- structural edits ----

    def append(self, new_items: Iterable[Any]) -> None:
        self._interrupt_drag()
        added = list(new_items)
        if not added:
            return
        self._items.extend(added)
        logger.debug("Appended %d item(s), list now holds %d", len(added), len(self._items))
        self._notify()

    def clear(self) -> None:
        self._interrupt_drag()
        if not self._items and not self._checked and self._active is None:
            return
        self._items.clear()
        self._checked.clear()
        self._active = None
        self._notify()

    def remove_checked(self) -> list[Any]:
        """Drop every checked item; the checked set and active row are cleared afterwards."""
        self._interrupt_drag()
        if not self._checked:
            return []
        removed: list[Any] = []
        for pos in sorted(self._checked, reverse=True):
            removed.append(self._items.pop(pos))
        removed.reverse()
        self._checked.clear()
        self._active = None
        logger.debug("Removed %d checked item(s)", len(removed))
        self._notify()
        return removed

    def remove_at(self, pos: int) -> Any | None:
        """Drop one item; survivors keep their checked flags and the active row follows its item."""
        self._interrupt_drag()
        if not self._in_range(pos):
            return None
        removed = self._items.pop(pos)
        self._checked = {p if p < pos else p - 1 for p in self._checked if p != pos}
        if self._active == pos:
            self._active = None
        elif self._active is not None and self._active > pos:
            self._active -= 1
        self._notify()
        return removed

    def move_by(self, pos: int, direction: int) -> int | None:
        """Swap the item at `pos` with its neighbour in `direction` (-1 or +1).

        The moved item becomes active. Returns its new position, or None when the
        move was a no-op (out of range or already at that end of the list).
        """
        if direction not in (-1, 1):
            raise ValueError(f"direction must be -1 or +1, got {direction!r}")
        target = pos + direction
        if not self._in_range(pos) or not self._in_range(target):
            logger.debug("move_by(%s, %+d) ignored at list boundary", pos, direction)
            return None
        self._transpose(pos, target)
        self._active = target
        self._notify()
        if self._drag is not None:
            self._notify_drag()
        return target

    def move(self, from_pos: int, to_pos: int) -> int | None:
        """Move one item to `to_pos`, shifting the rows in between by one."""
        if from_pos == to_pos or not self._in_range(from_pos) or not self._in_range(to_pos):
            return None
        step = 1 if to_pos > from_pos else -1
        for pos in range(from_pos, to_pos, step):
            self._transpose(pos, pos + step)
        self._active = to_pos
        self._notify()
        if self._drag is not None:
            self._notify_drag()
        return to_pos

    def move_up(self) -> int | None:
        focus = self.focus_index()
        return self.move_by(focus, -1) if focus is not None else None

    def move_down(self) -> int | None:
        focus = self.focus_index()
        return self.move_by(focus, 1) if focus is not None else None

    # ---- drag gesture ----

    def begin_drag(self, origin_pos: int) -> None:
        if self._drag is not None:
            logger.debug("begin_drag(%s) ignored, drag from %s in progress", origin_pos, self._drag.origin)
            return
        if not self._in_range(origin_pos):
            return
        self._drag = DragState(origin=origin_pos, current=origin_pos)
        self._notify_drag()

    def drag_by(self, delta_y: float, neighbor_height: HeightLookup) -> int:
        """Feed pointer movement into the drag; returns how many rows the dragged item moved (signed).

        A swap happens once the accumulated offset reaches half the height of the
        neighbouring row; that row's full height is then consumed and whatever
        remains carries over to the next call.
        """
        drag = self._drag
        if drag is None:
            if self.strict_drag:
                raise NotDragging("drag_by called without begin_drag")
            logger.debug("drag_by ignored, no drag in progress")
            return 0

        if not math.isfinite(delta_y):
            logger.debug("drag_by ignored non-finite delta %r", delta_y)
            return 0

        start = drag.current
        drag.accumulated += delta_y
        while drag.accumulated > 0 and drag.current < len(self._items) - 1:
            height = _row_extent(neighbor_height(drag.current + 1))
            if drag.accumulated < height / 2:
                break
            drag.accumulated -= height
            self._transpose(drag.current, drag.current + 1)
        while drag.accumulated < 0 and drag.current > 0:
            height = _row_extent(neighbor_height(drag.current - 1))
            if -drag.accumulated < height / 2:
                break
            drag.accumulated += height
            self._transpose(drag.current, drag.current - 1)

        # a swap down and straight back up leaves the list as it was
        moved = drag.current - start
        if moved:
            self._active = drag.current
            logger.debug("Drag from %d moved row by %+d, now at %d", drag.origin, moved, drag.current)
            self._notify()
            self._notify_drag()
        return moved

    def end_drag(self) -> None:
        if self._drag is None:
            return
        self._drag = None
        self._notify_drag()

    # ---- internals ----

    def _in_range(self, pos: int) -> bool:
        return 0 <= pos < len(self._items)

    def _transpose(self, a: int, b: int) -> None:
        """Swap two rows and carry their checked flags, the active row and the drag row along."""
        items = self._items
        items[a], items[b] = items[b], items[a]

        a_checked = a in self._checked
        b_checked = b in self._checked
        if a_checked != b_checked:
            self._checked ^= {a, b}

        if self._active == a:
            self._active = b
        elif self._active == b:
            self._active = a

        if self._drag is not None:
            if self._drag.current == a:
                self._drag.current = b
            elif self._drag.current == b:
                self._drag.current = a

    def _interrupt_drag(self) -> None:
        if self._drag is not None:
            logger.debug("Structural edit during drag from %d, ending drag", self._drag.origin)
            self.end_drag()

    def _notify(self) -> None:
        if self.changed is not None:
            self.changed()

    def _notify_drag(self) -> None:
        if self.drag_changed is not None:
            self.drag_changed(self.dragging_position)
