# -*- coding: utf-8 -*-
"""Tests for the drag accumulator and its threshold swaps."""

from __future__ import annotations

import pytest

from pagesort.core.sortable_list import NotDragging, ReorderableSelectableList


@pytest.fixture
def five() -> ReorderableSelectableList:
    return ReorderableSelectableList(["p0", "p1", "p2", "p3", "p4"])


def test_begin_drag_records_origin(five) -> None:
    five.begin_drag(2)
    state = five.drag_state
    assert state is not None
    assert (state.origin, state.current, state.accumulated) == (2, 2, 0.0)
    assert five.dragging_position == 2


def test_begin_drag_while_dragging_is_ignored(five) -> None:
    five.begin_drag(1)
    five.begin_drag(3)
    assert five.drag_state.origin == 1


def test_begin_drag_out_of_range_is_ignored(five) -> None:
    five.begin_drag(5)
    assert five.is_dragging is False


def test_begin_and_end_drag_do_not_notify_change(five) -> None:
    calls: list[None] = []
    five.changed = lambda: calls.append(None)
    five.begin_drag(0)
    five.end_drag()
    assert calls == []


def test_sub_threshold_drag_does_not_swap(five, uniform_40) -> None:
    calls: list[None] = []
    five.changed = lambda: calls.append(None)
    five.begin_drag(2)
    assert five.drag_by(19, uniform_40) == 0
    assert five.items == ("p0", "p1", "p2", "p3", "p4")
    assert five.drag_state.accumulated == 19
    assert calls == []


def test_crossing_half_row_commits_one_swap_and_keeps_remainder(five, uniform_40) -> None:
    five.begin_drag(2)
    five.drag_by(19, uniform_40)
    assert five.drag_by(2, uniform_40) == 1
    assert five.items == ("p0", "p1", "p3", "p2", "p4")
    assert five.drag_state.current == 3
    assert five.drag_state.accumulated == -19


def test_remainder_is_carried_into_next_step(five, uniform_40) -> None:
    five.begin_drag(2)
    five.drag_by(21, uniform_40)
    # -19 carried; another +38 reaches 19, still short of the next midpoint
    assert five.drag_by(38, uniform_40) == 0
    assert five.drag_by(2, uniform_40) == 1
    assert five.items == ("p0", "p1", "p3", "p4", "p2")


def test_large_delta_commits_several_swaps_with_one_notification(five, uniform_40) -> None:
    calls: list[None] = []
    five.changed = lambda: calls.append(None)
    five.begin_drag(0)
    assert five.drag_by(110, uniform_40) == 3
    assert five.items == ("p1", "p2", "p3", "p0", "p4")
    assert five.drag_state.accumulated == -10
    assert len(calls) == 1


def test_drag_stops_at_last_row(five, uniform_40) -> None:
    five.begin_drag(3)
    five.drag_by(500, uniform_40)
    assert five.items[-1] == "p3"
    assert five.drag_state.current == 4


def test_upward_drag_uses_row_above(five) -> None:
    heights = {0: 10.0, 1: 60.0, 2: 40.0, 3: 40.0, 4: 40.0}
    five.begin_drag(2)
    assert five.drag_by(-29, heights.__getitem__) == 0
    assert five.drag_by(-1, heights.__getitem__) == -1
    assert five.items == ("p0", "p2", "p1", "p3", "p4")
    assert five.drag_state.accumulated == 30
    # row above is 10px now
    assert five.drag_by(-34, heights.__getitem__) == 0
    assert five.drag_by(-1, heights.__getitem__) == -1
    assert five.items == ("p2", "p0", "p1", "p3", "p4")


def test_drag_makes_dragged_item_active(five, uniform_40) -> None:
    five.set_active(4)
    five.begin_drag(1)
    five.drag_by(25, uniform_40)
    assert five.active == 2
    assert five.items[2] == "p1"


def test_drag_carries_checked_flag(five, uniform_40) -> None:
    five.toggle_checked(0)
    five.toggle_checked(3)
    five.begin_drag(0)
    five.drag_by(130, uniform_40)
    position = five.items.index("p0")
    assert five.is_checked(position)
    assert five.checked_items() == ["p3", "p0"]


def test_end_drag_clears_state_and_is_idempotent(five, uniform_40) -> None:
    five.begin_drag(1)
    five.drag_by(30, uniform_40)
    five.end_drag()
    once = five.snapshot()
    five.end_drag()
    assert five.snapshot() == once
    assert five.drag_state is None
    assert five.dragging_position is None


def test_end_drag_keeps_committed_swaps(five, uniform_40) -> None:
    five.begin_drag(1)
    five.drag_by(65, uniform_40)
    five.end_drag()
    assert five.items == ("p0", "p2", "p3", "p1", "p4")
    assert five.active == 3


def test_drag_matches_equivalent_move_by_sequence(uniform_40) -> None:
    dragged = ReorderableSelectableList(["a", "b", "c", "d", "e", "f"])
    dragged.toggle_checked(4)
    dragged.begin_drag(4)
    for delta in (-15, -10, -30, 5, -60, 12):
        dragged.drag_by(delta, uniform_40)
    net = dragged.drag_state.current - dragged.drag_state.origin
    dragged.end_drag()

    replayed = ReorderableSelectableList(["a", "b", "c", "d", "e", "f"])
    replayed.toggle_checked(4)
    pos = 4
    step = 1 if net > 0 else -1
    for _ in range(abs(net)):
        pos = replayed.move_by(pos, step)

    assert dragged.snapshot() == replayed.snapshot()


def test_drag_by_without_drag_is_noop_by_default(five, uniform_40) -> None:
    before = five.snapshot()
    assert five.drag_by(100, uniform_40) == 0
    assert five.snapshot() == before


def test_strict_list_raises_not_dragging(uniform_40) -> None:
    strict = ReorderableSelectableList(["a", "b"], strict_drag=True)
    with pytest.raises(NotDragging):
        strict.drag_by(30, uniform_40)
    strict.end_drag()
    assert strict.items == ("a", "b")


def test_structural_edit_ends_drag(five, uniform_40) -> None:
    five.begin_drag(0)
    five.drag_by(25, uniform_40)
    five.append(["p5"])
    assert five.is_dragging is False
    assert five.drag_by(100, uniform_40) == 0
    assert five.items == ("p1", "p0", "p2", "p3", "p4", "p5")


@pytest.mark.parametrize("operation", ["clear", "remove_checked"])
def test_clear_and_remove_end_drag(five, operation: str) -> None:
    five.toggle_checked(4)
    five.begin_drag(1)
    getattr(five, operation)()
    assert five.is_dragging is False


def test_remove_at_during_drag_ends_drag(five) -> None:
    five.begin_drag(4)
    five.remove_at(4)
    assert five.is_dragging is False
    assert len(five) == 4


def test_move_by_during_drag_keeps_drag_row_on_its_item(five) -> None:
    five.begin_drag(2)
    five.move_by(1, 1)
    assert five.dragging_position == 1
    assert five.items[1] == "p2"


def test_drag_changed_reports_row(five, uniform_40) -> None:
    seen: list[int | None] = []
    five.drag_changed = seen.append
    five.begin_drag(0)
    five.drag_by(45, uniform_40)
    five.end_drag()
    assert seen == [0, 1, None]


def test_negative_height_counts_as_zero(five) -> None:
    five.begin_drag(0)
    assert five.drag_by(1, lambda _pos: -10.0) == 4
    assert five.items[-1] == "p0"


def test_exact_midpoint_swaps_down_and_back_up(five, uniform_40) -> None:
    calls: list[None] = []
    five.changed = lambda: calls.append(None)
    five.begin_drag(2)
    assert five.drag_by(20, uniform_40) == 0
    assert five.items == ("p0", "p1", "p2", "p3", "p4")
    assert five.drag_state.current == 2
    assert five.drag_state.accumulated == 0
    assert five.active is None
    assert calls == []


def test_overshoot_in_one_step_settles_back(five, uniform_40) -> None:
    five.begin_drag(0)
    assert five.drag_by(100, uniform_40) == 2
    assert five.items == ("p1", "p2", "p0", "p3", "p4")
    assert five.drag_state.accumulated == 20


@pytest.mark.parametrize("delta", [float("nan"), float("inf"), float("-inf")])
def test_non_finite_delta_is_ignored(five, uniform_40, delta: float) -> None:
    five.begin_drag(1)
    five.drag_by(10, uniform_40)
    assert five.drag_by(delta, uniform_40) == 0
    assert five.drag_state.accumulated == 10
    assert five.drag_by(15, uniform_40) == 1
    assert five.items == ("p0", "p2", "p1", "p3", "p4")


def test_nan_height_counts_as_zero(five) -> None:
    five.begin_drag(3)
    assert five.drag_by(1, lambda _pos: float("nan")) == 1
    assert five.items[-1] == "p3"
