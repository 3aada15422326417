# -*- coding: utf-8 -*-
"""Replay recorded list sessions against a fresh engine."""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from pathlib import Path
from typing import Any

from pagesort.core.sortable_list import HeightLookup, ReorderableSelectableList
from pagesort.utils.file_utils import read_json_file

logger = logging.getLogger(__name__)


class SessionError(ValueError):
    """Raised when a session file cannot be replayed."""


# operation name -> kinds of the arguments it takes
OPERATIONS: dict[str, tuple[str, ...]] = {
    "append": ("items",),
    "clear": (),
    "toggle_checked": ("position",),
    "set_checked": ("position", "flag"),
    "set_active": ("optional_position",),
    "remove_checked": (),
    "remove_at": ("position",),
    "move_by": ("position", "direction"),
    "move": ("position", "position"),
    "move_up": (),
    "move_down": (),
    "begin_drag": ("position",),
    "drag_by": ("number",),
    "end_drag": (),
}


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return (_is_int(value) or isinstance(value, float)) and math.isfinite(value)


ARGUMENT_CHECKS: dict[str, tuple[Callable[[Any], bool], str]] = {
    "items": (lambda value: isinstance(value, list), "a list of items"),
    "position": (_is_int, "an integer position"),
    "optional_position": (lambda value: value is None or _is_int(value), "an integer position or null"),
    "flag": (lambda value: isinstance(value, bool), "true or false"),
    "direction": (lambda value: _is_int(value) and value in (-1, 1), "-1 or 1"),
    "number": (_is_number, "a finite number"),
}


def load_session(path: str | Path) -> dict[str, Any]:
    """Read a session JSON file and check its shape."""
    try:
        session = read_json_file(path)
    except ValueError as exc:
        raise SessionError(f"cannot read session: {exc}") from exc
    if not isinstance(session.get("items", []), list):
        raise SessionError("'items' must be a list")
    if not isinstance(session.get("operations", []), list):
        raise SessionError("'operations' must be a list")
    return session


def _height_lookup(session: dict[str, Any], default_row_height: float) -> HeightLookup:
    heights = session.get("row_heights")
    fallback = session.get("row_height", default_row_height)
    if not _is_number(fallback) or fallback < 0:
        raise SessionError("'row_height' must be a non-negative number")
    fallback = float(fallback)
    if heights is not None and (not isinstance(heights, list) or not all(_is_number(h) for h in heights)):
        raise SessionError("'row_heights' must be a list of numbers")
    if isinstance(heights, list) and heights:
        return lambda pos: float(heights[pos]) if 0 <= pos < len(heights) else fallback
    return lambda _pos: fallback


def _split_operation(raw: Any, index: int) -> tuple[str, list[Any]]:
    if isinstance(raw, str):
        name, args = raw, []
    elif isinstance(raw, list) and raw and isinstance(raw[0], str):
        name, args = raw[0], list(raw[1:])
    else:
        raise SessionError(f"operation #{index} must be a name or [name, args...]")
    if name not in OPERATIONS:
        raise SessionError(f"operation #{index}: unknown operation {name!r}")
    kinds = OPERATIONS[name]
    if len(args) != len(kinds):
        raise SessionError(f"operation #{index}: {name} takes {len(kinds)} argument(s), got {len(args)}")
    for position, (kind, value) in enumerate(zip(kinds, args), start=1):
        check, expected = ARGUMENT_CHECKS[kind]
        if not check(value):
            raise SessionError(f"operation #{index}: {name} argument {position} must be {expected}, got {value!r}")
    return name, args


def replay_session(
    session: dict[str, Any],
    default_row_height: float,
    strict_drag: bool = False,
) -> ReorderableSelectableList:
    """Apply every recorded operation in order and return the resulting list."""
    engine = ReorderableSelectableList(session.get("items", []), strict_drag=strict_drag)
    heights = _height_lookup(session, default_row_height)
    for index, raw in enumerate(session.get("operations", [])):
        name, args = _split_operation(raw, index)
        if name == "drag_by":
            engine.drag_by(float(args[0]), heights)
        else:
            getattr(engine, name)(*args)
        logger.debug("Replayed #%d %s%s", index, name, tuple(args))
    return engine
