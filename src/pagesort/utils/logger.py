# -*- coding: utf-8 -*-
"""Level lookup and per-session root logging."""

from __future__ import annotations

import logging
import os
from datetime import datetime
from pathlib import Path

_FORMAT = "%(asctime)s [%(threadName)s] %(name)s - %(levelname)s - %(message)s"
_DATEFMT = "%Y-%m-%dT%H:%M:%S"


def resolve_level(name: str | None, default: int = logging.INFO) -> int:
    """Map a level name such as ``"debug"`` to its logging constant."""
    if not name:
        return default
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def setup_session_logging(base_dir: str | Path, app_name: str, level: int = logging.INFO) -> Path | None:
    """Configure root logging once: console plus a timestamped session log file."""
    root = logging.getLogger()
    if getattr(root, "_pagesort_logging_configured", False):
        return getattr(root, "_pagesort_session_log", None)

    root.setLevel(level)
    formatter = logging.Formatter(_FORMAT, datefmt=_DATEFMT)

    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)

    logs_dir = Path(base_dir) / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)
    safe_app_name = app_name.lower().replace(" ", "-")
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")

    session_log_path: Path | None = logs_dir / f"{safe_app_name}-{timestamp}.log"
    try:
        file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        root.info("Session log file established: %s", session_log_path)
        root.info("System info: OS=%s", os.name)
    except OSError as exc:
        root.error("Failed to establish session log file: %s", exc)
        session_log_path = None

    root._pagesort_logging_configured = True  # type: ignore[attr-defined]
    root._pagesort_session_log = session_log_path  # type: ignore[attr-defined]
    return session_log_path
