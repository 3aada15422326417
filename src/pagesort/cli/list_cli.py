# -*- coding: utf-8 -*-
"""CLI commands for inspecting list sessions and inputs."""

from __future__ import annotations

import logging
from pathlib import Path

import typer

from pagesort.config import ConfigError, load_config
from pagesort.core.session_replay import SessionError, load_session, replay_session
from pagesort.core.sortable_list import NotDragging
from pagesort.models.list_state import ListKind

app = typer.Typer(help="Reorderable file list tools")
logger = logging.getLogger(__name__)


@app.command()
def replay(
    session_json: Path = typer.Argument(..., help="Session file with items and operations"),
    config_path: Path = typer.Option(None, "--config", help="Settings file (default: settings.json)"),
    strict: bool = typer.Option(False, help="Fail on drag steps without an active drag"),
    verbose: bool = typer.Option(False, help="Verbose output"),
) -> None:
    """Replay a recorded session and print the resulting order."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        settings = load_config(config_path)
        session = load_session(session_json)
        engine = replay_session(
            session,
            default_row_height=float(settings["list"]["default_row_height"]),
            strict_drag=strict or bool(settings["list"]["strict_drag"]),
        )
    except (ConfigError, SessionError, NotDragging, OSError) as exc:
        typer.echo(f"Replay failed: {exc}", err=True)
        raise typer.Exit(1)

    for index, item in enumerate(engine.items):
        marks = ("x" if engine.is_checked(index) else " ") + ("*" if index == engine.active else " ")
        typer.echo(f"[{marks}] {index}: {item}")
    typer.echo(f"\n{engine.summary()}, {len(engine.checked_positions())} checked")


@app.command("filter")
def filter_paths(
    paths: list[str] = typer.Argument(..., help="Candidate file paths"),
    kind: ListKind = typer.Option(ListKind.PDF, help="Working set kind: pdf or image"),
) -> None:
    """Show which paths a list of the given kind would accept."""
    accepted = 0
    for path in paths:
        if kind.accepts(path):
            accepted += 1
            typer.echo(f"+ {path}")
        else:
            typer.echo(f"- {path}")
    typer.echo(f"\n{accepted} of {len(paths)} accepted")


if __name__ == "__main__":
    app()
