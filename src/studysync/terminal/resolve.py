# SPDX-License-Identifier: MIT

from typing import Optional

import typer

from studysync.model.entity_id import EntityId
from studysync.repository.id_map import ID_MAP_REPO
from studysync.repository.session import SessionRepository
from studysync.repository.store import SessionT


def real_id(entity_type: str, synthetic_id: int) -> EntityId:
    """Translate a synthetic id from the command line, exiting when it is unknown."""
    try:
        return ID_MAP_REPO.get_real_id(entity_type, synthetic_id)
    except KeyError:
        typer.echo(f"Unknown id: {synthetic_id}")
        raise typer.Exit(1)


def session_for_command(
    repo: SessionRepository[SessionT],
    entity_type: str,
    synthetic_id: Optional[int],
) -> SessionT:
    """
    The session a command acts on.

    An explicit id wins. Without one, the most recently started open session
    is used, so the common start, pause, end flow needs no ids at all.
    """
    if synthetic_id is not None:
        session = repo.find_by_id(real_id(entity_type, synthetic_id))
        if session is None:
            typer.echo(f"Unknown id: {synthetic_id}")
            raise typer.Exit(1)
        return session

    open_sessions = repo.find_open()
    if len(open_sessions) == 0:
        typer.echo("No open session. Start one first or pass an id.")
        raise typer.Exit(1)
    return max(open_sessions, key=lambda session: session["created"])
