# SPDX-License-Identifier: MIT

import time
from typing import Annotated, Optional, cast

import typer
from rich.live import Live

from studysync.model.entity_id import EntityId
from studysync.model.study_session import StudySession
from studysync.repository.configuration import CONFIGURATION_REPO
from studysync.repository.session import STUDY_SESSION_REPO
from studysync.service.session import (
    InvalidTransitionError,
    SessionTracker,
    SessionValidationError,
    new_study_session,
)
from studysync.terminal.custom_typer import AliasedTyperGroup
from studysync.terminal.parse import parse_date_or_today, parse_id_list
from studysync.terminal.resolve import real_id, session_for_command
from studysync.time import date_to_display_str
from studysync.view.views import session as session_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _tracker() -> SessionTracker[StudySession]:
    config = CONFIGURATION_REPO.get_config()
    return SessionTracker(STUDY_SESSION_REPO, strict=config["strict_transitions"])


def _open_or_given(id: Optional[int]) -> StudySession:
    return session_for_command(STUDY_SESSION_REPO, "study_sessions", id)


@app.command("start, s")
def start(
    subject: Annotated[Optional[str], typer.Option("--subject", "-s")] = None,
    topic: Annotated[Optional[str], typer.Option("--topic", "-t")] = None,
    location: Annotated[Optional[str], typer.Option("--location", "-l")] = None,
) -> None:
    """Start a new study session."""
    tracker = _tracker()

    open_sessions = STUDY_SESSION_REPO.find_open()
    if len(open_sessions) > 0:
        typer.echo("A study session is already open. End it before starting another.")
        raise typer.Exit(1)

    session = new_study_session(tracker.clock, subject, topic, location)
    tracker.start(session)

    session_report.single_study_session_view(session)


@app.command("pause, p")
def pause(id: Annotated[Optional[int], typer.Argument()] = None) -> None:
    """Pause the open study session."""
    tracker = _tracker()
    session = _open_or_given(id)

    try:
        tracker.pause(session)
    except InvalidTransitionError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    session_report.single_study_session_view(session)


@app.command("resume, r")
def resume(id: Annotated[Optional[int], typer.Argument()] = None) -> None:
    """Resume a paused study session."""
    tracker = _tracker()
    session = _open_or_given(id)

    try:
        tracker.resume(session)
    except InvalidTransitionError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    session_report.single_study_session_view(session, tracker.elapsed_minutes(session))


@app.command("end, e")
def end(
    focus: Annotated[int, typer.Option("--focus", "-f", help="1-5")],
    id: Annotated[Optional[int], typer.Argument()] = None,
    confidence: Annotated[
        Optional[int], typer.Option("--confidence", "-c", help="1-5")
    ] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
) -> None:
    """End a study session and score it."""
    tracker = _tracker()
    session = _open_or_given(id)

    try:
        tracker.end_study_session(
            session,
            {"focus_level": focus, "confidence_level": confidence, "notes": notes},
        )
    except (SessionValidationError, InvalidTransitionError) as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    session_report.single_study_session_view(session)


@app.command("status, st")
def status(id: Annotated[Optional[int], typer.Argument()] = None) -> None:
    """Show a study session with its live elapsed time."""
    tracker = _tracker()
    session = _open_or_given(id)
    tracker.tick(session)
    session_report.single_study_session_view(session, tracker.elapsed_minutes(session))


@app.command("watch, w")
def watch(id: Annotated[Optional[int], typer.Argument()] = None) -> None:
    """Follow the open study session until it stops or Ctrl-C."""
    tracker = _tracker()
    session = _open_or_given(id)

    with Live(
        session_report.live_session_table(
            "study", session, tracker.elapsed_minutes(session)
        ),
        refresh_per_second=1,
    ) as live:
        try:
            while session["is_active"]:
                time.sleep(1)
                tracker.tick(session)
                live.update(
                    session_report.live_session_table(
                        "study", session, session["current_elapsed_minutes"]
                    )
                )
        except KeyboardInterrupt:
            pass


@app.command("list, ls")
def list_sessions(
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="YYYY-MM-DD, day offset, today, yesterday"),
    ] = None,
) -> None:
    """List the study sessions of a day."""
    day = parse_date_or_today(date)
    sessions = STUDY_SESSION_REPO.find_by_date(day)
    session_report.study_sessions_view(
        "study sessions", sessions, date_to_display_str(day)
    )


@app.command("focus, f", no_args_is_help=True)
def focus(
    id: int,
    focus_level: Annotated[
        Optional[int], typer.Option("--focus", "-f", help="1-5")
    ] = None,
    confidence_level: Annotated[
        Optional[int], typer.Option("--confidence", "-c", help="1-5")
    ] = None,
) -> None:
    """Change the focus or confidence rating of a session, rescoring it if ended."""
    tracker = _tracker()
    session = _open_or_given(id)

    try:
        if focus_level is not None:
            tracker.update_focus_level(session, focus_level)
        if confidence_level is not None:
            tracker.update_confidence_level(session, confidence_level)
    except SessionValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    session_report.single_study_session_view(session)


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    """Delete study sessions."""
    ids: list[int] = parse_id_list(id)

    deleted_sessions = []
    for session_id in ids:
        real: EntityId = real_id("study_sessions", session_id)
        session = STUDY_SESSION_REPO.find_by_id(real)
        if session is None:
            continue
        STUDY_SESSION_REPO.delete_by_id(real)
        deleted_sessions.append(cast(StudySession, session))

    session_report.study_sessions_view("deleted study sessions", deleted_sessions)
