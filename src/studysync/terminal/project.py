# SPDX-License-Identifier: MIT

import time
from typing import Annotated, Optional, cast

import typer
from rich.live import Live

from studysync.model.project import Project, ProjectStatus
from studysync.model.project_session import ProjectSession
from studysync.model.reminder import ReminderType
from studysync.repository.configuration import CONFIGURATION_REPO
from studysync.repository.project import PROJECT_REPO
from studysync.repository.session import PROJECT_SESSION_REPO
from studysync.service.project import (
    ProjectValidationError,
    new_project,
    record_completed_session,
    record_reended_session,
    remove_session_from_project,
)
from studysync.service.reminder import new_reminder, reminder_date
from studysync.service.session import (
    InvalidTransitionError,
    SessionTracker,
    SessionValidationError,
    new_project_session,
)
from studysync.terminal.custom_typer import AliasedTyperGroup
from studysync.terminal.parse import parse_date, parse_id_list
from studysync.terminal.resolve import real_id, session_for_command
from studysync.time import today_local
from studysync.view.views import project as project_report
from studysync.view.views import session as session_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

PROJECT_STATUSES = ["active", "completed", "cancelled"]
REMINDER_TYPES = ["one_day_before", "one_week_before", "one_month_before", "custom_date"]


def _tracker() -> SessionTracker[ProjectSession]:
    config = CONFIGURATION_REPO.get_config()
    return SessionTracker(PROJECT_SESSION_REPO, strict=config["strict_transitions"])


def _project(id: int) -> Project:
    project = PROJECT_REPO.find_by_id(real_id("projects", id))
    if project is None:
        typer.echo(f"Unknown project id: {id}")
        raise typer.Exit(1)
    return project


def _project_of(session: ProjectSession) -> Optional[Project]:
    return PROJECT_REPO.find_by_id(session["project_id"])


def _open_or_given(id: Optional[int]) -> ProjectSession:
    return session_for_command(PROJECT_SESSION_REPO, "project_sessions", id)


# ─────────────────────────────────────────────────────────────
# Project Management
# ─────────────────────────────────────────────────────────────


@app.command("add, a", no_args_is_help=True)
def add(
    title: str,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    target: Annotated[
        Optional[str],
        typer.Option("--target", "-t", help="Target end date, YYYY-MM-DD"),
    ] = None,
) -> None:
    """Create a new project."""
    try:
        project = new_project(title, description, parse_date(target))
    except ProjectValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    PROJECT_REPO.save(project)
    project_report.single_project_view(project)


@app.command("list, ls")
def list_projects(
    include_all: Annotated[
        bool, typer.Option("--all", "-a", help="Include completed and cancelled")
    ] = False,
) -> None:
    """List projects."""
    projects = PROJECT_REPO.find_all() if include_all else PROJECT_REPO.find_active()
    project_report.projects_view("projects", projects, today_local())


@app.command("status, ss", no_args_is_help=True)
def set_status(
    id: int,
    status: Annotated[str, typer.Argument(help="active, completed, cancelled")],
) -> None:
    """Change a project's status."""
    if status not in PROJECT_STATUSES:
        typer.echo(
            f"Invalid status: {status}. Valid options: {', '.join(PROJECT_STATUSES)}"
        )
        raise typer.Exit(1)

    project = _project(id)
    project["status"] = cast(ProjectStatus, status)
    PROJECT_REPO.save(project)
    project_report.single_project_view(project)


@app.command("remind, rm", no_args_is_help=True)
def remind(
    id: int,
    reminder_type: Annotated[
        str,
        typer.Option(
            "--type",
            "-t",
            help="one_day_before, one_week_before, one_month_before, custom_date",
        ),
    ] = "one_day_before",
    date: Annotated[
        Optional[str], typer.Option("--date", "-d", help="For custom_date")
    ] = None,
) -> None:
    """Show when a reminder for a project's target date falls due."""
    if reminder_type not in REMINDER_TYPES:
        typer.echo(
            f"Invalid reminder type: {reminder_type}. Valid options: {', '.join(REMINDER_TYPES)}"
        )
        raise typer.Exit(1)

    project = _project(id)
    try:
        reminder = new_reminder(cast(ReminderType, reminder_type), parse_date(date))
    except ValueError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    project_report.reminder_view(
        project, reminder, reminder_date(reminder, project["target_end_date"])
    )


# ─────────────────────────────────────────────────────────────
# Project Sessions
# ─────────────────────────────────────────────────────────────


@app.command("start, s", no_args_is_help=True)
def start(
    project_id: int,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    objectives: Annotated[Optional[str], typer.Option("--objectives", "-o")] = None,
) -> None:
    """Start a work session on a project."""
    tracker = _tracker()
    project = _project(project_id)

    try:
        session = new_project_session(tracker.clock, project)
    except SessionValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)
    session["session_title"] = title
    session["objectives"] = objectives

    tracker.start(session)
    session_report.single_project_session_view(session, project)


@app.command("pause, p")
def pause(id: Annotated[Optional[int], typer.Argument()] = None) -> None:
    """Pause the open project session."""
    tracker = _tracker()
    session = _open_or_given(id)

    try:
        tracker.pause(session)
    except InvalidTransitionError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    session_report.single_project_session_view(session, _project_of(session))


@app.command("resume, r")
def resume(id: Annotated[Optional[int], typer.Argument()] = None) -> None:
    """Resume a paused project session."""
    tracker = _tracker()
    session = _open_or_given(id)

    try:
        tracker.resume(session)
    except InvalidTransitionError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    session_report.single_project_session_view(
        session, _project_of(session), tracker.elapsed_minutes(session)
    )


@app.command("end, e")
def end(
    id: Annotated[Optional[int], typer.Argument()] = None,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    objectives: Annotated[Optional[str], typer.Option("--objectives", "-o")] = None,
    progress: Annotated[Optional[str], typer.Option("--progress", "-p")] = None,
    next_steps: Annotated[Optional[str], typer.Option("--next-steps", "-ns")] = None,
    challenges: Annotated[Optional[str], typer.Option("--challenges", "-c")] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
) -> None:
    """End a project session, score it and add its time to the project."""
    tracker = _tracker()
    session = _open_or_given(id)
    already_completed = session["completed"]
    previous_minutes = session["duration_minutes"]

    try:
        tracker.end_project_session(
            session,
            {
                "session_title": title,
                "objectives": objectives,
                "progress": progress,
                "next_steps": next_steps,
                "challenges": challenges,
                "notes": notes,
            },
        )
    except InvalidTransitionError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    project = _project_of(session)
    if project is not None:
        if already_completed:
            record_reended_session(project, session, previous_minutes)
        else:
            record_completed_session(project, session, tracker.clock)
        PROJECT_REPO.save(project)

    session_report.single_project_session_view(session, project)


@app.command("watch, w")
def watch(id: Annotated[Optional[int], typer.Argument()] = None) -> None:
    """Follow the open project session until it stops or Ctrl-C."""
    tracker = _tracker()
    session = _open_or_given(id)

    with Live(
        session_report.live_session_table(
            "project", session, tracker.elapsed_minutes(session)
        ),
        refresh_per_second=1,
    ) as live:
        try:
            while session["is_active"]:
                time.sleep(1)
                tracker.tick(session)
                live.update(
                    session_report.live_session_table(
                        "project", session, session["current_elapsed_minutes"]
                    )
                )
        except KeyboardInterrupt:
            pass


@app.command("sessions, ses", no_args_is_help=True)
def sessions(project_id: int) -> None:
    """List the sessions of a project."""
    project = _project(project_id)
    project_sessions = sorted(
        PROJECT_SESSION_REPO.find_by_project_id(cast(str, project["id"])),
        key=lambda session: session["created"],
        reverse=True,
    )
    session_report.project_sessions_view(
        "project sessions", project_sessions, project["title"]
    )


@app.command("delete-session, ds", no_args_is_help=True)
def delete_session(id: str) -> None:
    """Delete project sessions and take their time back off the project."""
    ids: list[int] = parse_id_list(id)

    deleted_sessions = []
    for session_id in ids:
        real = real_id("project_sessions", session_id)
        session = PROJECT_SESSION_REPO.find_by_id(real)
        if session is None:
            continue

        project = _project_of(session)
        if project is not None:
            remove_session_from_project(project, session)
            PROJECT_REPO.save(project)

        PROJECT_SESSION_REPO.delete_by_id(real)
        deleted_sessions.append(session)

    session_report.project_sessions_view("deleted project sessions", deleted_sessions)
