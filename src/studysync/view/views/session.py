# SPDX-License-Identifier: MIT

from typing import Optional, cast

from rich import box
from rich.console import Console
from rich.table import Table

from studysync.model.entity_id import EntityId
from studysync.model.project import Project
from studysync.model.project_session import ProjectSession
from studysync.model.study_session import StudySession
from studysync.repository.id_map import ID_MAP_REPO
from studysync.time import (
    date_to_display_str,
    datetime_to_display_local_datetime_str_optional,
    minutes_to_display_str,
)
from studysync.view.util import session_state, text_or_blank
from studysync.view.views.header import header


def _state(session: StudySession | ProjectSession) -> str:
    return session_state(
        session["is_active"], session["completed"], session["start_time"] is not None
    )


def study_sessions_view(
    report_name: str,
    sessions: list[StudySession],
    sub_header: Optional[str] = None,
    columns: list[str] = [
        "id",
        "state",
        "date",
        "subject",
        "topic",
        "duration",
        "focus",
        "confidence",
        "points",
    ],
) -> None:
    """Display list of study sessions in a table."""
    header(report_name, sub_header)

    sessions_table = Table(box=box.SIMPLE)
    for column in columns:
        sessions_table.add_column(column)

    for session in sessions:
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(
                    ID_MAP_REPO.associate_id(
                        "study_sessions", cast(EntityId, session["id"])
                    )
                )
            elif column == "state":
                column_value = _state(session)
            elif column == "date":
                column_value = date_to_display_str(session["date"])
            elif column == "duration":
                column_value = minutes_to_display_str(session["duration_minutes"])
            elif column == "focus":
                column_value = str(session["focus_level"])
            elif column == "confidence":
                column_value = str(session["confidence_level"])
            elif column == "points":
                column_value = str(session["points_earned"])
            elif session.get(column) is not None:
                column_value = str(session[column])  # type: ignore[literal-required]
            row.append(column_value)
        sessions_table.add_row(*row)

    console = Console()
    console.print(sessions_table)


def project_sessions_view(
    report_name: str,
    sessions: list[ProjectSession],
    sub_header: Optional[str] = None,
    columns: list[str] = [
        "id",
        "state",
        "date",
        "session_title",
        "duration",
        "progress",
        "points",
    ],
) -> None:
    """Display list of project sessions in a table."""
    header(report_name, sub_header)

    sessions_table = Table(box=box.SIMPLE)
    for column in columns:
        sessions_table.add_column(column)

    for session in sessions:
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(
                    ID_MAP_REPO.associate_id(
                        "project_sessions", cast(EntityId, session["id"])
                    )
                )
            elif column == "state":
                column_value = _state(session)
            elif column == "date":
                column_value = date_to_display_str(session["date"])
            elif column == "duration":
                column_value = minutes_to_display_str(session["duration_minutes"])
            elif column == "points":
                column_value = str(session["points_earned"])
            elif session.get(column) is not None:
                column_value = str(session[column])  # type: ignore[literal-required]
            row.append(column_value)
        sessions_table.add_row(*row)

    console = Console()
    console.print(sessions_table)


def single_study_session_view(
    session: StudySession, elapsed_minutes: Optional[int] = None
) -> None:
    """Display detailed view of a single study session."""
    header("study session")

    session_table = Table(box=box.SIMPLE)
    session_table.add_column("property")
    session_table.add_column("value")

    session_table.add_row(
        "id",
        str(
            ID_MAP_REPO.associate_id("study_sessions", cast(EntityId, session["id"]))
        ),
    )
    session_table.add_row("state", _state(session))
    session_table.add_row("date", date_to_display_str(session["date"]))
    session_table.add_row("subject", text_or_blank(session["subject"]))
    session_table.add_row("topic", text_or_blank(session["topic"]))
    session_table.add_row("location", text_or_blank(session["location"]))
    session_table.add_row(
        "started",
        text_or_blank(
            datetime_to_display_local_datetime_str_optional(session["start_time"])
        ),
    )
    session_table.add_row(
        "ended",
        text_or_blank(
            datetime_to_display_local_datetime_str_optional(session["end_time"])
        ),
    )
    if elapsed_minutes is not None and not session["completed"]:
        session_table.add_row("elapsed", minutes_to_display_str(elapsed_minutes))
    session_table.add_row("duration", minutes_to_display_str(session["duration_minutes"]))
    session_table.add_row("focus", str(session["focus_level"]))
    session_table.add_row("confidence", str(session["confidence_level"]))
    session_table.add_row("points", str(session["points_earned"]))
    session_table.add_row("notes", text_or_blank(session["notes"]))

    console = Console()
    console.print(session_table)


def single_project_session_view(
    session: ProjectSession,
    project: Optional[Project] = None,
    elapsed_minutes: Optional[int] = None,
) -> None:
    """Display detailed view of a single project session."""
    header("project session", project["title"] if project is not None else None)

    session_table = Table(box=box.SIMPLE)
    session_table.add_column("property")
    session_table.add_column("value")

    session_table.add_row(
        "id",
        str(
            ID_MAP_REPO.associate_id("project_sessions", cast(EntityId, session["id"]))
        ),
    )
    session_table.add_row("state", _state(session))
    session_table.add_row("date", date_to_display_str(session["date"]))
    session_table.add_row(
        "started",
        text_or_blank(
            datetime_to_display_local_datetime_str_optional(session["start_time"])
        ),
    )
    session_table.add_row(
        "ended",
        text_or_blank(
            datetime_to_display_local_datetime_str_optional(session["end_time"])
        ),
    )
    if elapsed_minutes is not None and not session["completed"]:
        session_table.add_row("elapsed", minutes_to_display_str(elapsed_minutes))
    session_table.add_row("duration", minutes_to_display_str(session["duration_minutes"]))
    session_table.add_row("title", text_or_blank(session["session_title"]))
    session_table.add_row("objectives", text_or_blank(session["objectives"]))
    session_table.add_row("progress", text_or_blank(session["progress"]))
    session_table.add_row("next_steps", text_or_blank(session["next_steps"]))
    session_table.add_row("challenges", text_or_blank(session["challenges"]))
    session_table.add_row("notes", text_or_blank(session["notes"]))
    session_table.add_row("points", str(session["points_earned"]))

    console = Console()
    console.print(session_table)


def live_session_table(
    label: str, session: StudySession | ProjectSession, elapsed_minutes: int
) -> Table:
    """Compact table redrawn by the watch command."""
    live_table = Table(box=box.SIMPLE)
    live_table.add_column(label)
    live_table.add_column("state")
    live_table.add_column("elapsed")
    live_table.add_row(
        text_or_blank(
            session.get("subject") or session.get("session_title")  # type: ignore[arg-type]
        ),
        _state(session),
        minutes_to_display_str(elapsed_minutes),
    )
    return live_table
