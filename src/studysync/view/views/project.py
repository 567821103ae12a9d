# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table

from studysync.model.entity_id import EntityId
from studysync.model.project import Project
from studysync.model.reminder import Reminder
from studysync.repository.id_map import ID_MAP_REPO
from studysync.service.project import is_overdue
from studysync.time import (
    date_to_display_str,
    date_to_display_str_optional,
    datetime_to_display_local_datetime_str_optional,
    minutes_to_display_str,
)
from studysync.view.util import colorize, text_or_blank
from studysync.view.views.header import header


def projects_view(
    report_name: str,
    projects: list[Project],
    today: pendulum.Date,
    columns: list[str] = [
        "id",
        "title",
        "status",
        "target",
        "sessions",
        "worked",
    ],
) -> None:
    header(report_name)

    projects_table = Table(box=box.SIMPLE)
    for column in columns:
        projects_table.add_column(column)

    for project in projects:
        color = "red" if is_overdue(project, today) else None
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(
                    ID_MAP_REPO.associate_id("projects", cast(EntityId, project["id"]))
                )
            elif column == "target":
                column_value = text_or_blank(
                    date_to_display_str_optional(project["target_end_date"])
                )
            elif column == "sessions":
                column_value = str(project["total_sessions_count"])
            elif column == "worked":
                column_value = minutes_to_display_str(project["total_minutes_worked"])
            elif project.get(column) is not None:
                column_value = str(project[column])  # type: ignore[literal-required]
            row.append(colorize(column_value, color))
        projects_table.add_row(*row)

    console = Console()
    console.print(projects_table)


def single_project_view(project: Project) -> None:
    header("project")

    project_table = Table(box=box.SIMPLE)
    project_table.add_column("property")
    project_table.add_column("value")

    project_table.add_row(
        "id", str(ID_MAP_REPO.associate_id("projects", cast(EntityId, project["id"])))
    )
    project_table.add_row("title", project["title"])
    project_table.add_row("description", text_or_blank(project["description"]))
    project_table.add_row("status", project["status"])
    project_table.add_row(
        "target", text_or_blank(date_to_display_str_optional(project["target_end_date"]))
    )
    project_table.add_row("sessions", str(project["total_sessions_count"]))
    project_table.add_row("worked", minutes_to_display_str(project["total_minutes_worked"]))
    project_table.add_row(
        "last_worked_on",
        text_or_blank(
            datetime_to_display_local_datetime_str_optional(project["last_worked_on"])
        ),
    )

    console = Console()
    console.print(project_table)


def reminder_view(
    project: Project, reminder: Reminder, remind_on: Optional[pendulum.Date]
) -> None:
    header("reminder", project["title"])

    reminder_table = Table(box=box.SIMPLE)
    reminder_table.add_column("type")
    reminder_table.add_column("deadline")
    reminder_table.add_column("remind on")
    reminder_table.add_row(
        reminder["type"],
        text_or_blank(date_to_display_str_optional(project["target_end_date"])),
        date_to_display_str(remind_on) if remind_on is not None else "no deadline",
    )

    console = Console()
    console.print(reminder_table)
