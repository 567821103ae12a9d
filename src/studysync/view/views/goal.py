# SPDX-License-Identifier: MIT

from typing import Optional, cast

from rich import box
from rich.console import Console
from rich.table import Table

from studysync.model.entity_id import EntityId
from studysync.model.study_goal import StudyGoal
from studysync.repository.id_map import ID_MAP_REPO
from studysync.service.goal import ReconciliationResult
from studysync.time import date_to_display_str
from studysync.view.util import colorize, goal_delay_color, goal_state, text_or_blank
from studysync.view.views.header import header

DEFAULT_COLUMNS = ["id", "state", "date", "description", "days_delayed", "penalty"]
ALL_COLUMNS = DEFAULT_COLUMNS + ["reason", "task_ref"]


def goals_view(
    report_name: str,
    goals: list[StudyGoal],
    sub_header: Optional[str] = None,
    columns: list[str] = DEFAULT_COLUMNS,
    use_color: bool = True,
) -> None:
    """
    Display goals in a table.

    Delayed goals are tinted from yellow to red by how long they are overdue.
    """
    header(report_name, sub_header)

    goals_table = Table(box=box.SIMPLE)
    for column in columns:
        goals_table.add_column(column)

    for goal in goals:
        color = goal_delay_color(goal) if use_color else None
        row = []
        for column in columns:
            column_value = ""
            if column == "id":
                column_value = str(
                    ID_MAP_REPO.associate_id("goals", cast(EntityId, goal["id"]))
                )
            elif column == "state":
                column_value = goal_state(goal)
            elif column == "date":
                column_value = date_to_display_str(goal["date"])
            elif column == "days_delayed":
                column_value = str(goal["days_delayed"]) if goal["is_delayed"] else ""
            elif column == "penalty":
                column_value = (
                    f"-{goal['points_deducted']}" if goal["points_deducted"] > 0 else ""
                )
            elif column == "reason":
                column_value = text_or_blank(goal["reason_if_not_achieved"])
            elif goal.get(column) is not None:
                column_value = str(goal[column])  # type: ignore[literal-required]
            row.append(colorize(column_value, color))
        goals_table.add_row(*row)

    console = Console()
    console.print(goals_table)


def reconciliation_view(today: str, result: ReconciliationResult) -> None:
    header("goal reconciliation", today)

    result_table = Table(box=box.SIMPLE)
    result_table.add_column("outcome")
    result_table.add_column("goals")
    for outcome in ("delayed", "cleared", "unchanged", "skipped", "failed"):
        result_table.add_row(outcome, str(result[outcome]))  # type: ignore[literal-required]

    console = Console()
    console.print(result_table)
