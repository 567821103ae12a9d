# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from studysync.model.study_goal import StudyGoal
from studysync.repository.study_goal import GOAL_REPO
from studysync.service.goal import (
    GoalDelayReconciler,
    GoalValidationError,
    goals_visible_for_date,
    mark_achieved,
    mark_not_achieved,
    new_goal,
)
from studysync.terminal.custom_typer import AliasedTyperGroup
from studysync.terminal.parse import parse_date, parse_date_or_today, parse_id_list
from studysync.terminal.resolve import real_id
from studysync.time import date_to_display_str
from studysync.view.views import goal as goal_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def _goals(id: str) -> list[StudyGoal]:
    goals = []
    for goal_id in parse_id_list(id):
        goal = GOAL_REPO.find_by_id(real_id("goals", goal_id))
        if goal is not None:
            goals.append(goal)
    return goals


@app.command("add, a", no_args_is_help=True)
def add(
    description: str,
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="YYYY-MM-DD, day offset, today, tomorrow"),
    ] = None,
    task: Annotated[
        Optional[str], typer.Option("--task", "-t", help="Reference to a related task")
    ] = None,
) -> None:
    """Set a goal for a day, today by default."""
    day = parse_date_or_today(date)

    try:
        goal = new_goal(description, day, task)
    except GoalValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    GOAL_REPO.save(goal)
    goal_report.goals_view("goal", [goal], date_to_display_str(day))


@app.command("list, ls")
def list_goals(
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="YYYY-MM-DD, day offset, today, yesterday"),
    ] = None,
) -> None:
    """List a day's goals together with earlier goals still overdue."""
    day = parse_date_or_today(date)
    goals = goals_visible_for_date(GOAL_REPO, day)
    goal_report.goals_view(
        "goals", goals, date_to_display_str(day), columns=goal_report.ALL_COLUMNS
    )


@app.command("achieve, ac", no_args_is_help=True)
def achieve(id: str) -> None:
    """Mark goals achieved."""
    goals = _goals(id)
    for goal in goals:
        mark_achieved(goal)
        GOAL_REPO.save(goal)

    goal_report.goals_view("achieved goals", goals)


@app.command("miss, m", no_args_is_help=True)
def miss(
    id: str,
    reason: Annotated[Optional[str], typer.Option("--reason", "-r")] = None,
) -> None:
    """Mark goals not achieved, optionally with the reason."""
    goals = _goals(id)
    for goal in goals:
        mark_not_achieved(goal, reason)
        GOAL_REPO.save(goal)

    goal_report.goals_view("missed goals", goals, columns=goal_report.ALL_COLUMNS)


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    """Delete goals."""
    goals = _goals(id)
    for goal in goals:
        GOAL_REPO.delete_by_id(goal["id"])  # type: ignore[arg-type]

    goal_report.goals_view("deleted goals", goals)


@app.command("reconcile, rc")
def reconcile(
    date: Annotated[
        Optional[str],
        typer.Option("--date", "-d", help="Reconcile as of this day"),
    ] = None,
) -> None:
    """Recompute the delay state and penalty of every goal."""
    reconciler = GoalDelayReconciler(GOAL_REPO)
    today = parse_date(date)
    result = reconciler.reconcile(today)
    goal_report.reconciliation_view(
        date_to_display_str(today if today is not None else reconciler.clock.today()),
        result,
    )
