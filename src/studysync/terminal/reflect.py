# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from studysync.repository.daily_reflection import REFLECTION_REPO
from studysync.repository.session import PROJECT_SESSION_REPO, STUDY_SESSION_REPO
from studysync.repository.study_goal import GOAL_REPO
from studysync.service.reflection import (
    ReflectionValidationError,
    summarize_reflections,
    write_reflection,
)
from studysync.terminal.custom_typer import AliasedTyperGroup
from studysync.terminal.parse import parse_date_or_today
from studysync.time import date_to_display_str, today_local
from studysync.view.views import reflection as reflection_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DateArgument = Annotated[
    Optional[str],
    typer.Argument(help="YYYY-MM-DD, day offset, today, yesterday"),
]


@app.command("write, w")
def write(
    date: DateArgument = None,
    focus: Annotated[
        Optional[int], typer.Option("--focus", "-f", help="Overall focus, 1-5")
    ] = None,
    change: Annotated[
        Optional[str],
        typer.Option("--change", "-c", help="What to change tomorrow"),
    ] = None,
    text: Annotated[Optional[str], typer.Option("--text", "-t")] = None,
    notes: Annotated[Optional[str], typer.Option("--notes", "-n")] = None,
    reward: Annotated[
        Optional[bool],
        typer.Option("--reward/--no-reward", help="Whether the day earned a reward"),
    ] = None,
) -> None:
    """Write or update the reflection for a day, today by default."""
    day = parse_date_or_today(date)
    sessions = [
        *STUDY_SESSION_REPO.find_by_date(day),
        *PROJECT_SESSION_REPO.find_by_date(day),
    ]

    try:
        reflection = write_reflection(
            REFLECTION_REPO.find_by_date(day),
            day,
            sessions,
            GOAL_REPO.find_by_date(day),
            overall_focus_level=focus,
            what_to_change_tomorrow=change,
            reflection_text=text,
            notes=notes,
            deserve_reward=reward,
        )
    except ReflectionValidationError as e:
        typer.echo(f"Error: {e}")
        raise typer.Exit(1)

    REFLECTION_REPO.save(reflection)
    reflection_report.reflection_view("reflection", reflection)


@app.command("show, sh")
def show(date: DateArgument = None) -> None:
    """Show the reflection for a day."""
    day = parse_date_or_today(date)
    reflection = REFLECTION_REPO.find_by_date(day)
    if reflection is None:
        typer.echo(f"No reflection for {date_to_display_str(day)}")
        raise typer.Exit(1)

    reflection_report.reflection_view("reflection", reflection)


@app.command("list, ls")
def list_reflections(
    days: Annotated[
        int, typer.Option("--days", "-d", help="How many days back to include")
    ] = 7,
) -> None:
    """List recent reflections with the reward count and average focus."""
    since = today_local().subtract(days=days)
    reflections = REFLECTION_REPO.find_recent(since)
    reflection_report.reflections_view(
        reflections,
        summarize_reflections(reflections),
        f"since {date_to_display_str(since)}",
    )


@app.command("delete, d")
def delete(date: DateArgument = None) -> None:
    """Delete the reflection for a day."""
    day = parse_date_or_today(date)
    reflection = REFLECTION_REPO.delete_by_date(day)
    if reflection is None:
        typer.echo(f"No reflection for {date_to_display_str(day)}")
        raise typer.Exit(1)

    reflection_report.reflection_view("deleted reflection", reflection)
