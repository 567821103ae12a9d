# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from studysync.model.daily_reflection import DailyReflection
from studysync.service.reflection import ReflectionSummary
from studysync.service.scoring import reflection_focus_penalty
from studysync.time import date_to_display_str
from studysync.view.util import text_or_blank
from studysync.view.views.header import header


def _penalty_str(reflection: DailyReflection) -> str:
    penalty = reflection_focus_penalty(reflection["overall_focus_level"])
    return f"[red]-{penalty}[/red]" if penalty > 0 else ""


def reflection_view(
    report_name: str, reflection: DailyReflection, sub_header: Optional[str] = None
) -> None:
    header(report_name, sub_header)

    reflection_table = Table(box=box.SIMPLE, show_header=False)
    reflection_table.add_column("field")
    reflection_table.add_column("value")

    reflection_table.add_row("date", date_to_display_str(reflection["date"]))
    reflection_table.add_row("focus", f"{reflection['overall_focus_level']}/5")
    reflection_table.add_row("penalty", _penalty_str(reflection))
    reflection_table.add_row("sessions", str(reflection["completed_sessions"]))
    reflection_table.add_row("goals", str(reflection["total_goals_achieved"]))
    reflection_table.add_row("reward", "yes" if reflection["deserve_reward"] else "no")
    reflection_table.add_row("reflection", text_or_blank(reflection["reflection_text"]))
    reflection_table.add_row(
        "tomorrow", text_or_blank(reflection["what_to_change_tomorrow"])
    )
    reflection_table.add_row("notes", text_or_blank(reflection["notes"]))

    console = Console()
    console.print(reflection_table)


def reflections_view(
    reflections: list[DailyReflection],
    summary: ReflectionSummary,
    sub_header: Optional[str] = None,
) -> None:
    """
    Display reflections one per row, most recent first, with a summary line.

    date        focus  penalty  sessions  goals  reward
    2024-03-11  2/5    -30      3         1      no
    """
    header("reflections", sub_header)

    reflections_table = Table(box=box.SIMPLE)
    for column in ("date", "focus", "penalty", "sessions", "goals", "reward"):
        reflections_table.add_column(column)

    for reflection in reflections:
        reflections_table.add_row(
            date_to_display_str(reflection["date"]),
            f"{reflection['overall_focus_level']}/5",
            _penalty_str(reflection),
            str(reflection["completed_sessions"]),
            str(reflection["total_goals_achieved"]),
            "yes" if reflection["deserve_reward"] else "",
        )

    console = Console()
    console.print(reflections_table)
    console.print(
        f"{summary['count']} reflections, {summary['rewarded']} rewarded, "
        f"average focus {summary['average_focus']:.1f}"
    )
