# SPDX-License-Identifier: MIT

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from studysync.model.daily_reflection import DailyReflection
from studysync.service.scoring import DailyScore, reflection_focus_penalty
from studysync.view.views.header import header


def score_view(
    day: str,
    score: DailyScore,
    progress: int,
    reflection: Optional[DailyReflection] = None,
) -> None:
    """
    Display the day's points.

    earned      130
    deducted    -41
    focus       -30
    net          89
    goals       50%

    The focus row appears only when the day has a reflection; its penalty
    is already part of deducted.
    """
    header("score", day)

    score_table = Table(box=box.SIMPLE, show_header=False)
    score_table.add_column("metric")
    score_table.add_column("value", justify="right")

    score_table.add_row("earned", f"[green]{score['points_earned']}[/green]")
    deducted = score["points_deducted"]
    score_table.add_row("deducted", f"[red]-{deducted}[/red]" if deducted > 0 else "0")
    if reflection is not None:
        focus_penalty = reflection_focus_penalty(reflection["overall_focus_level"])
        score_table.add_row(
            "focus", f"[red]-{focus_penalty}[/red]" if focus_penalty > 0 else "0"
        )
    score_table.add_row("net", f"[bold]{score['net_points']}[/bold]")
    score_table.add_row("goals", f"{progress}%")

    console = Console()
    console.print(score_table)
