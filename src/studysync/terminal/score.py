# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer

from studysync.repository.daily_reflection import REFLECTION_REPO
from studysync.repository.session import PROJECT_SESSION_REPO, STUDY_SESSION_REPO
from studysync.repository.study_goal import GOAL_REPO
from studysync.service.goal import goals_visible_for_date
from studysync.service.scoring import daily_progress, daily_score
from studysync.terminal.parse import parse_date_or_today
from studysync.time import date_to_display_str
from studysync.view.views import score as score_report


def score(
    date: Annotated[
        Optional[str],
        typer.Argument(help="YYYY-MM-DD, day offset, today, yesterday"),
    ] = None,
) -> None:
    """Show the points earned and lost on a day."""
    day = parse_date_or_today(date)

    sessions = [
        *STUDY_SESSION_REPO.find_by_date(day),
        *PROJECT_SESSION_REPO.find_by_date(day),
    ]
    goals = goals_visible_for_date(GOAL_REPO, day)
    reflection = REFLECTION_REPO.find_by_date(day)

    score_report.score_view(
        date_to_display_str(day),
        daily_score(sessions, goals, reflection),
        daily_progress(goals),
        reflection,
    )
