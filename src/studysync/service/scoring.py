# SPDX-License-Identifier: MIT

from typing import Iterable, Optional, TypedDict, Union

from studysync.model.daily_reflection import DailyReflection
from studysync.model.project_session import ProjectSession
from studysync.model.study_goal import StudyGoal
from studysync.model.study_session import StudySession

MINUTES_PER_BASE_POINT = 10
MAX_BASE_POINTS = 60

STUDY_COMPLETION_BONUS = 20
PROJECT_COMPLETION_BONUS = 30
PROJECT_PROGRESS_BONUS = 20
PROJECT_NOTES_BONUS = 10

FIRST_DAY_DELAY_PENALTY = 5
ADDITIONAL_DAY_DELAY_PENALTY = 2

REFLECTION_FOCUS_PENALTY = 30

# Days of delay at which a goal is shown at full warning intensity
DELAY_COLOR_SATURATION_DAYS = 7


class DailyScore(TypedDict):
    points_earned: int
    points_deducted: int
    net_points: int


def base_points(duration_minutes: int) -> int:
    """One point per ten minutes worked, capped at 60."""
    return min(max(0, duration_minutes) // MINUTES_PER_BASE_POINT, MAX_BASE_POINTS)


def focus_adjustment(focus_level: int) -> int:
    # Low focus (1-2) is penalised, 3-5 earns a growing bonus
    if focus_level <= 2:
        return -20 * (3 - focus_level)
    return (focus_level - 2) * 15


def study_session_points(
    duration_minutes: int,
    focus_level: int,
    confidence_level: int,
    completed: bool,
) -> int:
    """
    Points for a study session.

    Inputs are assumed to be validated: focus and confidence levels in 1-5.
    The total is floored at zero so that a low focus rating can cancel the
    session's points but never take them below nothing.
    """
    confidence_bonus = confidence_level * 5
    completion_bonus = STUDY_COMPLETION_BONUS if completed else 0

    total_points = (
        base_points(duration_minutes)
        + focus_adjustment(focus_level)
        + confidence_bonus
        + completion_bonus
    )
    return max(0, total_points)


def project_session_points(
    duration_minutes: int,
    completed: bool,
    has_progress_notes: bool,
    has_notes: bool,
) -> int:
    completion_bonus = PROJECT_COMPLETION_BONUS if completed else 0
    progress_bonus = PROJECT_PROGRESS_BONUS if has_progress_notes else 0
    notes_bonus = PROJECT_NOTES_BONUS if has_notes else 0

    return base_points(duration_minutes) + completion_bonus + progress_bonus + notes_bonus


def goal_delay_penalty(days_delayed: int) -> int:
    """
    Penalty for a goal left unachieved past its date.

    5 points on the first day, then 2 more for every additional day.
    """
    if days_delayed <= 0:
        return 0
    if days_delayed == 1:
        return FIRST_DAY_DELAY_PENALTY
    return FIRST_DAY_DELAY_PENALTY + (days_delayed - 1) * ADDITIONAL_DAY_DELAY_PENALTY


def delay_color_intensity(goal: StudyGoal) -> float:
    """0.0 for a goal on schedule up to 1.0 for a goal a week or more overdue."""
    if not goal["is_delayed"]:
        return 0.0
    return min(1.0, goal["days_delayed"] / DELAY_COLOR_SATURATION_DAYS)


def reflection_focus_penalty(overall_focus_level: int) -> int:
    """Daily deduction for a low overall focus rating: 30 at level 2, 60 at level 1."""
    if overall_focus_level <= 2:
        return REFLECTION_FOCUS_PENALTY * (3 - overall_focus_level)
    return 0


def has_text(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def daily_score(
    sessions: Iterable[Union[StudySession, ProjectSession]],
    goals: Iterable[StudyGoal],
    reflection: Optional[DailyReflection] = None,
) -> DailyScore:
    points_earned = sum(
        session["points_earned"] for session in sessions if session["completed"]
    )
    points_deducted = sum(
        goal["points_deducted"]
        for goal in goals
        if goal["is_delayed"] and not goal["achieved"]
    )
    if reflection is not None:
        points_deducted += reflection_focus_penalty(reflection["overall_focus_level"])
    return {
        "points_earned": points_earned,
        "points_deducted": points_deducted,
        "net_points": points_earned - points_deducted,
    }


def daily_progress(goals: list[StudyGoal]) -> int:
    """Percentage of the given goals that are achieved."""
    if len(goals) == 0:
        return 0
    achieved_goals = len([goal for goal in goals if goal["achieved"]])
    # Half rounds up, 1 of 8 is 13%
    return int(achieved_goals / len(goals) * 100 + 0.5)
