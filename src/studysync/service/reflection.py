# SPDX-License-Identifier: MIT

import logging
from typing import Iterable, Optional, TypedDict, Union

import pendulum

from studysync.model.daily_reflection import DailyReflection
from studysync.model.project_session import ProjectSession
from studysync.model.study_goal import StudyGoal
from studysync.model.study_session import StudySession
from studysync.service.session import MAX_LEVEL, MIN_LEVEL
from studysync.template.daily_reflection import get_daily_reflection_template

logger = logging.getLogger(__name__)


class ReflectionValidationError(Exception):
    """Raised when reflection details fail validation."""

    pass


class ReflectionSummary(TypedDict):
    count: int
    rewarded: int  # Days marked as deserving a reward
    average_focus: float


def validate_focus_level(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ReflectionValidationError(
            f"Overall focus level must be an integer. Got: {type(value).__name__}"
        )
    if not (MIN_LEVEL <= value <= MAX_LEVEL):
        raise ReflectionValidationError(
            f"Overall focus level must be between {MIN_LEVEL} and {MAX_LEVEL}. Got: {value}"
        )
    return value


def write_reflection(
    existing: Optional[DailyReflection],
    date: pendulum.Date,
    sessions: Iterable[Union[StudySession, ProjectSession]],
    goals: Iterable[StudyGoal],
    overall_focus_level: Optional[int] = None,
    what_to_change_tomorrow: Optional[str] = None,
    reflection_text: Optional[str] = None,
    notes: Optional[str] = None,
    deserve_reward: Optional[bool] = None,
) -> DailyReflection:
    """
    Create the reflection for a day, or update the one already written.

    Fields left as None keep their previous value. The session and goal
    counters are always refreshed from the day's records.
    """
    if overall_focus_level is not None:
        validate_focus_level(overall_focus_level)

    if existing is None:
        reflection = get_daily_reflection_template()
        reflection["date"] = date
    else:
        reflection = existing

    if overall_focus_level is not None:
        reflection["overall_focus_level"] = overall_focus_level
    if what_to_change_tomorrow is not None:
        reflection["what_to_change_tomorrow"] = what_to_change_tomorrow
    if reflection_text is not None:
        reflection["reflection_text"] = reflection_text
    if notes is not None:
        reflection["notes"] = notes
    if deserve_reward is not None:
        reflection["deserve_reward"] = deserve_reward

    reflection["completed_sessions"] = len(
        [session for session in sessions if session["completed"]]
    )
    reflection["total_goals_achieved"] = len(
        [goal for goal in goals if goal["date"] == date and goal["achieved"]]
    )

    logger.info(
        "Reflection for %s: focus %d, %d sessions, %d goals achieved",
        date,
        reflection["overall_focus_level"],
        reflection["completed_sessions"],
        reflection["total_goals_achieved"],
    )
    return reflection


def summarize_reflections(reflections: list[DailyReflection]) -> ReflectionSummary:
    if len(reflections) == 0:
        return {"count": 0, "rewarded": 0, "average_focus": 0.0}
    return {
        "count": len(reflections),
        "rewarded": len(
            [reflection for reflection in reflections if reflection["deserve_reward"]]
        ),
        "average_focus": sum(
            reflection["overall_focus_level"] for reflection in reflections
        )
        / len(reflections),
    }
