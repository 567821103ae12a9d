# SPDX-License-Identifier: MIT

from typing import Optional

from rich.color import Color, blend_rgb

from studysync.model.study_goal import StudyGoal
from studysync.service.scoring import delay_color_intensity

ON_TIME_COLOR = Color.parse("yellow").get_truecolor()
OVERDUE_COLOR = Color.parse("red").get_truecolor()


def session_state(is_active: bool, completed: bool, started: bool) -> str:
    """
    Get the state label for a session.

    Returns:
        "active", "paused", "done" or "new"
    """
    if completed:
        return "done"
    if is_active:
        return "active"
    if started:
        return "paused"
    return "new"


def goal_state(goal: StudyGoal) -> str:
    if goal["achieved"]:
        return "X"
    elif goal["reason_if_not_achieved"] is not None:
        return "~"
    return " "


def goal_delay_color(goal: StudyGoal) -> Optional[str]:
    """Blend from yellow to red as a goal's delay grows, None when on time."""
    intensity = delay_color_intensity(goal)
    if intensity == 0.0:
        return None
    return blend_rgb(ON_TIME_COLOR, OVERDUE_COLOR, intensity).hex


def colorize(value: str, color: Optional[str]) -> str:
    if color is None or value == "":
        return value
    return f"[{color}]{value}[/{color}]"


def text_or_blank(value: Optional[str]) -> str:
    return value if value is not None else ""
