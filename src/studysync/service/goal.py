# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Iterable, Optional, TypedDict

import pendulum

from studysync.model.study_goal import StudyGoal
from studysync.repository.store import GoalStore
from studysync.service.scoring import goal_delay_penalty
from studysync.template.study_goal import get_study_goal_template
from studysync.time import Clock, SystemClock, whole_days_between

logger = logging.getLogger(__name__)


class GoalValidationError(Exception):
    """Raised when goal validation fails."""

    pass


class ReconciliationResult(TypedDict):
    delayed: int  # Goals whose delay state was set or advanced
    cleared: int  # Stale delay state removed from goals not yet due
    unchanged: int
    skipped: int  # Achieved goals, never touched
    failed: int


def new_goal(
    description: str,
    date: pendulum.Date,
    task_ref: Optional[str] = None,
) -> StudyGoal:
    if description is None or description.strip() == "":
        raise GoalValidationError("Goal description cannot be empty.")

    goal = get_study_goal_template()
    goal["description"] = description.strip()
    goal["date"] = date
    goal["task_ref"] = task_ref
    return goal


def mark_achieved(goal: StudyGoal) -> StudyGoal:
    """
    Mark a goal achieved and clear its delay state straight away.

    Reconciliation skips achieved goals, so it would never clear them itself.
    """
    goal["achieved"] = True
    goal["reason_if_not_achieved"] = None
    goal["is_delayed"] = False
    goal["days_delayed"] = 0
    goal["points_deducted"] = 0
    return goal


def mark_not_achieved(goal: StudyGoal, reason: Optional[str]) -> StudyGoal:
    goal["achieved"] = False
    goal["reason_if_not_achieved"] = reason
    return goal


def reconcile_goal(goal: StudyGoal, today: pendulum.Date) -> Optional[StudyGoal]:
    """
    Bring one goal's delay fields in line with today.

    Returns an updated copy, or None when the goal needs no write.
    """
    if goal["achieved"]:
        return None

    if goal["date"] < today:
        days_delayed = whole_days_between(goal["date"], today)
        penalty = goal_delay_penalty(days_delayed)
        if (
            goal["is_delayed"]
            and goal["days_delayed"] == days_delayed
            and goal["points_deducted"] == penalty
        ):
            return None
        updated = deepcopy(goal)
        updated["is_delayed"] = True
        updated["days_delayed"] = days_delayed
        updated["points_deducted"] = penalty
        return updated

    if goal["is_delayed"]:
        # Stale state, e.g. the goal was moved forward to a later date
        updated = deepcopy(goal)
        updated["is_delayed"] = False
        updated["days_delayed"] = 0
        updated["points_deducted"] = 0
        return updated

    return None


class GoalDelayReconciler:
    """
    Daily pass over every goal that recomputes its delay state.

    Running it twice on the same day performs no writes the second time.
    """

    def __init__(self, store: GoalStore, clock: Optional[Clock] = None) -> None:
        self.store = store
        self.clock: Clock = clock if clock is not None else SystemClock()

    def reconcile(self, today: Optional[pendulum.Date] = None) -> ReconciliationResult:
        if today is None:
            today = self.clock.today()

        result: ReconciliationResult = {
            "delayed": 0,
            "cleared": 0,
            "unchanged": 0,
            "skipped": 0,
            "failed": 0,
        }

        for goal in self.store.find_all():
            if goal["achieved"]:
                result["skipped"] += 1
                continue

            # One malformed record must not stop the pass for the others
            try:
                updated = reconcile_goal(goal, today)
            except (TypeError, ValueError):
                logger.exception("Could not reconcile goal %s", goal.get("id"))
                result["failed"] += 1
                continue

            if updated is None:
                result["unchanged"] += 1
                continue

            self.store.save(updated)
            if updated["is_delayed"]:
                result["delayed"] += 1
            else:
                result["cleared"] += 1

        logger.info(
            "Reconciled goals for %s: %d delayed, %d cleared, %d unchanged, "
            "%d skipped, %d failed",
            today,
            result["delayed"],
            result["cleared"],
            result["unchanged"],
            result["skipped"],
            result["failed"],
        )
        return result


def goals_visible_for_date(store: GoalStore, date: pendulum.Date) -> list[StudyGoal]:
    """
    Goals to show on a given day.

    Goals set for that day, plus earlier goals still unachieved and flagged
    delayed, so overdue goals keep surfacing until they are resolved.
    """
    goals = {goal["id"]: goal for goal in store.find_by_date(date)}
    for goal in store.find_all():
        if (
            goal["date"] < date
            and not goal["achieved"]
            and goal["is_delayed"]
            and goal["id"] not in goals
        ):
            goals[goal["id"]] = goal

    return sorted(
        goals.values(),
        key=lambda goal: (goal["is_delayed"], -goal["days_delayed"], goal["created"]),
    )


def total_delay_penalty(goals: Iterable[StudyGoal]) -> int:
    return sum(goal["points_deducted"] for goal in goals if goal["is_delayed"])
