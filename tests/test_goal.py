# SPDX-License-Identifier: MIT

import pendulum
import pytest

from studysync.service.goal import (
    GoalDelayReconciler,
    GoalValidationError,
    goals_visible_for_date,
    mark_achieved,
    mark_not_achieved,
    new_goal,
    reconcile_goal,
    total_delay_penalty,
)

TODAY = pendulum.date(2024, 3, 11)


def _goal(days_ago: int, description: str = "Revise notes"):
    return new_goal(description, TODAY.subtract(days=days_ago))


def test_new_goal_rejects_blank_description():
    with pytest.raises(GoalValidationError):
        new_goal("   ", TODAY)


def test_goal_five_days_overdue(make_goal_store):
    store = make_goal_store([_goal(5)])

    result = GoalDelayReconciler(store).reconcile(TODAY)

    (goal,) = store.find_all()
    assert goal["is_delayed"] is True
    assert goal["days_delayed"] == 5
    assert goal["points_deducted"] == 13
    assert result["delayed"] == 1


def test_goal_due_today_is_not_delayed(make_goal_store):
    store = make_goal_store([_goal(0)])

    result = GoalDelayReconciler(store).reconcile(TODAY)

    (goal,) = store.find_all()
    assert goal["is_delayed"] is False
    assert result["unchanged"] == 1
    assert store.save_count == 0


def test_reconcile_uses_the_clock_by_default(make_goal_store, clock):
    store = make_goal_store([new_goal("Read", clock.today().subtract(days=2))])

    GoalDelayReconciler(store, clock).reconcile()

    assert store.find_all()[0]["days_delayed"] == 2


def test_second_pass_writes_nothing(make_goal_store):
    store = make_goal_store([_goal(1), _goal(4), _goal(0), _goal(-2)])
    reconciler = GoalDelayReconciler(store)

    reconciler.reconcile(TODAY)
    first_pass = store.find_all()
    writes = store.save_count

    result = reconciler.reconcile(TODAY)

    assert store.save_count == writes
    assert store.find_all() == first_pass
    assert result["delayed"] == 0
    assert result["unchanged"] == 4


def test_delay_advances_on_later_days(make_goal_store):
    store = make_goal_store([_goal(1)])
    reconciler = GoalDelayReconciler(store)

    reconciler.reconcile(TODAY)
    reconciler.reconcile(TODAY.add(days=3))

    goal = store.find_all()[0]
    assert goal["days_delayed"] == 4
    assert goal["points_deducted"] == 11


def test_stale_delay_is_cleared_for_goals_not_yet_due(make_goal_store):
    goal = _goal(-1)
    goal["is_delayed"] = True
    goal["days_delayed"] = 2
    goal["points_deducted"] = 7
    store = make_goal_store([goal])

    result = GoalDelayReconciler(store).reconcile(TODAY)

    cleared = store.find_all()[0]
    assert cleared["is_delayed"] is False
    assert cleared["days_delayed"] == 0
    assert cleared["points_deducted"] == 0
    assert result["cleared"] == 1


def test_reconciliation_skips_achieved_goals(make_goal_store):
    goal = _goal(3)
    goal["achieved"] = True
    goal["is_delayed"] = True
    goal["days_delayed"] = 3
    goal["points_deducted"] = 9
    store = make_goal_store([goal])

    result = GoalDelayReconciler(store).reconcile(TODAY)

    untouched = store.find_all()[0]
    assert untouched["is_delayed"] is True
    assert untouched["days_delayed"] == 3
    assert untouched["points_deducted"] == 9
    assert result["skipped"] == 1
    assert store.save_count == 0


def test_mark_achieved_clears_delay_immediately(make_goal_store):
    store = make_goal_store([_goal(3)])
    GoalDelayReconciler(store).reconcile(TODAY)
    goal = store.find_all()[0]
    assert goal["points_deducted"] == 9

    mark_achieved(goal)
    store.save(goal)
    GoalDelayReconciler(store).reconcile(TODAY)

    achieved = store.find_all()[0]
    assert achieved["achieved"] is True
    assert achieved["is_delayed"] is False
    assert achieved["days_delayed"] == 0
    assert achieved["points_deducted"] == 0


def test_mark_not_achieved_leaves_delay_to_the_next_pass():
    goal = _goal(2)
    mark_not_achieved(goal, "Ran out of time")

    assert goal["achieved"] is False
    assert goal["reason_if_not_achieved"] == "Ran out of time"
    assert goal["is_delayed"] is False

    assert reconcile_goal(goal, TODAY)["points_deducted"] == 7


def test_malformed_goal_does_not_stop_the_pass(make_goal_store):
    broken = _goal(2, "Broken")
    broken["date"] = "not a date"  # type: ignore[typeddict-item]
    store = make_goal_store([broken, _goal(2, "Fine")])

    result = GoalDelayReconciler(store).reconcile(TODAY)

    assert result["failed"] == 1
    assert result["delayed"] == 1
    fine = [goal for goal in store.find_all() if goal["description"] == "Fine"][0]
    assert fine["days_delayed"] == 2


def test_reconcile_goal_is_pure():
    goal = _goal(2)

    updated = reconcile_goal(goal, TODAY)

    assert updated is not goal
    assert goal["is_delayed"] is False
    assert updated["is_delayed"] is True


def test_visible_goals_include_overdue_ones(make_goal_store):
    today_goal = _goal(0, "Today")
    overdue = _goal(4, "Overdue")
    slightly_overdue = _goal(1, "Yesterday")
    achieved_old = _goal(2, "Done")
    mark_achieved(achieved_old)
    future = _goal(-1, "Tomorrow")
    store = make_goal_store(
        [today_goal, overdue, slightly_overdue, achieved_old, future]
    )
    GoalDelayReconciler(store).reconcile(TODAY)

    visible = goals_visible_for_date(store, TODAY)

    assert [goal["description"] for goal in visible] == [
        "Today",
        "Overdue",
        "Yesterday",
    ]
    assert total_delay_penalty(visible) == 11 + 5


def test_visible_goals_do_not_repeat_goals_of_the_day(make_goal_store):
    goal = _goal(0)
    store = make_goal_store([goal])

    assert len(goals_visible_for_date(store, TODAY)) == 1
