# SPDX-License-Identifier: MIT

from typing import Callable, Optional

import pendulum

from studysync.model.reminder import Reminder, ReminderType


def _one_day_before(
    deadline: Optional[pendulum.Date], reminder: Reminder
) -> Optional[pendulum.Date]:
    return deadline.subtract(days=1) if deadline is not None else None


def _one_week_before(
    deadline: Optional[pendulum.Date], reminder: Reminder
) -> Optional[pendulum.Date]:
    return deadline.subtract(weeks=1) if deadline is not None else None


def _one_month_before(
    deadline: Optional[pendulum.Date], reminder: Reminder
) -> Optional[pendulum.Date]:
    return deadline.subtract(months=1) if deadline is not None else None


def _custom_date(
    deadline: Optional[pendulum.Date], reminder: Reminder
) -> Optional[pendulum.Date]:
    return reminder["custom_date"]


REMINDER_DATE_RULES: dict[
    ReminderType,
    Callable[[Optional[pendulum.Date], Reminder], Optional[pendulum.Date]],
] = {
    "one_day_before": _one_day_before,
    "one_week_before": _one_week_before,
    "one_month_before": _one_month_before,
    "custom_date": _custom_date,
}


def reminder_date(
    reminder: Reminder, deadline: Optional[pendulum.Date]
) -> Optional[pendulum.Date]:
    """
    Date on which a reminder falls due.

    Offsets are taken back from the deadline, so without a deadline only a
    custom date produces a reminder.
    """
    rule = REMINDER_DATE_RULES.get(reminder["type"])
    if rule is None:
        raise ValueError(f"Unknown reminder type: {reminder['type']}")
    return rule(deadline, reminder)


def new_reminder(
    reminder_type: ReminderType, custom_date: Optional[pendulum.Date] = None
) -> Reminder:
    if reminder_type == "custom_date" and custom_date is None:
        raise ValueError("A custom_date reminder needs a date.")
    return {
        "type": reminder_type,
        "custom_date": custom_date if reminder_type == "custom_date" else None,
    }
