# SPDX-License-Identifier: MIT

import pendulum
import pytest

from studysync.service.reminder import new_reminder, reminder_date

DEADLINE = pendulum.date(2024, 3, 31)


@pytest.mark.parametrize(
    "reminder_type, expected",
    [
        ("one_day_before", pendulum.date(2024, 3, 30)),
        ("one_week_before", pendulum.date(2024, 3, 24)),
        ("one_month_before", pendulum.date(2024, 2, 29)),
    ],
)
def test_offsets_are_taken_from_the_deadline(reminder_type, expected):
    assert reminder_date(new_reminder(reminder_type), DEADLINE) == expected


def test_custom_date_ignores_the_deadline():
    reminder = new_reminder("custom_date", pendulum.date(2024, 3, 1))

    assert reminder_date(reminder, DEADLINE) == pendulum.date(2024, 3, 1)
    assert reminder_date(reminder, None) == pendulum.date(2024, 3, 1)


def test_offsets_without_deadline_give_no_date():
    assert reminder_date(new_reminder("one_week_before"), None) is None


def test_custom_date_is_required():
    with pytest.raises(ValueError):
        new_reminder("custom_date")


def test_custom_date_is_dropped_for_offsets():
    reminder = new_reminder("one_day_before", pendulum.date(2024, 3, 1))
    assert reminder["custom_date"] is None


def test_unknown_type_is_rejected():
    with pytest.raises(ValueError):
        reminder_date({"type": "hourly", "custom_date": None}, DEADLINE)  # type: ignore[typeddict-item]
