# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

ReminderType = Literal[
    "one_day_before",
    "one_week_before",
    "one_month_before",
    "custom_date",
]


class Reminder(TypedDict):
    type: ReminderType
    custom_date: Optional[pendulum.Date]  # Only set for "custom_date"
