# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from studysync.model.entity_id import EntityId


class DailyReflection(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "daily_reflection"
    date: pendulum.Date  # At most one reflection per day
    overall_focus_level: int  # 1-5
    what_to_change_tomorrow: Optional[str]
    reflection_text: Optional[str]
    notes: Optional[str]
    deserve_reward: bool

    # Snapshot of the day when the reflection was written
    completed_sessions: int
    total_goals_achieved: int

    created: pendulum.DateTime
    updated: pendulum.DateTime
