# SPDX-License-Identifier: MIT

from studysync.model.daily_reflection import DailyReflection
from studysync.model.entity_type import EntityType
from studysync.time import now_utc, today_local


def get_daily_reflection_template() -> DailyReflection:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.DAILY_REFLECTION,
        "date": today_local(),
        "overall_focus_level": 3,
        "what_to_change_tomorrow": None,
        "reflection_text": None,
        "notes": None,
        "deserve_reward": False,
        "completed_sessions": 0,
        "total_goals_achieved": 0,
        "created": now,
        "updated": now,
    }
