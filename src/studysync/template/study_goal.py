# SPDX-License-Identifier: MIT

from studysync.model.entity_type import EntityType
from studysync.model.study_goal import StudyGoal
from studysync.time import now_utc, today_local


def get_study_goal_template() -> StudyGoal:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.STUDY_GOAL,
        "date": today_local(),
        "description": "",
        "achieved": False,
        "reason_if_not_achieved": None,
        "is_delayed": False,
        "days_delayed": 0,
        "points_deducted": 0,
        "task_ref": None,
        "created": now,
        "updated": now,
    }
