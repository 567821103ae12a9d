# SPDX-License-Identifier: MIT

from studysync.model.entity_id import UNSET_ENTITY_ID
from studysync.model.entity_type import EntityType
from studysync.model.project_session import ProjectSession
from studysync.time import now_utc, today_local


def get_project_session_template() -> ProjectSession:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.PROJECT_SESSION,
        "project_id": UNSET_ENTITY_ID,  # Must be set
        "date": today_local(),
        "start_time": None,
        "end_time": None,
        "duration_minutes": 0,
        "is_active": False,
        "current_elapsed_minutes": 0,
        "completed": False,
        "points_earned": 0,
        "session_title": None,
        "objectives": None,
        "progress": None,
        "next_steps": None,
        "challenges": None,
        "notes": None,
        "created": now,
        "updated": now,
    }
