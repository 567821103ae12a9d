# SPDX-License-Identifier: MIT

from studysync.model.entity_type import EntityType
from studysync.model.study_session import StudySession
from studysync.time import now_utc, today_local


def get_study_session_template() -> StudySession:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.STUDY_SESSION,
        "date": today_local(),
        "start_time": None,
        "end_time": None,
        "duration_minutes": 0,
        "is_active": False,
        "current_elapsed_minutes": 0,
        "completed": False,
        "points_earned": 0,
        "focus_level": 3,
        "confidence_level": 3,
        "subject": None,
        "topic": None,
        "location": None,
        "notes": None,
        "created": now,
        "updated": now,
    }
