# SPDX-License-Identifier: MIT

from studysync.model.entity_type import EntityType
from studysync.model.project import Project
from studysync.time import now_utc


def get_project_template() -> Project:
    now = now_utc()
    return {
        "id": None,
        "entity_type": EntityType.PROJECT,
        "title": "",
        "description": None,
        "status": "active",
        "target_end_date": None,
        "total_sessions_count": 0,
        "total_minutes_worked": 0,
        "last_worked_on": None,
        "created": now,
        "updated": now,
    }
