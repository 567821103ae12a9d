# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict

import pendulum

from studysync.model.entity_id import EntityId

ProjectStatus = Literal["active", "completed", "cancelled"]


class Project(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "project"
    title: str
    description: Optional[str]
    status: ProjectStatus
    target_end_date: Optional[pendulum.Date]

    # Totals maintained when project sessions end or are deleted
    total_sessions_count: int
    total_minutes_worked: int
    last_worked_on: Optional[pendulum.DateTime]

    created: pendulum.DateTime
    updated: pendulum.DateTime
