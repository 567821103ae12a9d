# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from studysync.model.entity_id import EntityId


class ProjectSession(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "project_session"
    project_id: EntityId  # Reference to parent project
    date: pendulum.Date
    start_time: Optional[pendulum.DateTime]
    end_time: Optional[pendulum.DateTime]
    duration_minutes: int

    is_active: bool
    current_elapsed_minutes: int

    completed: bool
    points_earned: int

    session_title: Optional[str]
    objectives: Optional[str]  # What was planned
    progress: Optional[str]  # What was actually done
    next_steps: Optional[str]
    challenges: Optional[str]
    notes: Optional[str]

    created: pendulum.DateTime
    updated: pendulum.DateTime
