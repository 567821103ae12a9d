# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from studysync.model.entity_id import EntityId


class StudySession(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "study_session"
    date: pendulum.Date  # Local day the session belongs to
    start_time: Optional[pendulum.DateTime]
    end_time: Optional[pendulum.DateTime]  # Unset until the session ends
    duration_minutes: int

    # Real-time tracking
    is_active: bool
    current_elapsed_minutes: int  # Snapshot taken at the last pause

    completed: bool
    points_earned: int

    # Quality inputs, 1-5
    focus_level: int
    confidence_level: int

    subject: Optional[str]
    topic: Optional[str]
    location: Optional[str]
    notes: Optional[str]

    created: pendulum.DateTime
    updated: pendulum.DateTime
