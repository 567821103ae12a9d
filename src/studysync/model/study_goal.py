# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from studysync.model.entity_id import EntityId


class StudyGoal(TypedDict):
    id: Optional[EntityId]
    entity_type: str  # "study_goal"
    date: pendulum.Date  # Day the goal was originally set for
    description: str
    achieved: bool
    reason_if_not_achieved: Optional[str]

    # Delay state, maintained by the daily reconciliation pass
    is_delayed: bool
    days_delayed: int
    points_deducted: int

    task_ref: Optional[str]  # Free-text link to an external task
    created: pendulum.DateTime
    updated: pendulum.DateTime
