# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from studysync.model.project import Project
from studysync.model.project_session import ProjectSession
from studysync.template.project import get_project_template
from studysync.time import Clock

logger = logging.getLogger(__name__)


class ProjectValidationError(Exception):
    """Raised when project validation fails."""

    pass


def new_project(
    title: str,
    description: Optional[str] = None,
    target_end_date: Optional[pendulum.Date] = None,
) -> Project:
    if title is None or title.strip() == "":
        raise ProjectValidationError("Project title cannot be empty.")

    project = get_project_template()
    project["title"] = title.strip()
    project["description"] = description
    project["target_end_date"] = target_end_date
    return project


def record_completed_session(
    project: Project, session: ProjectSession, clock: Clock
) -> Project:
    """Add a newly completed session's time to the project totals."""
    project["total_minutes_worked"] += max(0, session["duration_minutes"])
    project["total_sessions_count"] += 1
    project["last_worked_on"] = clock.now()
    logger.info(
        "Recorded %d minutes on project %s", session["duration_minutes"], project["id"]
    )
    return project


def record_reended_session(
    project: Project, session: ProjectSession, previous_minutes: int
) -> Project:
    """Move the totals by the change in duration when an ended session is ended again."""
    project["total_minutes_worked"] = max(
        0,
        project["total_minutes_worked"]
        + session["duration_minutes"]
        - previous_minutes,
    )
    return project


def remove_session_from_project(project: Project, session: ProjectSession) -> Project:
    """Take a deleted session back out of the project totals."""
    if not session["completed"]:
        return project
    project["total_minutes_worked"] = max(
        0, project["total_minutes_worked"] - session["duration_minutes"]
    )
    project["total_sessions_count"] = max(0, project["total_sessions_count"] - 1)
    return project


def is_overdue(project: Project, today: pendulum.Date) -> bool:
    return (
        project["target_end_date"] is not None
        and today > project["target_end_date"]
        and project["status"] == "active"
    )
