# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict


class StudySessionEnd(TypedDict):
    """Details supplied by the user when a study session ends."""

    focus_level: int
    confidence_level: Optional[int]  # None keeps the session's current value
    notes: Optional[str]


class ProjectSessionEnd(TypedDict):
    """Details supplied by the user when a project session ends."""

    session_title: Optional[str]
    objectives: Optional[str]
    progress: Optional[str]
    next_steps: Optional[str]
    challenges: Optional[str]
    notes: Optional[str]
