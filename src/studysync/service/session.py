# SPDX-License-Identifier: MIT

import logging
from typing import Generic, Optional, Union, cast

from studysync.model.entity_type import EntityType
from studysync.model.project import Project
from studysync.model.project_session import ProjectSession
from studysync.model.session_end import ProjectSessionEnd, StudySessionEnd
from studysync.model.study_session import StudySession
from studysync.repository.store import SessionStore, SessionT
from studysync.service.scoring import (
    has_text,
    project_session_points,
    study_session_points,
)
from studysync.template.project_session import get_project_session_template
from studysync.template.study_session import get_study_session_template
from studysync.time import Clock, SystemClock, minutes_between

logger = logging.getLogger(__name__)

MIN_LEVEL = 1
MAX_LEVEL = 5

TrackedSession = Union[StudySession, ProjectSession]
SessionEnd = Union[StudySessionEnd, ProjectSessionEnd]


class InvalidTransitionError(Exception):
    """Raised in strict mode when a transition does not apply to the session's state."""

    pass


class SessionValidationError(Exception):
    """Raised when session details fail validation."""

    pass


def validate_level(name: str, value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SessionValidationError(
            f"{name} must be an integer. Got: {type(value).__name__}"
        )
    if not (MIN_LEVEL <= value <= MAX_LEVEL):
        raise SessionValidationError(
            f"{name} must be between {MIN_LEVEL} and {MAX_LEVEL}. Got: {value}"
        )
    return value


def validate_study_session_end(details: StudySessionEnd) -> None:
    """Reject out-of-range ratings before they reach the scoring rules."""
    if "focus_level" not in details:
        raise SessionValidationError("Ending a study session requires a focus level.")
    validate_level("Focus level", details["focus_level"])
    if details.get("confidence_level") is not None:
        validate_level("Confidence level", cast(int, details["confidence_level"]))


def is_study_session(session: TrackedSession) -> bool:
    return session["entity_type"] == EntityType.STUDY_SESSION


def score_session(session: TrackedSession) -> int:
    if is_study_session(session):
        study_session = cast(StudySession, session)
        return study_session_points(
            study_session["duration_minutes"],
            study_session["focus_level"],
            study_session["confidence_level"],
            study_session["completed"],
        )
    project_session = cast(ProjectSession, session)
    return project_session_points(
        project_session["duration_minutes"],
        project_session["completed"],
        has_text(project_session["progress"]),
        has_text(project_session["notes"]),
    )


def new_study_session(
    clock: Clock,
    subject: Optional[str] = None,
    topic: Optional[str] = None,
    location: Optional[str] = None,
) -> StudySession:
    session = get_study_session_template()
    session["date"] = clock.today()
    session["subject"] = subject
    session["topic"] = topic
    session["location"] = location
    return session


def new_project_session(clock: Clock, project: Project) -> ProjectSession:
    if project["id"] is None:
        raise SessionValidationError("Project must have an ID")
    if project["status"] != "active":
        raise SessionValidationError(
            f"Project '{project['title']}' is {project['status']} and cannot take new sessions."
        )
    session = get_project_session_template()
    session["project_id"] = project["id"]
    session["date"] = clock.today()
    return session


class SessionTracker(Generic[SessionT]):
    """
    Drives one study or project session through start, pause, resume and end.

    Every transition that changes persisted fields hands the session to the
    store. Out-of-order transitions are ignored, or raise
    InvalidTransitionError when the tracker is strict. tick() only refreshes
    the live counters and never saves.
    """

    def __init__(
        self,
        store: SessionStore[SessionT],
        clock: Optional[Clock] = None,
        strict: bool = False,
    ) -> None:
        self.store = store
        self.clock: Clock = clock if clock is not None else SystemClock()
        self.strict = strict

    def __reject(self, session: SessionT, transition: str, reason: str) -> None:
        message = f"Cannot {transition} session {session['id']}: {reason}."
        if self.strict:
            raise InvalidTransitionError(message)
        logger.debug("Ignored transition. %s", message)

    def __save(self, session: SessionT) -> SessionT:
        saved = self.store.save(session)
        session["id"] = saved["id"]
        return session

    def start(self, session: SessionT) -> SessionT:
        if session["start_time"] is not None:
            self.__reject(session, "start", "it was already started")
            return session

        session["start_time"] = self.clock.now()
        session["is_active"] = True
        session["current_elapsed_minutes"] = 0
        session["duration_minutes"] = 0

        self.__save(session)
        logger.info("Started %s %s", session["entity_type"], session["id"])
        return session

    def pause(self, session: SessionT) -> SessionT:
        if not session["is_active"] or session["start_time"] is None:
            self.__reject(session, "pause", "it is not active")
            return session

        elapsed = minutes_between(session["start_time"], self.clock.now())
        session["current_elapsed_minutes"] = elapsed
        session["duration_minutes"] = elapsed
        session["is_active"] = False

        self.__save(session)
        logger.info(
            "Paused %s %s at %d minutes", session["entity_type"], session["id"], elapsed
        )
        return session

    def resume(self, session: SessionT) -> SessionT:
        if session["is_active"]:
            self.__reject(session, "resume", "it is already active")
            return session
        if session["start_time"] is None:
            self.__reject(session, "resume", "it was never started")
            return session
        if session["completed"]:
            self.__reject(session, "resume", "it has already ended")
            return session

        # Shift the start so that elapsed time continues from the paused snapshot
        session["start_time"] = self.clock.now().subtract(
            minutes=session["current_elapsed_minutes"]
        )
        session["is_active"] = True

        self.__save(session)
        logger.info("Resumed %s %s", session["entity_type"], session["id"])
        return session

    def tick(self, session: SessionT) -> SessionT:
        if session["is_active"] and session["start_time"] is not None:
            elapsed = minutes_between(session["start_time"], self.clock.now())
            session["current_elapsed_minutes"] = elapsed
            session["duration_minutes"] = elapsed
        return session

    def elapsed_minutes(self, session: SessionT) -> int:
        if session["is_active"] and session["start_time"] is not None:
            return minutes_between(session["start_time"], self.clock.now())
        return session["current_elapsed_minutes"]

    def end(self, session: SessionT, details: SessionEnd) -> SessionT:
        if is_study_session(session):
            return self.end_study_session(session, cast(StudySessionEnd, details))
        return self.end_project_session(session, cast(ProjectSessionEnd, details))

    def end_study_session(self, session: SessionT, details: StudySessionEnd) -> SessionT:
        validate_study_session_end(details)
        self.__finish(session)

        study_session = cast(StudySession, session)
        study_session["focus_level"] = details["focus_level"]
        if details.get("confidence_level") is not None:
            study_session["confidence_level"] = cast(int, details["confidence_level"])
        if details.get("notes") is not None:
            study_session["notes"] = details["notes"]

        return self.__score_and_save(session)

    def end_project_session(
        self, session: SessionT, details: ProjectSessionEnd
    ) -> SessionT:
        self.__finish(session)

        project_session = cast(ProjectSession, session)
        if details.get("session_title") is not None:
            project_session["session_title"] = details["session_title"]
        if details.get("objectives") is not None:
            project_session["objectives"] = details["objectives"]
        if details.get("progress") is not None:
            project_session["progress"] = details["progress"]
        if details.get("next_steps") is not None:
            project_session["next_steps"] = details["next_steps"]
        if details.get("challenges") is not None:
            project_session["challenges"] = details["challenges"]
        if details.get("notes") is not None:
            project_session["notes"] = details["notes"]

        return self.__score_and_save(session)

    def __finish(self, session: SessionT) -> None:
        if session["start_time"] is None and self.strict:
            raise InvalidTransitionError(
                f"Cannot end session {session['id']}: it was never started."
            )

        end_time = self.clock.now()
        session["end_time"] = end_time
        session["is_active"] = False
        # Wall-clock start and end are authoritative, not the paused snapshot
        if session["start_time"] is not None:
            duration = minutes_between(session["start_time"], end_time)
            session["duration_minutes"] = duration
            session["current_elapsed_minutes"] = duration
        session["completed"] = True

    def __score_and_save(self, session: SessionT) -> SessionT:
        session["points_earned"] = score_session(session)
        self.__save(session)
        logger.info(
            "Ended %s %s: %d minutes, %d points",
            session["entity_type"],
            session["id"],
            session["duration_minutes"],
            session["points_earned"],
        )
        return session

    def rescore(self, session: SessionT) -> SessionT:
        session["points_earned"] = score_session(session)
        return session

    def update_focus_level(self, session: SessionT, focus_level: int) -> SessionT:
        return self.__update_level(session, "focus_level", "Focus level", focus_level)

    def update_confidence_level(
        self, session: SessionT, confidence_level: int
    ) -> SessionT:
        return self.__update_level(
            session, "confidence_level", "Confidence level", confidence_level
        )

    def __update_level(
        self, session: SessionT, field: str, name: str, value: int
    ) -> SessionT:
        if not is_study_session(session):
            raise SessionValidationError(f"{name} only applies to study sessions.")
        validate_level(name, value)

        study_session = cast(StudySession, session)
        study_session[field] = value  # type: ignore[literal-required]
        # Completed sessions are rescored but stay closed
        if study_session["completed"]:
            self.rescore(session)

        self.__save(session)
        logger.info("Updated %s of session %s to %d", field, session["id"], value)
        return session
