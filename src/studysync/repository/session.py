# SPDX-License-Identifier: MIT

from typing import Any, Generic

import pendulum

from studysync import configuration, time
from studysync.model.entity_id import EntityId
from studysync.model.project_session import ProjectSession
from studysync.model.study_session import StudySession
from studysync.repository.entity import EntityRepository
from studysync.repository.store import SessionT


class SessionRepository(EntityRepository[SessionT], Generic[SessionT]):
    """Persists study or project sessions, one repository per kind."""

    def _convert_for_serialization(self, record: SessionT) -> dict[str, Any]:
        serializable_session = super()._convert_for_serialization(record)
        serializable_session["date"] = time.date_to_str(serializable_session["date"])
        serializable_session["start_time"] = time.datetime_to_iso_str_optional(
            serializable_session["start_time"]
        )
        serializable_session["end_time"] = time.datetime_to_iso_str_optional(
            serializable_session["end_time"]
        )
        return serializable_session

    def _convert_for_deserialization(self, record: dict[str, Any]) -> SessionT:
        record["date"] = time.date_from_str(record["date"])
        record["start_time"] = time.datetime_from_str_optional(record["start_time"])
        record["end_time"] = time.datetime_from_str_optional(record["end_time"])
        return super()._convert_for_deserialization(record)

    def find_by_date(self, date: pendulum.Date) -> list[SessionT]:
        return sorted(
            [session for session in self.find_all() if session["date"] == date],
            key=lambda session: session["created"],
            reverse=True,
        )

    def find_in_date_range(
        self, start_date: pendulum.Date, end_date: pendulum.Date
    ) -> list[SessionT]:
        return sorted(
            [
                session
                for session in self.find_all()
                if start_date <= session["date"] <= end_date
            ],
            key=lambda session: session["created"],
            reverse=True,
        )

    def find_open(self) -> list[SessionT]:
        """Sessions that were started and have not ended, active or paused."""
        return [
            session
            for session in self.find_all()
            if session["start_time"] is not None and not session["completed"]
        ]

    def find_by_project_id(self, project_id: EntityId) -> list[SessionT]:
        return [
            session
            for session in self.find_all()
            if session.get("project_id") == project_id
        ]


STUDY_SESSION_REPO: SessionRepository[StudySession] = SessionRepository(
    lambda: configuration.DATA_STUDY_SESSIONS_DIR
)
PROJECT_SESSION_REPO: SessionRepository[ProjectSession] = SessionRepository(
    lambda: configuration.DATA_PROJECT_SESSIONS_DIR
)
