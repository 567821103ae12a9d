# SPDX-License-Identifier: MIT

from typing import Optional, Protocol, TypeVar

import pendulum

from studysync.model.entity_id import EntityId
from studysync.model.project_session import ProjectSession
from studysync.model.study_goal import StudyGoal
from studysync.model.study_session import StudySession

SessionT = TypeVar("SessionT", StudySession, ProjectSession)


class SessionStore(Protocol[SessionT]):
    def save(self, session: SessionT) -> SessionT: ...

    def find_by_id(self, id: EntityId) -> Optional[SessionT]: ...

    def find_by_date(self, date: pendulum.Date) -> list[SessionT]: ...

    def delete_by_id(self, id: EntityId) -> bool: ...


class GoalStore(Protocol):
    def find_all(self) -> list[StudyGoal]: ...

    def save(self, goal: StudyGoal) -> StudyGoal: ...

    def find_by_date(self, date: pendulum.Date) -> list[StudyGoal]: ...

    def find_unachieved_by_date(self, date: pendulum.Date) -> list[StudyGoal]: ...
