# SPDX-License-Identifier: MIT

"""Pytest fixtures for studysync tests."""

from copy import deepcopy
from pathlib import Path
from typing import Iterator, Optional

import pendulum
import pytest

from studysync import configuration
from studysync.model.entity_id import EntityId, generate_entity_id
from studysync.model.project_session import ProjectSession
from studysync.model.study_goal import StudyGoal
from studysync.model.study_session import StudySession
from studysync.repository.configuration import CONFIGURATION_REPO
from studysync.repository.daily_reflection import REFLECTION_REPO, ReflectionRepository
from studysync.repository.id_map import ID_MAP_REPO
from studysync.repository.project import PROJECT_REPO, ProjectRepository
from studysync.repository.session import (
    PROJECT_SESSION_REPO,
    STUDY_SESSION_REPO,
    SessionRepository,
)
from studysync.repository.study_goal import GOAL_REPO, GoalRepository
from studysync.view import state as view_state

START = pendulum.datetime(2024, 3, 11, 9, 0, 0, tz="UTC")


class FakeClock:
    """Clock that only moves when a test moves it."""

    def __init__(self, current: pendulum.DateTime = START) -> None:
        self.current = current

    def now(self) -> pendulum.DateTime:
        return self.current

    def today(self) -> pendulum.Date:
        return self.current.date()

    def advance(self, days: int = 0, minutes: int = 0, seconds: int = 0) -> None:
        self.current = self.current.add(days=days, minutes=minutes, seconds=seconds)


class RecordingSessionStore:
    """In-memory session store that counts writes."""

    def __init__(self) -> None:
        self.sessions: dict[EntityId, dict] = {}
        self.save_count = 0

    def save(self, session):
        self.save_count += 1
        if session["id"] is None:
            session["id"] = generate_entity_id()
        self.sessions[session["id"]] = deepcopy(session)
        return deepcopy(session)

    def find_by_id(self, id: EntityId):
        session = self.sessions.get(id)
        return deepcopy(session) if session is not None else None

    def find_by_date(self, date: pendulum.Date):
        return [deepcopy(s) for s in self.sessions.values() if s["date"] == date]

    def delete_by_id(self, id: EntityId) -> bool:
        return self.sessions.pop(id, None) is not None


class RecordingGoalStore:
    """In-memory goal store that counts writes."""

    def __init__(self, goals: Optional[list[StudyGoal]] = None) -> None:
        self.goals: dict[EntityId, StudyGoal] = {}
        self.save_count = 0
        for goal in goals or []:
            if goal["id"] is None:
                goal["id"] = generate_entity_id()
            self.goals[goal["id"]] = deepcopy(goal)

    def find_all(self) -> list[StudyGoal]:
        return [deepcopy(goal) for goal in self.goals.values()]

    def save(self, goal: StudyGoal) -> StudyGoal:
        self.save_count += 1
        if goal["id"] is None:
            goal["id"] = generate_entity_id()
        self.goals[goal["id"]] = deepcopy(goal)
        return deepcopy(goal)

    def find_by_date(self, date: pendulum.Date) -> list[StudyGoal]:
        return [goal for goal in self.find_all() if goal["date"] == date]

    def find_unachieved_by_date(self, date: pendulum.Date) -> list[StudyGoal]:
        return [goal for goal in self.find_by_date(date) if not goal["achieved"]]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def session_store() -> RecordingSessionStore:
    return RecordingSessionStore()


@pytest.fixture
def goal_store() -> RecordingGoalStore:
    return RecordingGoalStore()


@pytest.fixture
def study_session_repo(tmp_path: Path) -> SessionRepository[StudySession]:
    return SessionRepository(lambda: tmp_path / "study_sessions")


@pytest.fixture
def project_session_repo(tmp_path: Path) -> SessionRepository[ProjectSession]:
    return SessionRepository(lambda: tmp_path / "project_sessions")


@pytest.fixture
def goal_repo(tmp_path: Path) -> GoalRepository:
    return GoalRepository(lambda: tmp_path / "goals")


@pytest.fixture
def project_repo(tmp_path: Path) -> ProjectRepository:
    return ProjectRepository(lambda: tmp_path / "projects")


@pytest.fixture
def reflection_repo(tmp_path: Path) -> ReflectionRepository:
    return ReflectionRepository(lambda: tmp_path / "reflections")


@pytest.fixture
def cli_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Point every module-level repository at an empty data directory."""
    data_path = tmp_path / "data"
    monkeypatch.setattr(
        configuration, "APP_CONFIG_PATH", tmp_path / "config" / "config.yaml"
    )
    monkeypatch.setattr(configuration, "LOG_PATH", tmp_path / "log")
    monkeypatch.setattr(
        configuration, "LOG_FILE_PATH", tmp_path / "log" / "studysync.log"
    )
    monkeypatch.setattr(configuration, "DATA_PATH", data_path)
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", data_path / "id_map.yaml")
    monkeypatch.setattr(
        configuration, "DATA_STUDY_SESSIONS_DIR", data_path / "study_sessions"
    )
    monkeypatch.setattr(
        configuration, "DATA_PROJECT_SESSIONS_DIR", data_path / "project_sessions"
    )
    monkeypatch.setattr(configuration, "DATA_GOALS_DIR", data_path / "goals")
    monkeypatch.setattr(configuration, "DATA_PROJECTS_DIR", data_path / "projects")
    monkeypatch.setattr(
        configuration, "DATA_REFLECTIONS_DIR", data_path / "reflections"
    )

    for repo in (
        STUDY_SESSION_REPO,
        PROJECT_SESSION_REPO,
        GOAL_REPO,
        PROJECT_REPO,
        REFLECTION_REPO,
    ):
        monkeypatch.setattr(repo, "_records", None)
        monkeypatch.setattr(repo, "_dirty_ids", set())
        monkeypatch.setattr(repo, "_deleted_ids", set())
        monkeypatch.setattr(repo, "is_dirty", False)
    monkeypatch.setattr(ID_MAP_REPO, "_id_map", None)
    monkeypatch.setattr(ID_MAP_REPO, "is_dirty", False)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)

    view_state.set_show_header(False)
    yield tmp_path
    view_state.set_show_header(True)


@pytest.fixture
def make_goal_store() -> type[RecordingGoalStore]:
    return RecordingGoalStore
