# SPDX-License-Identifier: MIT

from pathlib import Path

import pendulum
import pytest
from yaml import safe_dump

from studysync import configuration
from studysync.repository.configuration import ConfigurationRepository
from studysync.repository.id_map import IdMapRepository
from studysync.repository.project import ProjectRepository
from studysync.repository.session import SessionRepository
from studysync.repository.study_goal import GoalRepository
from studysync.service.goal import GoalDelayReconciler, new_goal
from studysync.service.project import new_project
from studysync.service.session import SessionTracker, new_study_session


def test_study_session_round_trip(tmp_path: Path, study_session_repo, clock):
    tracker = SessionTracker(study_session_repo, clock)
    session = new_study_session(clock, "Physics", "Optics", "Library")
    tracker.start(session)
    clock.advance(minutes=12)
    tracker.pause(session)

    assert study_session_repo.flush() is True
    assert (tmp_path / "study_sessions" / f"{session['id']}.yaml").is_file()

    reloaded = SessionRepository(lambda: tmp_path / "study_sessions")
    stored = reloaded.get_by_id(session["id"])

    assert stored["subject"] == "Physics"
    assert stored["date"] == pendulum.date(2024, 3, 11)
    assert stored["start_time"] == session["start_time"]
    assert stored["end_time"] is None
    assert stored["is_active"] is False
    assert stored["current_elapsed_minutes"] == 12


def test_flush_without_changes_writes_nothing(study_session_repo):
    assert study_session_repo.flush() is False


def test_records_are_copied_in_and_out(study_session_repo, clock):
    session = new_study_session(clock, "Maths")
    saved = study_session_repo.save(session)

    saved["subject"] = "Changed"
    session["subject"] = "Changed too"

    assert study_session_repo.get_by_id(session["id"])["subject"] == "Maths"


def test_save_assigns_id_once(study_session_repo, clock):
    session = new_study_session(clock)
    study_session_repo.save(session)
    first_id = session["id"]

    study_session_repo.save(session)

    assert session["id"] == first_id
    assert len(study_session_repo.find_all()) == 1


def test_delete_removes_file(tmp_path: Path, study_session_repo, clock):
    session = new_study_session(clock)
    study_session_repo.save(session)
    study_session_repo.flush()

    assert study_session_repo.delete_by_id(session["id"]) is True
    assert study_session_repo.delete_by_id(session["id"]) is False
    study_session_repo.flush()

    assert not (tmp_path / "study_sessions" / f"{session['id']}.yaml").exists()
    assert study_session_repo.find_by_id(session["id"]) is None
    with pytest.raises(KeyError):
        study_session_repo.get_by_id(session["id"])


def test_find_open_and_by_date(study_session_repo, clock):
    tracker = SessionTracker(study_session_repo, clock)
    open_session = new_study_session(clock)
    tracker.start(open_session)
    ended = new_study_session(clock)
    tracker.start(ended)
    tracker.end(ended, {"focus_level": 3, "confidence_level": None, "notes": None})
    study_session_repo.save(new_study_session(clock))

    assert [s["id"] for s in study_session_repo.find_open()] == [open_session["id"]]
    assert len(study_session_repo.find_by_date(clock.today())) == 3
    assert study_session_repo.find_by_date(clock.today().add(days=1)) == []


def test_goal_round_trip(tmp_path: Path, goal_repo):
    goal = new_goal("Finish problem set", pendulum.date(2024, 3, 8), "task-42")
    goal["is_delayed"] = True
    goal["days_delayed"] = 3
    goal["points_deducted"] = 9
    goal_repo.save(goal)
    goal_repo.flush()

    reloaded = GoalRepository(lambda: tmp_path / "goals")
    (stored,) = reloaded.find_all()

    assert stored["date"] == pendulum.date(2024, 3, 8)
    assert stored["task_ref"] == "task-42"
    assert stored["points_deducted"] == 9
    assert reloaded.find_delayed()[0]["id"] == goal["id"]
    assert reloaded.find_unachieved_by_date(pendulum.date(2024, 3, 8))[0]["id"] == (
        goal["id"]
    )


def test_project_round_trip(tmp_path: Path, project_repo):
    project = new_project("Thesis", "Masters thesis", pendulum.date(2024, 6, 30))
    project_repo.save(project)
    project_repo.flush()

    reloaded = ProjectRepository(lambda: tmp_path / "projects")
    (stored,) = reloaded.find_active()

    assert stored["title"] == "Thesis"
    assert stored["target_end_date"] == pendulum.date(2024, 6, 30)
    assert stored["last_worked_on"] is None


def test_id_map_assigns_stable_synthetic_ids(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(configuration, "DATA_ID_MAP_PATH", tmp_path / "id_map.yaml")
    id_map = IdMapRepository()

    assert id_map.associate_id("goals", "goal-a") == 1
    assert id_map.associate_id("goals", "goal-b") == 2
    assert id_map.associate_id("goals", "goal-a") == 1
    assert id_map.associate_id("projects", "project-a") == 1
    assert id_map.flush() is True

    reloaded = IdMapRepository()
    assert reloaded.get_real_id("goals", 2) == "goal-b"
    with pytest.raises(KeyError):
        reloaded.get_real_id("goals", 3)
    with pytest.raises(TypeError):
        reloaded.associate_id("tasks", "task-a")


def test_configuration_back_fills_defaults(tmp_path: Path, monkeypatch):
    config_path = tmp_path / "config.yaml"
    config_path.write_text(safe_dump({"strict_transitions": True}))
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", config_path)

    repo = ConfigurationRepository()
    config = repo.get_config()

    assert config["strict_transitions"] is True
    assert config["reconcile_on_startup"] is True
    assert config["log_level"] == "INFO"

    repo.update_config(log_level="DEBUG", show_header=False)
    assert repo.flush() is True
    assert ConfigurationRepository().get_config()["log_level"] == "DEBUG"


def test_corrupt_goal_files_do_not_stop_reconciliation(tmp_path: Path, goal_repo):
    good = new_goal("Finish problem set", pendulum.date(2024, 3, 8))
    goal_repo.save(good)
    goal_repo.flush()

    goals_dir = tmp_path / "goals"
    good_text = (goals_dir / f"{good['id']}.yaml").read_text()
    (goals_dir / "bad-date.yaml").write_text(
        good_text.replace(good["id"], "bad-date").replace("2024-03-08", "not-a-date")
    )
    (goals_dir / "bad-yaml.yaml").write_text("date: [unclosed\n")

    reloaded = GoalRepository(lambda: goals_dir)
    result = GoalDelayReconciler(reloaded).reconcile(pendulum.date(2024, 3, 11))

    assert result["delayed"] == 1
    (stored,) = reloaded.find_all()
    assert stored["id"] == good["id"]
    assert stored["days_delayed"] == 3
    assert (goals_dir / "bad-date.yaml").is_file()
