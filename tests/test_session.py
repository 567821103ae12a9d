# SPDX-License-Identifier: MIT

import pytest

from studysync.model.entity_type import EntityType
from studysync.service.session import (
    InvalidTransitionError,
    SessionTracker,
    SessionValidationError,
    new_project_session,
    new_study_session,
    validate_level,
)
from studysync.template.project import get_project_template


@pytest.fixture
def tracker(session_store, clock):
    return SessionTracker(session_store, clock)


@pytest.fixture
def strict_tracker(session_store, clock):
    return SessionTracker(session_store, clock, strict=True)


def _end_details(focus_level=4, confidence_level=None, notes=None):
    return {
        "focus_level": focus_level,
        "confidence_level": confidence_level,
        "notes": notes,
    }


def test_new_study_session_is_inactive(clock):
    session = new_study_session(clock, "Maths", "Integrals")

    assert session["entity_type"] == EntityType.STUDY_SESSION
    assert session["date"] == clock.today()
    assert session["is_active"] is False
    assert session["start_time"] is None
    assert session["duration_minutes"] == 0
    assert session["subject"] == "Maths"


def test_start_activates_and_saves(tracker, session_store, clock):
    session = new_study_session(clock)
    tracker.start(session)

    assert session["is_active"] is True
    assert session["start_time"] == clock.now()
    assert session["id"] is not None
    assert session_store.save_count == 1
    assert session_store.find_by_id(session["id"])["is_active"] is True


def test_restart_is_ignored_when_lenient(tracker, session_store, clock):
    session = new_study_session(clock)
    tracker.start(session)
    started_at = session["start_time"]
    clock.advance(minutes=20)

    tracker.start(session)

    assert session["start_time"] == started_at
    assert session_store.save_count == 1


def test_restart_raises_when_strict(strict_tracker, clock):
    session = new_study_session(clock)
    strict_tracker.start(session)

    with pytest.raises(InvalidTransitionError):
        strict_tracker.start(session)


def test_pause_snapshots_elapsed_minutes(tracker, clock):
    session = new_study_session(clock)
    tracker.start(session)
    clock.advance(minutes=25, seconds=59)

    tracker.pause(session)

    assert session["is_active"] is False
    assert session["current_elapsed_minutes"] == 25
    assert session["duration_minutes"] == 25


def test_pause_and_resume_back_to_back_keep_duration(tracker, clock):
    session = new_study_session(clock)
    tracker.start(session)
    clock.advance(minutes=10)

    tracker.pause(session)
    tracker.resume(session)
    tracker.tick(session)

    assert session["duration_minutes"] == 10


def test_elapsed_time_is_additive_across_pauses(tracker, clock):
    session = new_study_session(clock)
    tracker.start(session)

    for _ in range(3):
        clock.advance(minutes=15)
        tracker.pause(session)
        clock.advance(minutes=60)  # paused time is not counted
        tracker.resume(session)

    clock.advance(minutes=5)
    tracker.end_study_session(session, _end_details())

    assert session["duration_minutes"] == 50


def test_pause_of_inactive_session(tracker, strict_tracker, session_store, clock):
    session = new_study_session(clock)

    tracker.pause(session)
    assert session_store.save_count == 0

    with pytest.raises(InvalidTransitionError):
        strict_tracker.pause(session)


@pytest.mark.parametrize("state", ["active", "never_started", "completed"])
def test_resume_rejections(tracker, strict_tracker, session_store, clock, state):
    session = new_study_session(clock)
    if state in ("active", "completed"):
        tracker.start(session)
    if state == "completed":
        tracker.end_study_session(session, _end_details())
    saves = session_store.save_count
    snapshot = dict(session)

    tracker.resume(session)
    assert session == snapshot
    assert session_store.save_count == saves

    with pytest.raises(InvalidTransitionError):
        strict_tracker.resume(session)


def test_tick_updates_counters_without_saving(tracker, session_store, clock):
    session = new_study_session(clock)
    tracker.start(session)
    clock.advance(minutes=7)

    tracker.tick(session)

    assert session["current_elapsed_minutes"] == 7
    assert session["duration_minutes"] == 7
    assert session_store.save_count == 1


def test_tick_on_paused_session_is_a_noop(tracker, clock):
    session = new_study_session(clock)
    tracker.start(session)
    clock.advance(minutes=7)
    tracker.pause(session)
    clock.advance(minutes=30)

    tracker.tick(session)

    assert session["duration_minutes"] == 7
    assert tracker.elapsed_minutes(session) == 7


def test_end_scores_the_session(tracker, session_store, clock):
    session = new_study_session(clock)
    tracker.start(session)
    clock.advance(minutes=45)

    tracker.end_study_session(session, _end_details(4, 5, "good"))

    assert session["completed"] is True
    assert session["is_active"] is False
    assert session["end_time"] == clock.now()
    assert session["points_earned"] == 79
    assert session["notes"] == "good"
    assert session_store.find_by_id(session["id"])["points_earned"] == 79


@pytest.mark.parametrize("state", ["active", "paused", "ended"])
def test_end_always_completes(tracker, clock, state):
    session = new_study_session(clock)
    tracker.start(session)
    clock.advance(minutes=30)
    if state == "paused":
        tracker.pause(session)
    first_end = None
    if state == "ended":
        tracker.end_study_session(session, _end_details())
        first_end = (
            session["duration_minutes"],
            session["end_time"],
            session["points_earned"],
        )

    tracker.end(session, _end_details())

    assert session["completed"] is True
    assert session["is_active"] is False
    assert session["duration_minutes"] == 30
    if first_end is not None:
        assert (
            session["duration_minutes"],
            session["end_time"],
            session["points_earned"],
        ) == first_end


def test_end_of_never_started_session(tracker, strict_tracker, clock):
    session = new_study_session(clock)
    tracker.end(session, _end_details())
    assert session["completed"] is True
    assert session["duration_minutes"] == 0

    with pytest.raises(InvalidTransitionError):
        strict_tracker.end(new_study_session(clock), _end_details())


def test_end_keeps_confidence_when_not_given(tracker, clock):
    session = new_study_session(clock)
    session["confidence_level"] = 2
    tracker.start(session)

    tracker.end_study_session(session, _end_details(confidence_level=None))

    assert session["confidence_level"] == 2


@pytest.mark.parametrize("focus_level", [0, 6, -1])
def test_end_rejects_out_of_range_focus(tracker, session_store, clock, focus_level):
    session = new_study_session(clock)
    tracker.start(session)

    with pytest.raises(SessionValidationError):
        tracker.end_study_session(session, _end_details(focus_level))

    assert session["completed"] is False
    assert session_store.save_count == 1


def test_validate_level_rejects_non_integers():
    with pytest.raises(SessionValidationError):
        validate_level("Focus level", True)
    with pytest.raises(SessionValidationError):
        validate_level("Focus level", 3.0)  # type: ignore[arg-type]
    assert validate_level("Focus level", 5) == 5


def test_focus_update_rescores_without_reopening(tracker, clock):
    session = new_study_session(clock)
    tracker.start(session)
    clock.advance(minutes=45)
    tracker.end_study_session(session, _end_details(4, 5))

    tracker.update_focus_level(session, 2)

    # base 4, focus -20, confidence +25, completion +20
    assert session["points_earned"] == 29
    assert session["completed"] is True
    assert session["is_active"] is False


def test_confidence_update_on_open_session_does_not_score(tracker, clock):
    session = new_study_session(clock)
    tracker.start(session)

    tracker.update_confidence_level(session, 5)

    assert session["confidence_level"] == 5
    assert session["points_earned"] == 0


def test_project_session_end_scores_with_notes(session_store, clock):
    tracker = SessionTracker(session_store, clock)
    project = get_project_template()
    project["id"] = "project-1"
    project["title"] = "Thesis"

    session = new_project_session(clock, project)
    tracker.start(session)
    clock.advance(minutes=95)
    tracker.end(
        session,
        {
            "session_title": "Chapter 2",
            "objectives": None,
            "progress": "Drafted the method",
            "next_steps": None,
            "challenges": None,
            "notes": "  ",
        },
    )

    assert session["project_id"] == "project-1"
    assert session["points_earned"] == 9 + 30 + 20
    assert session["session_title"] == "Chapter 2"


def test_project_session_needs_an_active_project(clock):
    project = get_project_template()
    project["title"] = "Thesis"

    with pytest.raises(SessionValidationError):
        new_project_session(clock, project)

    project["id"] = "project-1"
    project["status"] = "cancelled"
    with pytest.raises(SessionValidationError):
        new_project_session(clock, project)
