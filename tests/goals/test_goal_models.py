"""Tests for the Goal record.

Tests cover:
- totalGoal fixed at creation as weekly_goal * weeks
- progress and percentage derived from sessions on read
- immutability (appending a session yields a new record)
- on-disk field names and loading of older records
"""

import pydantic
import pytest

from study_tracker.goals.models import Goal


@pytest.mark.parametrize(
    ("weekly_goal", "weeks"),
    [(5, 2), (2.5, 4), (0.75, 12), (10, 1)],
)
def test_total_goal_is_weekly_goal_times_weeks(weekly_goal: float, weeks: int):
    """Test that total_goal equals weekly_goal * weeks exactly."""
    goal = Goal.create("Math", weekly_goal, weeks)
    assert goal.total_goal == weekly_goal * weeks


def test_new_goal_has_no_progress():
    goal = Goal.create("Math", 5, 2)
    assert goal.sessions == ()
    assert goal.progress == 0
    assert goal.progress_percent == 0
    assert not goal.is_complete


def test_with_session_returns_new_record():
    """Test that appending a session leaves the original record untouched."""
    goal = Goal.create("Math", 5, 2)
    updated = goal.with_session(3)

    assert updated.sessions == (3.0,)
    assert updated.progress == 3
    assert goal.sessions == ()
    assert updated.total_goal == goal.total_goal


def test_goal_is_frozen():
    goal = Goal.create("Math", 5, 2)
    with pytest.raises(pydantic.ValidationError):
        goal.weeks = 3


def test_progress_is_sum_of_sessions():
    goal = Goal.create("Math", 5, 2)
    for hours in (1.5, 2.25, 0.5):
        goal = goal.with_session(hours)
    assert goal.progress == 1.5 + 2.25 + 0.5


@pytest.mark.parametrize(
    ("sessions", "total", "expected"),
    [
        ((5,), 20, 25.0),
        ((1,), 3, 33.33),
        ((2,), 3, 66.67),
        ((10, 15), 20, 125.0),
    ],
)
def test_progress_percent_rounds_to_two_decimals(sessions: tuple, total: float, expected: float):
    goal = Goal.create("Math", total, 1)
    for hours in sessions:
        goal = goal.with_session(hours)
    assert goal.progress_percent == expected


def test_progress_percent_formats_as_two_decimals():
    goal = Goal.create("Math", 10, 2).with_session(5)
    assert f"{goal.progress_percent:.2f}" == "25.00"


def test_is_complete_when_progress_reaches_total():
    goal = Goal.create("Math", 2, 1).with_session(1.5)
    assert not goal.is_complete
    assert goal.with_session(0.5).is_complete


def test_matches_title_ignores_case_and_whitespace():
    goal = Goal.create("Math", 5, 2)
    assert goal.matches_title("math")
    assert goal.matches_title("  MATH ")
    assert not goal.matches_title("Maths")


def test_serializes_with_file_field_names():
    goal = Goal.create("Math", 5, 2).with_session(3)
    data = goal.model_dump(by_alias=True)

    assert set(data) == {"title", "weeklyGoal", "weeks", "totalGoal", "progress", "sessions"}
    assert data["totalGoal"] == 10
    assert data["progress"] == 3
    assert data["sessions"] == (3.0,)


def test_stored_progress_is_ignored_on_load():
    """Test that progress is recomputed from sessions, never trusted from disk."""
    goal = Goal.model_validate(
        {"title": "Math", "weeklyGoal": 5, "weeks": 2, "totalGoal": 10, "progress": 99, "sessions": [1, 2]}
    )
    assert goal.progress == 3


def test_missing_total_goal_is_derived_on_load():
    goal = Goal.model_validate({"title": "Math", "weeklyGoal": 2.5, "weeks": 4, "sessions": []})
    assert goal.total_goal == 10


@pytest.mark.parametrize(
    "record",
    [
        {"title": "", "weeklyGoal": 5, "weeks": 2, "totalGoal": 10, "sessions": []},
        {"title": "Math", "weeklyGoal": -5, "weeks": 2, "totalGoal": 10, "sessions": []},
        {"title": "Math", "weeklyGoal": 5, "weeks": 0, "totalGoal": 10, "sessions": []},
        {"title": "Math", "weeklyGoal": 5, "weeks": 2, "totalGoal": 10, "sessions": [1, -2]},
        {"title": "Math", "weeklyGoal": float("inf"), "weeks": 2, "totalGoal": 10, "sessions": []},
        {"title": "Math", "weeklyGoal": 5, "weeks": 2, "totalGoal": float("inf"), "sessions": []},
        {"title": "Math", "weeklyGoal": 5, "weeks": 2, "totalGoal": 10, "sessions": [float("nan")]},
    ],
)
def test_invalid_records_are_rejected(record: dict):
    with pytest.raises(pydantic.ValidationError):
        Goal.model_validate(record)
