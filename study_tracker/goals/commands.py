"""Terminal-independent commands over the goal store.

Presentation layers (the interactive menu, one-shot CLI commands) pass raw
text or already-parsed values in and get typed values, ValidationError
messages or a CommandResult back. Nothing here reads from or writes to a
terminal.
"""

import math
from dataclasses import dataclass

from loguru import logger

from study_tracker.goals.errors import NotFoundError, ValidationError
from study_tracker.goals.models import Goal
from study_tracker.goals.store import GoalRef, GoalStore

RawNumber = str | int | float


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a command.

    Attributes:
        ok: Whether the command succeeded
        message: Human-readable outcome or error message
        goal: Goal created, updated or removed (None on failure)
        goal_completed: True when a logged session brought progress to total_goal
    """

    ok: bool
    message: str
    goal: Goal | None = None
    goal_completed: bool = False


def format_hours(value: float) -> str:
    """Render hours with at most two decimals and no trailing zeros."""
    return f"{value:.2f}".rstrip("0").rstrip(".")


def _parse_positive(raw: RawNumber, label: str) -> float:
    if isinstance(raw, bool):
        raise ValidationError(f"{label} should be a number.")
    try:
        number = float(raw.strip() if isinstance(raw, str) else raw)
    except (TypeError, ValueError):
        raise ValidationError(f"{label} should be a number.") from None
    if not math.isfinite(number):
        raise ValidationError(f"{label} should be a number.")
    if number <= 0:
        raise ValidationError(f"{label} should be a positive number.")
    return number


def parse_title(raw: str) -> str:
    title = (raw or "").strip()
    if not title:
        raise ValidationError("Title cannot be empty.")
    return title


def check_title_available(store: GoalStore, raw: str) -> str:
    """Parse a title and reject it if a goal already uses it (any case)."""
    title = parse_title(raw)
    if any(goal.matches_title(title) for goal in store.list()):
        raise ValidationError("A goal with this title already exists.")
    return title


def parse_weekly_goal(raw: RawNumber) -> float:
    return _parse_positive(raw, "Weekly goal")


def parse_weeks(raw: RawNumber) -> int:
    weeks = _parse_positive(raw, "Duration")
    if not weeks.is_integer():
        raise ValidationError("Duration should be a whole number of weeks.")
    return int(weeks)


def parse_hours(raw: RawNumber) -> float:
    return _parse_positive(raw, "Hours")


def parse_goal_ref(raw: GoalRef) -> GoalRef:
    """Digits select by 1-based position; anything else is a title."""
    if isinstance(raw, int):
        return raw
    text = (raw or "").strip()
    if text.isdigit():
        return int(text)
    return text


def add_goal(store: GoalStore, title: str, weekly_goal: RawNumber, weeks: RawNumber) -> CommandResult:
    try:
        goal = store.create(
            check_title_available(store, title),
            parse_weekly_goal(weekly_goal),
            parse_weeks(weeks),
        )
    except ValidationError as e:
        logger.debug(f"add_goal rejected: {e}")
        return CommandResult(ok=False, message=str(e))
    return CommandResult(ok=True, message="Goal added successfully!", goal=goal)


def log_session(store: GoalStore, goal_ref: GoalRef, hours: RawNumber) -> CommandResult:
    """Log hours against a goal and report whether it is now complete."""
    try:
        goal = store.log_session(parse_goal_ref(goal_ref), parse_hours(hours))
    except (ValidationError, NotFoundError) as e:
        logger.debug(f"log_session rejected: {e}")
        return CommandResult(ok=False, message=str(e))
    return CommandResult(
        ok=True,
        message=f'Logged {format_hours(goal.sessions[-1])} hours for "{goal.title}".',
        goal=goal,
        goal_completed=goal.is_complete,
    )


def delete_goal(store: GoalStore, goal_ref: GoalRef) -> CommandResult:
    try:
        goal = store.delete(parse_goal_ref(goal_ref))
    except NotFoundError as e:
        logger.debug(f"delete_goal rejected: {e}")
        return CommandResult(ok=False, message=str(e))
    return CommandResult(ok=True, message=f'Deleted goal "{goal.title}".', goal=goal)
