"""Goal store backed by a single JSON file.

Every operation reads the whole collection, applies one change and writes
the whole collection back. Only one process is expected to use a data file
at a time; concurrent writers overwrite each other.
"""

from __future__ import annotations

import math
from pathlib import Path

import pydantic
from loguru import logger
from pydantic import TypeAdapter

from study_tracker.goals.errors import NotFoundError, PersistenceError, ValidationError
from study_tracker.goals.models import Goal

GoalRef = int | str

_GOALS_ADAPTER = TypeAdapter(list[Goal])


def _is_number(value: object) -> bool:
    if isinstance(value, bool) or not isinstance(value, int | float):
        return False
    return math.isfinite(value)


class GoalStore:
    """Owns the ordered collection of goals persisted at ``path``.

    Goals are addressed by a GoalRef: either a 1-based position in list()
    order or a title, matched case-insensitively.
    """

    def __init__(self, path: str | Path):
        self.path = Path(path)

    # === Persistence ===

    def _load(self) -> list[Goal]:
        """Read all goals, initializing an empty file on first access."""
        if not self.path.exists():
            logger.info(f"No data file at {self.path}, initializing empty goal list")
            self._save([])
            return []

        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise PersistenceError(self.path, f"Could not read data file: {e}") from e

        try:
            goals = _GOALS_ADAPTER.validate_json(raw)
        except pydantic.ValidationError as e:
            raise PersistenceError(self.path, f"Data file is corrupt: {e.error_count()} invalid value(s)") from e

        logger.debug(f"Loaded {len(goals)} goal(s) from {self.path}")
        return goals

    def _save(self, goals: list[Goal]) -> None:
        """Write all goals atomically through a sibling temp file."""
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_bytes(_GOALS_ADAPTER.dump_json(goals, by_alias=True, indent=2))
            tmp.replace(self.path)
        except OSError as e:
            tmp.unlink(missing_ok=True)
            raise PersistenceError(self.path, f"Could not write data file: {e}") from e
        logger.debug(f"Saved {len(goals)} goal(s) to {self.path}")

    @staticmethod
    def _index_of(goals: list[Goal], goal_ref: GoalRef) -> int:
        if isinstance(goal_ref, bool):
            raise NotFoundError(goal_ref)
        if isinstance(goal_ref, int):
            if 1 <= goal_ref <= len(goals):
                return goal_ref - 1
            raise NotFoundError(goal_ref, f"No goal at position {goal_ref}.")
        if isinstance(goal_ref, str):
            for index, goal in enumerate(goals):
                if goal.matches_title(goal_ref):
                    return index
            raise NotFoundError(goal_ref, f'No goal titled "{goal_ref}".')
        raise NotFoundError(goal_ref)

    # === Operations ===

    def list(self) -> list[Goal]:
        """Return all goals in insertion order."""
        return self._load()

    def get(self, goal_ref: GoalRef) -> Goal:
        goals = self._load()
        return goals[self._index_of(goals, goal_ref)]

    def create(self, title: str, weekly_goal: float, weeks: int) -> Goal:
        """Create a goal and append it to the collection.

        Args:
            title: Goal title, unique case-insensitively
            weekly_goal: Positive hours per week
            weeks: Positive whole number of weeks

        Returns:
            The new goal, with total_goal = weekly_goal * weeks

        Raises:
            ValidationError: If any argument is empty or non-positive, the total
                overflows, or the title is taken
        """
        title = title.strip() if isinstance(title, str) else ""
        if not title:
            raise ValidationError("Title cannot be empty.")
        if not _is_number(weekly_goal) or weekly_goal <= 0:
            raise ValidationError("Weekly goal should be a positive number.")
        if not _is_number(weeks) or weeks <= 0:
            raise ValidationError("Duration should be a positive number.")
        if isinstance(weeks, float):
            if not weeks.is_integer():
                raise ValidationError("Duration should be a whole number of weeks.")
            weeks = int(weeks)
        if not math.isfinite(weekly_goal * weeks):
            raise ValidationError("Total goal is too large; use a smaller weekly goal or duration.")

        goals = self._load()
        if any(goal.matches_title(title) for goal in goals):
            raise ValidationError("A goal with this title already exists.")

        goal = Goal.create(title, weekly_goal, weeks)
        goals.append(goal)
        self._save(goals)
        logger.info(f"Created goal: {goal.title} ({goal.weekly_goal}h x {goal.weeks} weeks = {goal.total_goal}h)")
        return goal

    def log_session(self, goal_ref: GoalRef, hours: float) -> Goal:
        """Append a study session to a goal.

        Completion (progress >= total_goal) is not an error; callers check
        ``Goal.is_complete`` on the returned record.

        Raises:
            NotFoundError: If goal_ref does not resolve
            ValidationError: If hours is not a positive number or would make progress overflow
        """
        goals = self._load()
        index = self._index_of(goals, goal_ref)
        if not _is_number(hours) or hours <= 0:
            raise ValidationError("Hours should be a positive number.")
        if not math.isfinite(goals[index].progress + hours):
            raise ValidationError("Hours are too large; total progress would overflow.")

        goal = goals[index].with_session(hours)
        goals[index] = goal
        self._save(goals)
        logger.bind(title=goal.title, hours=hours).info(
            f"Logged session: {goal.progress}/{goal.total_goal}h ({goal.progress_percent}%)"
        )
        return goal

    def delete(self, goal_ref: GoalRef) -> Goal:
        """Remove a goal and return the removed record.

        Raises:
            NotFoundError: If goal_ref does not resolve
        """
        goals = self._load()
        removed = goals.pop(self._index_of(goals, goal_ref))
        self._save(goals)
        logger.info(f"Deleted goal: {removed.title}")
        return removed

    @staticmethod
    def progress_percent(goal: Goal) -> float:
        """(progress / total_goal) * 100, rounded to two decimals."""
        return goal.progress_percent
