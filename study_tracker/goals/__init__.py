"""Goals module - study goals, logged sessions and their JSON store.

This module provides:
- The immutable Goal record with derived progress
- GoalStore, the read-modify-write store over one JSON file
- Terminal-independent commands used by the CLI
"""

from study_tracker.goals.commands import CommandResult, add_goal, delete_goal, log_session
from study_tracker.goals.errors import NotFoundError, PersistenceError, StudyTrackerError, ValidationError
from study_tracker.goals.models import Goal
from study_tracker.goals.store import GoalRef, GoalStore

__all__ = [
    "CommandResult",
    "Goal",
    "GoalRef",
    "GoalStore",
    "NotFoundError",
    "PersistenceError",
    "StudyTrackerError",
    "ValidationError",
    "add_goal",
    "delete_goal",
    "log_session",
]
