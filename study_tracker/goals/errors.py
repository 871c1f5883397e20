"""Error types for the goal store.

Distinct error types to separate bad user input from missing goals and
from a broken data file.
"""


class StudyTrackerError(Exception):
    """Base exception for all study tracker errors."""

    pass


class ValidationError(StudyTrackerError):
    """Raised when input is malformed, out of range or a duplicate title.

    This is a user-facing error. The interactive menu re-prompts on it.
    """

    pass


class NotFoundError(StudyTrackerError):
    """Raised when a goal reference does not resolve to a stored goal."""

    def __init__(self, goal_ref: object, message: str | None = None):
        self.goal_ref = goal_ref
        self.message = message or f"No goal found for {goal_ref!r}."
        super().__init__(self.message)


class PersistenceError(StudyTrackerError):
    """Raised when the data file cannot be read, parsed or written.

    Fatal for the process; there is no retry.
    """

    def __init__(self, path: object, message: str):
        self.path = path
        self.message = f"{message} ({path})"
        super().__init__(self.message)
