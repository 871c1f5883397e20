"""Progress rendering helpers for the CLI."""

import math

from study_tracker.goals.models import Goal

BAR_WIDTH = 20
FILLED_CELL = "█"
EMPTY_CELL = "░"


def format_percent(percentage: float) -> str:
    return f"{percentage:.2f}"


def progress_bar(percentage: float, width: int = BAR_WIDTH) -> str:
    """Render a fixed-width bar such as ``[█████░░░░░░░░░░░░░░░] 25.00%``.

    The filled cell count rounds half up and is clamped to 0..width, so
    goals past 100% (or with a non-finite percentage) show a full bar.
    """
    if math.isfinite(percentage):
        filled = max(0, min(width, math.floor((percentage / 100) * width + 0.5)))
    else:
        filled = width
    bar = FILLED_CELL * filled + EMPTY_CELL * (width - filled)
    return f"[{bar}] {format_percent(percentage)}%"


def goal_choices(goals: list[Goal]) -> list[str]:
    """Numbered labels used by goal selection lists, e.g. ``1. Math``."""
    return [f"{index}. {goal.title}" for index, goal in enumerate(goals, start=1)]
