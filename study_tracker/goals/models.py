"""Goal record.

A goal is an immutable record: raw session entries are stored, while
progress, percentage and completion are derived on read. Appending a
session yields a new record, so totals can never drift from the sessions
they are computed from.

Serialized field names (weeklyGoal, totalGoal, ...) match the on-disk
JSON layout.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, computed_field, model_validator

# Positive and finite; infinity would be written to JSON as null
Hours = Annotated[float, Field(gt=0, allow_inf_nan=False)]


class Goal(BaseModel):
    """A tracked study target with a weekly-hour rate and a duration.

    Attributes:
        title: Unique (case-insensitive) goal title
        weekly_goal: Target hours per week
        weeks: Duration of the goal in weeks
        total_goal: Target total hours, fixed at creation (weekly_goal * weeks)
        sessions: Logged hours, in the order they were logged
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: str = Field(min_length=1)
    weekly_goal: Hours = Field(alias="weeklyGoal")
    weeks: PositiveInt
    total_goal: Hours = Field(alias="totalGoal")
    sessions: tuple[Hours, ...] = ()

    @model_validator(mode="before")
    @classmethod
    def fill_total_goal(cls, data: Any) -> Any:
        """Derive totalGoal for records written without one."""
        if not isinstance(data, dict):
            return data
        if "totalGoal" in data or "total_goal" in data:
            return data
        weekly = data.get("weeklyGoal", data.get("weekly_goal"))
        weeks = data.get("weeks")
        if isinstance(weekly, int | float) and isinstance(weeks, int | float):
            return {**data, "totalGoal": weekly * weeks}
        return data

    @classmethod
    def create(cls, title: str, weekly_goal: float, weeks: int) -> "Goal":
        """Build a new goal with no sessions."""
        return cls(
            title=title,
            weekly_goal=weekly_goal,
            weeks=weeks,
            total_goal=weekly_goal * weeks,
        )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def progress(self) -> float:
        """Cumulative hours logged, summed fresh from sessions."""
        return sum(self.sessions, 0.0)

    @property
    def progress_percent(self) -> float:
        """Progress as a percentage of total_goal, rounded to two decimals."""
        return round((self.progress / self.total_goal) * 100, 2)

    @property
    def is_complete(self) -> bool:
        return self.progress >= self.total_goal

    def with_session(self, hours: float) -> "Goal":
        """Return a copy of this goal with one more logged session."""
        return self.model_copy(update={"sessions": (*self.sessions, float(hours))})

    def matches_title(self, title: str) -> bool:
        return self.title.casefold() == title.strip().casefold()
