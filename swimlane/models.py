"""
Event model — the unit scheduled onto a lane.

Events are immutable value objects supplied by the caller. Only the
start/end dates matter to lane assignment; id and name are carried
through for display.
"""

from datetime import date

from pydantic import BaseModel, Field


class Event(BaseModel):
    """A calendar-date interval with a display label."""

    model_config = {"frozen": True, "extra": "forbid"}

    id: int | str
    start_date: date
    end_date: date
    name: str = Field(default="")

    @property
    def duration_days(self) -> int:
        """Inclusive day count (same-day event = 1). Not clamped."""
        return (self.end_date - self.start_date).days + 1

    @property
    def is_well_formed(self) -> bool:
        return self.end_date >= self.start_date

    def __str__(self) -> str:
        label = self.name or str(self.id)
        return f"{label} ({self.start_date.isoformat()}..{self.end_date.isoformat()})"
