"""Calendar snapshots: candidate availability and project time windows."""

from datetime import date

from pydantic import BaseModel, model_validator


class AvailabilityWindow(BaseModel):
    """A period in which a candidate can be staffed (both dates inclusive)."""
    available_from: date
    available_to: date

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def _check_order(self) -> "AvailabilityWindow":
        if self.available_from > self.available_to:
            raise ValueError(
                f"available_from {self.available_from} is after available_to {self.available_to}"
            )
        return self


class TimeWindow(BaseModel):
    """The active period of a project.

    No ordering check: a zero or negative length window is a known data edge
    case and is scored as fully available.
    """
    start: date
    end: date

    model_config = {"frozen": True}

    @property
    def days(self) -> int:
        return (self.end - self.start).days
