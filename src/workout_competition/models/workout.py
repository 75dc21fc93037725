"""Workout record data models."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

# Largest value an SQLite INTEGER column can hold
MAX_COUNT = 2**63 - 1


class Exercise(str, Enum):
    """Tracked bodyweight exercises."""

    PUSHUPS = "pushups"
    PULLUPS = "pullups"
    SITUPS = "situps"
    SQUATS = "squats"

    @property
    def label(self) -> str:
        return self.value.capitalize()


@dataclass(frozen=True)
class WorkoutRecord:
    """One logged workout. Never mutated once stored."""

    user_id: str
    pushups: int
    pullups: int
    situps: int
    squats: int
    created_at: datetime
    id: int | None = None

    def count(self, exercise: Exercise) -> int:
        """Get the logged count for an exercise."""
        return getattr(self, exercise.value)

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON output."""
        return {
            "id": self.id,
            "user_id": self.user_id,
            "pushups": self.pushups,
            "pullups": self.pullups,
            "situps": self.situps,
            "squats": self.squats,
            "created_at": self.created_at.isoformat(),
        }


class WorkoutInput(BaseModel):
    """Counts submitted for a new workout.

    Form input arrives as strings; integral strings such as "12" are
    accepted. Anything negative, fractional, boolean or beyond
    MAX_COUNT is rejected.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    pushups: int = Field(ge=0, le=MAX_COUNT)
    pullups: int = Field(ge=0, le=MAX_COUNT)
    situps: int = Field(ge=0, le=MAX_COUNT)
    squats: int = Field(ge=0, le=MAX_COUNT)

    @field_validator("pushups", "pullups", "situps", "squats", mode="before")
    @classmethod
    def reject_booleans(cls, v):
        if isinstance(v, bool):
            raise ValueError("must be a whole number, not a boolean")
        return v


def format_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into "field: reason" messages."""
    messages = []
    for item in error.errors():
        field = ".".join(str(part) for part in item["loc"]) or "input"
        messages.append(f"{field}: {item['msg']}")
    return "; ".join(messages)
