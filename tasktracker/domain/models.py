"""
Domain Models using Pydantic for validation.

Architecture Decision: Why Pydantic?
Snapshots loaded from storage are untrusted blobs. Pydantic validates them on the
way in and gives us the camelCase field names of the stored format on the way out.

Architecture Decision: Why frozen models?
Stores hand out snapshots. A caller holding a Task must never be able to mutate
the store's state behind its back, so every change goes through model_copy().
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_GOAL_TARGET = 10


class Category(str, Enum):
    """Closed set of task categories"""
    WORK = "work"
    PERSONAL = "personal"
    EXERCISE = "exercise"
    OTHER = "other"


class NotificationKind(str, Enum):
    """Discrete events sent to the notification sink"""
    ADD = "add"
    COMPLETE = "complete"
    DELETE = "delete"


class Task(BaseModel):
    """
    A single to-do item.

    Timestamps are epoch milliseconds. Serialized with by_alias=True the model
    produces the stored field names (createdAt, dueDate).
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    completed: bool = False
    created_at: int = Field(..., alias="createdAt")
    due_date: int = Field(..., alias="dueDate")
    category: Category = Category.WORK

    def is_overdue(self, now: int) -> bool:
        """Overdue means incomplete and strictly past due"""
        return not self.completed and self.due_date < now

    def is_due_between(self, start: int, end: int) -> bool:
        return start <= self.due_date < end


class Goal(BaseModel):
    """
    A bounded progress counter.

    current is kept within [0, target] by GoalStore, which also repairs
    stored snapshots that went below zero.
    """
    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    target: int = Field(default=DEFAULT_GOAL_TARGET, gt=0)
    current: int = 0

    @property
    def progress(self) -> float:
        if self.target == 0:
            return 0.0
        return self.current / self.target

    @property
    def percent(self) -> int:
        return round(self.progress * 100)

    @property
    def is_reached(self) -> bool:
        return self.current >= self.target


class TaskStats(BaseModel):
    """Aggregate counters shown in the dashboard header"""
    total: int = 0
    completed: int = 0
    overdue: int = 0
    due_today: int = 0


class UserPreferences(BaseModel):
    """
    User configuration and preferences.

    Loaded from settings.yaml; the dark mode flag is not here because the user
    toggles it at runtime and it is persisted next to the task data.
    """
    model_config = ConfigDict(from_attributes=True)

    language: str = Field(default="auto", description="UI language: 'en', 'de', or 'auto' (detect from system)")
    sound_enabled: bool = Field(default=True, description="Play a short tone on add/complete/delete")
    sound_volume: float = Field(default=1.0, ge=0.0, le=1.0, description="Master volume for notification tones")
