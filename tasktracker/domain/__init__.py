"""Domain layer - Pure business entities and logic"""

from .models import Category, Goal, NotificationKind, Task, TaskStats, UserPreferences
from .exceptions import (
    NotFound,
    PersistenceCorrupt,
    PersistenceUnavailable,
    TrackerError,
    ValidationRejected,
)

__all__ = [
    "Category", "Goal", "NotificationKind", "Task", "TaskStats", "UserPreferences",
    "NotFound", "PersistenceCorrupt", "PersistenceUnavailable", "TrackerError", "ValidationRejected",
]
