"""Services layer - Business logic"""

from .time_formatter import format_overdue_label, format_relative_time
from .task_store import TaskStore, category_label, due_date_presets
from .goal_store import GoalStore
from .preference_store import PreferenceStore
from .overdue_alert import OverdueAlert
from .tracker import Tracker

__all__ = [
    "format_overdue_label", "format_relative_time",
    "TaskStore", "category_label", "due_date_presets",
    "GoalStore", "PreferenceStore", "OverdueAlert", "Tracker",
]
