"""
Tracker - Wires the stores together.

Architecture Decision: Facade
An entry point (or a UI) builds one Tracker from Settings and talks to its
stores. Building the gateway and the sink in one place keeps all stores on
the same storage medium.
"""

import logging
from typing import Optional

from tasktracker.domain.clock import Clock, now_ms
from tasktracker.domain.exceptions import NotFound
from tasktracker.domain.models import Goal, Task
from tasktracker.i18n import set_language, tr
from tasktracker.infra.config import Settings
from tasktracker.infra.gateway import PersistenceGateway, build_gateway
from tasktracker.infra.sound import NotificationSink, build_sink
from tasktracker.services.goal_store import GoalStore
from tasktracker.services.overdue_alert import OverdueAlert
from tasktracker.services.preference_store import PreferenceStore
from tasktracker.services.task_store import TaskStore

logger = logging.getLogger(__name__)


class Tracker:
    """
    Owns the task, goal and preference stores of one session.
    """

    def __init__(self, gateway: PersistenceGateway, sink: Optional[NotificationSink] = None,
                 tasks_key: str = "todos", goals_key: str = "goals",
                 dark_mode_key: str = "darkMode", clock: Clock = now_ms):
        self.gateway = gateway
        self.tasks = TaskStore(gateway, sink=sink, key=tasks_key, clock=clock)
        self.goals = GoalStore(gateway, key=goals_key)
        self.preferences = PreferenceStore(gateway, key=dark_mode_key)
        self.alert = OverdueAlert(self.tasks)

    @classmethod
    def from_settings(cls, settings: Settings, clock: Clock = now_ms,
                      sink: Optional[NotificationSink] = None) -> "Tracker":
        """
        Build gateway, sink and stores as configured.

        An explicit sink replaces the one selected by the sound preferences.

        Also applies the configured language so labels come out localized.
        """
        set_language(settings.preferences.language)
        gateway = build_gateway(settings)
        logger.info("Storage backend: %s", settings.storage_backend)
        return cls(
            gateway,
            sink=sink if sink is not None else build_sink(settings),
            tasks_key=settings.tasks_key,
            goals_key=settings.goals_key,
            dark_mode_key=settings.dark_mode_key,
            clock=clock,
        )

    def require_task(self, task_id: str) -> Task:
        """
        Raises:
            NotFound: no task with this id
        """
        task = self.tasks.get(task_id)
        if task is None:
            raise NotFound("Task", task_id)
        return task

    def require_goal(self, goal_id: str) -> Goal:
        """
        Raises:
            NotFound: no goal with this id
        """
        goal = self.goals.get(goal_id)
        if goal is None:
            raise NotFound("Goal", goal_id)
        return goal

    def headline(self) -> str:
        """Line under the title: X of Y completed"""
        return tr("summary.completed_of", completed=self.tasks.completed_count, total=len(self.tasks))

    def close(self) -> None:
        self.gateway.close()
