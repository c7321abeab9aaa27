"""
Overdue alert pointer.

At most one task is "the alerted task" at any time. The pointer is transient
UI state: it is kept here, next to the store, and never written to the task
snapshot.
"""

import logging
from typing import Optional

from tasktracker.domain.models import Task
from tasktracker.services.task_store import TaskStore

logger = logging.getLogger(__name__)


class OverdueAlert:
    def __init__(self, store: TaskStore):
        self.store = store
        self._task_id: Optional[str] = None

    @property
    def current(self) -> Optional[Task]:
        """
        The alerted task, resolved against the store.

        A task that was deleted or completed since the alert was raised
        clears the pointer.
        """
        if self._task_id is None:
            return None
        task = self.store.get(self._task_id)
        if task is None or task.completed:
            self._task_id = None
            return None
        return task

    def raise_for(self, task_id: str) -> Optional[Task]:
        """Point the alert at task_id; unknown ids leave it unchanged"""
        if self.store.get(task_id) is None:
            return self.current
        self._task_id = task_id
        return self.current

    def dismiss(self) -> None:
        self._task_id = None

    def pick(self, now: Optional[int] = None) -> Optional[Task]:
        """
        Alert the first overdue task (newest first) unless one is already alerted.

        Returns:
            The alerted task, or None if nothing is overdue
        """
        task = self.current
        if task is not None:
            return task
        candidates = self.store.find_overdue_candidates(now)
        if not candidates:
            return None
        self._task_id = candidates[0].id
        logger.debug("Overdue alert raised for task %s", self._task_id)
        return candidates[0]

    def snooze(self, days: int) -> Optional[Task]:
        """Move the alerted task's due date and clear the alert"""
        task = self.current
        if task is None:
            return None
        self.dismiss()
        return self.store.reschedule(task.id, days)
