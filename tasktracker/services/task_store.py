"""
Task Store - Owns the task collection.

Architecture Decision: Snapshot state, derived views on demand
The store keeps an immutable tuple of frozen Task models. Every mutation
builds a new tuple and writes the whole collection back to the gateway.
Filtered lists and statistics depend on "now", so they are recomputed on each
call and never cached.
"""

import logging
import uuid
from typing import Iterable, List, Optional, Tuple, Union

from pydantic import TypeAdapter

from tasktracker.domain.clock import Clock, DAY_MS, days_from, now_ms, start_of_day, start_of_next_day
from tasktracker.domain.exceptions import ValidationRejected
from tasktracker.domain.models import Category, NotificationKind, Task, TaskStats
from tasktracker.i18n import tr
from tasktracker.infra.gateway import PersistenceGateway
from tasktracker.infra.sound import NotificationSink, NullNotificationSink
from tasktracker.services.snapshots import load_snapshot, save_snapshot

logger = logging.getLogger(__name__)

TASK_LIST = TypeAdapter(List[Task])

# (translation key, days from now) offered by the due date menu
DUE_DATE_PRESETS: Tuple[Tuple[str, int], ...] = (
    ("due.tomorrow", 1),
    ("due.3_days", 3),
    ("due.1_week", 7),
    ("due.2_weeks", 14),
)


def due_date_presets() -> List[Tuple[str, int]]:
    """Localized (label, days) pairs for the due date menu"""
    return [(tr(key), days) for key, days in DUE_DATE_PRESETS]


def category_label(category: Union[Category, str]) -> str:
    """Localized display name of a category"""
    return tr(f"category.{Category(category).value}")


def _coerce_category(category: Union[Category, str]) -> Category:
    try:
        return Category(category)
    except ValueError:
        raise ValidationRejected(f"Unknown category: {category!r}") from None


def _unique_by_id(tasks: Iterable[Task]) -> Tuple[Task, ...]:
    seen = set()
    result = []
    for task in tasks:
        if task.id in seen:
            logger.warning("Dropping duplicate task id %s from stored snapshot", task.id)
            continue
        seen.add(task.id)
        result.append(task)
    return tuple(result)


class TaskStore:
    """
    Owns the ordered task collection (newest first).

    Mutations referencing an unknown id are silent no-ops.
    """

    def __init__(self, gateway: PersistenceGateway, sink: Optional[NotificationSink] = None,
                 key: str = "todos", clock: Clock = now_ms):
        self.gateway = gateway
        self.sink = sink or NullNotificationSink()
        self.key = key
        self.clock = clock
        self._tasks: Tuple[Task, ...] = ()
        self.reload()

    def reload(self) -> None:
        """Replace the in-memory collection with the stored snapshot"""
        self._tasks = _unique_by_id(load_snapshot(self.gateway, self.key, TASK_LIST, []))
        logger.info("TaskStore ready key=%s total=%d", self.key, len(self._tasks))

    # ---- queries ----

    @property
    def tasks(self) -> Tuple[Task, ...]:
        return self._tasks

    def __len__(self) -> int:
        return len(self._tasks)

    def get(self, task_id: str) -> Optional[Task]:
        for task in self._tasks:
            if task.id == task_id:
                return task
        return None

    @property
    def completed_count(self) -> int:
        return sum(1 for t in self._tasks if t.completed)

    def filter_by_text(self, query: str) -> List[Task]:
        """Case-insensitive substring search on the task text; empty query matches all"""
        needle = query.lower()
        return [t for t in self._tasks if needle in t.text.lower()]

    def filter_by_category(self, category: Union[Category, str]) -> List[Task]:
        category = _coerce_category(category)
        return [t for t in self._tasks if t.category == category]

    def find_overdue_candidates(self, now: Optional[int] = None) -> List[Task]:
        """Incomplete tasks whose due date lies strictly before now"""
        now = self.clock() if now is None else now
        return [t for t in self._tasks if t.is_overdue(now)]

    def compute_stats(self, now: Optional[int] = None) -> TaskStats:
        """
        Aggregate counters for the dashboard.

        due_today counts every task due between local midnight today and
        local midnight tomorrow, completed or not.
        """
        now = self.clock() if now is None else now
        try:
            day_start, day_end = start_of_day(now), start_of_next_day(now)
        except (OverflowError, ValueError, OSError) as e:
            # Outside the platform's calendar range nothing can be due today
            logger.warning("No calendar day for timestamp %d: %s", now, e)
            day_start = day_end = now
        return TaskStats(
            total=len(self._tasks),
            completed=self.completed_count,
            overdue=sum(1 for t in self._tasks if t.is_overdue(now)),
            due_today=sum(1 for t in self._tasks if t.is_due_between(day_start, day_end)),
        )

    # ---- mutations ----

    def create(self, text: str, category: Union[Category, str] = Category.WORK) -> Task:
        """
        Add a new task at the top of the list.

        Raises:
            ValidationRejected: text is empty or whitespace, or category is unknown
        """
        text = text.strip()
        if not text:
            raise ValidationRejected("Task text must not be empty")
        category = _coerce_category(category)

        now = self.clock()
        task = Task(
            id=self._new_id(),
            text=text,
            completed=False,
            created_at=now,
            due_date=now + DAY_MS,
            category=category,
        )
        self._tasks = (task,) + self._tasks
        logger.debug("Created task %s (%s)", task.id, category.value)
        self._notify(NotificationKind.ADD)
        self._persist()
        return task

    def toggle_complete(self, task_id: str) -> Optional[Task]:
        """
        Flip the completion flag.

        The "complete" signal is sent on every call, including reopening a
        task and unknown ids.
        """
        self._notify(NotificationKind.COMPLETE)
        task = self.get(task_id)
        if task is None:
            logger.debug("toggle_complete: task %s not found", task_id)
            return None
        return self._replace(task, completed=not task.completed)

    def delete(self, task_id: str) -> bool:
        """Remove the task permanently. Returns True if it existed."""
        self._notify(NotificationKind.DELETE)
        remaining = tuple(t for t in self._tasks if t.id != task_id)
        if len(remaining) == len(self._tasks):
            logger.debug("delete: task %s not found", task_id)
            return False
        self._tasks = remaining
        logger.debug("Deleted task %s", task_id)
        self._persist()
        return True

    def reschedule(self, task_id: str, days_from_now: int) -> Optional[Task]:
        """Set the due date to now plus whole days (negative values backdate)"""
        task = self.get(task_id)
        if task is None:
            logger.debug("reschedule: task %s not found", task_id)
            return None
        return self._replace(task, due_date=days_from(self.clock(), days_from_now))

    def recategorize(self, task_id: str, category: Union[Category, str]) -> Optional[Task]:
        category = _coerce_category(category)
        task = self.get(task_id)
        if task is None:
            logger.debug("recategorize: task %s not found", task_id)
            return None
        return self._replace(task, category=category)

    # ---- internals ----

    def _new_id(self) -> str:
        existing = {t.id for t in self._tasks}
        while True:
            candidate = uuid.uuid4().hex
            if candidate not in existing:
                return candidate

    def _replace(self, task: Task, **changes) -> Task:
        updated = task.model_copy(update=changes)
        self._tasks = tuple(updated if t.id == task.id else t for t in self._tasks)
        self._persist()
        return updated

    def _persist(self) -> None:
        save_snapshot(self.gateway, self.key, TASK_LIST, list(self._tasks))

    def _notify(self, kind: NotificationKind) -> None:
        try:
            self.sink.notify(kind)
        except Exception:
            logger.warning("Notification sink failed for %s", kind.value, exc_info=True)
