"""
Goal Store - Owns the goal collection.

Goals are plain progress counters. The store keeps them in insertion order
and enforces 0 <= current <= target on every change.
"""

import logging
import uuid
from typing import List, Optional, Tuple

from pydantic import TypeAdapter

from tasktracker.domain.exceptions import ValidationRejected
from tasktracker.domain.models import DEFAULT_GOAL_TARGET, Goal
from tasktracker.infra.gateway import PersistenceGateway
from tasktracker.services.snapshots import load_snapshot, save_snapshot

logger = logging.getLogger(__name__)

GOAL_LIST = TypeAdapter(List[Goal])


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(value, upper))


class GoalStore:
    """
    Owns the ordered goal collection.

    Mutations referencing an unknown id are silent no-ops.
    """

    def __init__(self, gateway: PersistenceGateway, key: str = "goals"):
        self.gateway = gateway
        self.key = key
        self._goals: Tuple[Goal, ...] = ()
        self.reload()

    def reload(self) -> None:
        """Replace the in-memory collection with the stored snapshot"""
        goals = load_snapshot(self.gateway, self.key, GOAL_LIST, [])
        # Snapshots written without the lower bound can hold negative counts
        self._goals = tuple(
            g.model_copy(update={"current": clamp(g.current, 0, g.target)}) for g in goals
        )
        logger.info("GoalStore ready key=%s total=%d", self.key, len(self._goals))

    @property
    def goals(self) -> Tuple[Goal, ...]:
        return self._goals

    def get(self, goal_id: str) -> Optional[Goal]:
        for goal in self._goals:
            if goal.id == goal_id:
                return goal
        return None

    def create(self, name: str, target: int = DEFAULT_GOAL_TARGET) -> Goal:
        """
        Append a new goal with zero progress.

        Raises:
            ValidationRejected: name is blank or target is not positive
        """
        name = name.strip()
        if not name:
            raise ValidationRejected("Goal name must not be empty")
        if target <= 0:
            raise ValidationRejected(f"Goal target must be positive, got {target}")

        existing = {g.id for g in self._goals}
        goal_id = uuid.uuid4().hex
        while goal_id in existing:
            goal_id = uuid.uuid4().hex

        goal = Goal(id=goal_id, name=name, target=target, current=0)
        self._goals = self._goals + (goal,)
        logger.debug("Created goal %s target=%d", goal.id, target)
        self._persist()
        return goal

    def delete(self, goal_id: str) -> bool:
        """Remove the goal permanently. Returns True if it existed."""
        remaining = tuple(g for g in self._goals if g.id != goal_id)
        if len(remaining) == len(self._goals):
            logger.debug("delete: goal %s not found", goal_id)
            return False
        self._goals = remaining
        self._persist()
        return True

    def adjust_progress(self, goal_id: str, new_current: int) -> Optional[Goal]:
        """
        Set the progress counter, clamped to [0, target].

        Callers pass current + 1 or current - 1; the store does not care
        about the direction.
        """
        goal = self.get(goal_id)
        if goal is None:
            logger.debug("adjust_progress: goal %s not found", goal_id)
            return None
        updated = goal.model_copy(update={"current": clamp(new_current, 0, goal.target)})
        self._goals = tuple(updated if g.id == goal_id else g for g in self._goals)
        self._persist()
        return updated

    def _persist(self) -> None:
        save_snapshot(self.gateway, self.key, GOAL_LIST, list(self._goals))
