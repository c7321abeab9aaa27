"""
Display preference store.

Holds the user-toggled dark mode flag. It is persisted under its own key so
it survives independently of the task and goal snapshots.
"""

import logging

from pydantic import TypeAdapter

from tasktracker.infra.gateway import PersistenceGateway
from tasktracker.services.snapshots import load_snapshot, save_snapshot

logger = logging.getLogger(__name__)

FLAG = TypeAdapter(bool)


class PreferenceStore:
    def __init__(self, gateway: PersistenceGateway, key: str = "darkMode"):
        self.gateway = gateway
        self.key = key
        self._dark_mode = load_snapshot(self.gateway, self.key, FLAG, False)

    @property
    def dark_mode(self) -> bool:
        return self._dark_mode

    def set(self, value: bool) -> None:
        self._dark_mode = bool(value)
        save_snapshot(self.gateway, self.key, FLAG, self._dark_mode)

    def toggle(self) -> bool:
        """Flip the flag and return the new value"""
        self.set(not self._dark_mode)
        logger.debug("Dark mode %s", "on" if self._dark_mode else "off")
        return self._dark_mode
