"""
Persistence gateways: durable key-value blob stores.

Architecture Decision: Repository Pattern, reduced to get/set
The stores own their collections and only ever read a whole snapshot at
startup and write a whole snapshot after each change. The gateway therefore
knows nothing about tasks or goals; it maps a key to an opaque string.

Every backend translates its own failures into PersistenceUnavailable so the
stores can recover from all of them the same way.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional

from sqlalchemy.exc import SQLAlchemyError

from tasktracker.domain.exceptions import PersistenceUnavailable
from tasktracker.infra.config import Settings
from tasktracker.infra.db import DatabaseEngine, KeyValueModel, init_db

logger = logging.getLogger(__name__)


class PersistenceGateway:
    """
    Abstract key-value blob store.

    Implementations return None for absent keys and raise
    PersistenceUnavailable when the medium itself fails.
    """

    def get(self, key: str) -> Optional[str]:
        """Return the stored value or None"""
        raise NotImplementedError("Subclasses must implement get")

    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value"""
        raise NotImplementedError("Subclasses must implement set")

    def close(self) -> None:
        """Release backend resources"""


class InMemoryPersistenceGateway(PersistenceGateway):
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFilePersistenceGateway(PersistenceGateway):
    """
    All keys in a single JSON object file.

    A file that does not parse is treated as empty; the next write replaces it.
    Writes go to a temporary file first so a crash mid-write leaves the
    previous snapshot intact.
    """

    def __init__(self, path: Path):
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.warning("Ignoring unreadable store file %s: %s", self.path, e)
            return {}
        except OSError as e:
            raise PersistenceUnavailable(f"Cannot read {self.path}: {e}") from e

        if not isinstance(data, dict):
            logger.warning("Ignoring store file %s: expected an object, got %s", self.path, type(data).__name__)
            return {}
        return {str(k): v for k, v in data.items() if isinstance(v, str)}

    def get(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read_all()
        data[key] = value
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise PersistenceUnavailable(f"Cannot write {self.path}: {e}") from e


class SqlitePersistenceGateway(PersistenceGateway):
    """
    Snapshots stored as rows of the kv_store table.
    """

    def __init__(self, engine: DatabaseEngine):
        self.engine = engine

    @classmethod
    def from_url(cls, db_url: str) -> "SqlitePersistenceGateway":
        return cls(init_db(db_url))

    def get(self, key: str) -> Optional[str]:
        try:
            with self.engine.get_session() as session:
                model = session.get(KeyValueModel, key)
                return model.value if model else None
        except SQLAlchemyError as e:
            raise PersistenceUnavailable(f"Cannot read {key!r}: {e}") from e

    def set(self, key: str, value: str) -> None:
        try:
            with self.engine.get_session() as session:
                model = session.get(KeyValueModel, key)
                if model:
                    model.value = value
                else:
                    session.add(KeyValueModel(key=key, value=value))
                session.commit()
        except SQLAlchemyError as e:
            raise PersistenceUnavailable(f"Cannot write {key!r}: {e}") from e

    def close(self) -> None:
        self.engine.dispose()


def build_gateway(settings: Settings) -> PersistenceGateway:
    """
    Create the gateway selected by settings.storage_backend.

    Returns:
        PersistenceGateway instance
    """
    backend = settings.storage_backend
    if backend == "sqlite":
        return SqlitePersistenceGateway.from_url(settings.get_db_url())
    if backend == "json":
        return JsonFilePersistenceGateway(settings.data_dir / "tasktracker.json")
    if backend == "memory":
        logger.info("Using in-memory storage; nothing will be saved")
        return InMemoryPersistenceGateway()
    raise ValueError(f"Unknown storage backend: {backend}")
