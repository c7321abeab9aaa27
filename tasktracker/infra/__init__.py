"""Infrastructure layer - Configuration, persistence and sound"""

from .db import DatabaseEngine, KeyValueModel, init_db
from .gateway import (
    InMemoryPersistenceGateway,
    JsonFilePersistenceGateway,
    PersistenceGateway,
    SqlitePersistenceGateway,
    build_gateway,
)
from .sound import NotificationSink, NullNotificationSink, QtSoundSink, build_sink

__all__ = [
    "DatabaseEngine", "KeyValueModel", "init_db",
    "PersistenceGateway", "InMemoryPersistenceGateway", "JsonFilePersistenceGateway",
    "SqlitePersistenceGateway", "build_gateway",
    "NotificationSink", "NullNotificationSink", "QtSoundSink", "build_sink",
]
