"""
Snapshot load/save shared by the stores.

A snapshot is one whole collection serialized as JSON under one key. Loading
never fails: an unreadable medium or a blob that does not validate both fall
back to the caller's default. Saving never fails either: the in-memory state
stays authoritative when the write is lost.
"""

import logging
from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from tasktracker.domain.exceptions import PersistenceCorrupt, PersistenceUnavailable
from tasktracker.infra.gateway import PersistenceGateway

logger = logging.getLogger(__name__)

T = TypeVar("T")


def load_snapshot(gateway: PersistenceGateway, key: str, adapter: TypeAdapter, default: T) -> T:
    """
    Read and validate the snapshot stored under key.

    Args:
        gateway: Storage backend
        key: Snapshot key
        adapter: Pydantic adapter for the snapshot type
        default: Value returned when nothing usable is stored

    Returns:
        The validated snapshot, or default
    """
    try:
        raw = gateway.get(key)
    except PersistenceUnavailable as e:
        logger.warning("Could not read %r, starting empty: %s", key, e)
        return default

    if raw is None:
        return default

    try:
        return adapter.validate_json(raw)
    except ValidationError as e:
        corrupt = PersistenceCorrupt(key, f"{e.error_count()} validation error(s)")
        logger.warning("%s; discarding it", corrupt)
        logger.debug("Discarded %r snapshot: %s", key, e)
        return default


def save_snapshot(gateway: PersistenceGateway, key: str, adapter: TypeAdapter, value: Any) -> bool:
    """
    Serialize value and write it under key.

    Returns:
        True if the write succeeded
    """
    payload = adapter.dump_json(value, by_alias=True).decode('utf-8')
    try:
        gateway.set(key, payload)
    except PersistenceUnavailable as e:
        logger.warning("Could not save %r, keeping changes in memory only: %s", key, e)
        return False
    return True
