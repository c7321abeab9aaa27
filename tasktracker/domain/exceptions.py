"""
Error taxonomy for the tracker core.

Only ValidationRejected reaches callers in normal operation. The persistence
errors are raised by gateways and recovered inside the stores; NotFound is
raised only on explicit request (Tracker.require_task).
"""


class TrackerError(Exception):
    """Base class for all tracker errors"""


class ValidationRejected(TrackerError, ValueError):
    """User input was rejected (e.g. blank task text); nothing was changed"""


class NotFound(TrackerError, LookupError):
    """No entity with the given id exists"""

    def __init__(self, kind: str, entity_id: str):
        super().__init__(f"{kind} {entity_id!r} not found")
        self.kind = kind
        self.entity_id = entity_id


class PersistenceCorrupt(TrackerError):
    """A stored snapshot could not be parsed"""

    def __init__(self, key: str, reason: str):
        super().__init__(f"Stored value for {key!r} is corrupt: {reason}")
        self.key = key


class PersistenceUnavailable(TrackerError):
    """The storage backend failed to read or write"""
