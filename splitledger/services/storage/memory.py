"""In-memory audit storage."""

from threading import Lock

from splitledger.models.audit import AuditEvent, AuditEventType
from splitledger.services.storage.interface import AuditStorageInterface


class InMemoryAuditStorage(AuditStorageInterface):
    """Keeps events in a list, oldest first."""

    def __init__(self):
        self._lock = Lock()
        self._events: list[AuditEvent] = []

    def append_event(self, event: AuditEvent) -> bool:
        with self._lock:
            self._events.append(event)
        return True

    def get_events_by_type(
        self,
        event_type: AuditEventType,
    ) -> list[AuditEvent]:
        with self._lock:
            return [e for e in self._events if e.event_type == event_type]

    def get_recent_events(
        self,
        limit: int = 100,
    ) -> list[AuditEvent]:
        with self._lock:
            return list(reversed(self._events))[:limit]
