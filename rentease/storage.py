"""
Persistence Substrate
Key-value stores holding one serialized collection per entity type.

Every service reads a whole collection, mutates a copy and writes the whole
collection back. Callers hold ``store.lock`` across that cycle so two requests
in the same process cannot interleave their writes.
"""
from __future__ import annotations

import json
import logging
import threading
from enum import Enum
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from rentease.db.kv import KeyValueEntry

logger = logging.getLogger(__name__)


class CollectionKey(str, Enum):
    USERS = "users"
    PROPERTIES = "properties"
    UNITS = "units"
    APPLICATIONS = "applications"
    LEASES = "leases"
    PAYMENTS = "payments"
    MAINTENANCE_REQUESTS = "maintenance_requests"
    MESSAGES = "messages"
    ACTIVITIES = "activities"
    AUTH_SESSION = "auth_session"


class StoreBackend(str, Enum):
    MEMORY = "memory"
    SQL = "sql"


def _key(key) -> str:
    return key.value if isinstance(key, Enum) else str(key)


class KeyValueStore:
    """Interface shared by every store backend."""

    def __init__(self) -> None:
        self.lock = threading.RLock()

    def get(self, key, default: Any = None) -> Any:
        raise NotImplementedError

    def set(self, key, value: Any) -> None:
        raise NotImplementedError

    def delete(self, key) -> None:
        raise NotImplementedError

    def keys(self) -> List[str]:
        raise NotImplementedError

    def clear(self) -> None:
        for key in self.keys():
            self.delete(key)


class MemoryStore(KeyValueStore):
    """In-process store; values are kept as JSON text like browser storage."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None) -> None:
        super().__init__()
        self._data: Dict[str, str] = {}
        for key, value in (initial or {}).items():
            self.set(key, value)

    def get(self, key, default: Any = None) -> Any:
        raw = self._data.get(_key(key))
        if raw is None:
            return default
        return json.loads(raw)

    def set(self, key, value: Any) -> None:
        self._data[_key(key)] = json.dumps(value, default=str)

    def delete(self, key) -> None:
        self._data.pop(_key(key), None)

    def keys(self) -> List[str]:
        return list(self._data.keys())


class SqlStore(KeyValueStore):
    """Store backed by the kv_entries table."""

    def __init__(self, session_factory: Callable[[], Session]) -> None:
        super().__init__()
        self._session_factory = session_factory

    def get(self, key, default: Any = None) -> Any:
        with self._session_factory() as session:
            entry = session.get(KeyValueEntry, _key(key))
            if entry is None or entry.value is None:
                return default
            return entry.value

    def set(self, key, value: Any) -> None:
        name = _key(key)
        with self._session_factory() as session:
            entry = session.get(KeyValueEntry, name)
            if entry is None:
                entry = KeyValueEntry(key=name, value=value)
                session.add(entry)
            else:
                entry.value = value
            session.commit()
        logger.debug("Persisted store entry %s", name)

    def delete(self, key) -> None:
        with self._session_factory() as session:
            session.execute(delete(KeyValueEntry).where(KeyValueEntry.key == _key(key)))
            session.commit()

    def keys(self) -> List[str]:
        with self._session_factory() as session:
            return list(session.scalars(select(KeyValueEntry.key)))


def build_store(backend: str, session_factory: Optional[Callable[[], Session]] = None) -> KeyValueStore:
    """Create the store named by ``backend`` (falls back to memory when unknown)."""
    name = (backend or StoreBackend.MEMORY.value).lower()
    if name not in {b.value for b in StoreBackend}:
        logger.warning("Unknown store backend %r, using memory store", backend)
        name = StoreBackend.MEMORY.value
    if name == StoreBackend.SQL.value:
        if session_factory is None:
            raise ValueError("A session factory is required for the sql store backend")
        return SqlStore(session_factory)
    return MemoryStore()
