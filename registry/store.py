"""
registry/store.py -- In-memory, insertion-ordered developer registry.

Pattern: Repository. DeveloperRegistry is the single owner of the record
list; route handlers get it from app.state and never touch the list directly.

Concurrency: FastAPI runs sync route handlers in a thread pool, so every read
and mutation takes the same lock. Operations are single-step: they either
fully apply or raise before touching the list.

Usage:
    registry = DeveloperRegistry()
    dev = registry.create({"name": "Ana", "skills": ["go"]})
    registry.get(dev.id)
    registry.update(dev.id, {"email": "a@x.com"})
    registry.delete(dev.id)
    registry.close()
"""

import logging
import threading
import time
from typing import Any, Callable

from registry.models import Developer

logger = logging.getLogger("devapi.registry")


class DeveloperNotFound(LookupError):
    """No developer with the requested id."""

    def __init__(self, dev_id: str) -> None:
        super().__init__(f"Developer {dev_id!r} not found")
        self.dev_id = dev_id


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


class DeveloperRegistry:
    def __init__(self, clock: Callable[[], int] = _epoch_millis) -> None:
        self._developers: list[Developer] = []
        self._lock = threading.Lock()
        self._clock = clock
        self._last_id = 0

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def list_developers(self) -> list[Developer]:
        """Return every record in insertion order."""
        with self._lock:
            return list(self._developers)

    def get(self, dev_id: str) -> Developer:
        """Return the first record whose id equals dev_id exactly."""
        with self._lock:
            return self._developers[self._index_of(dev_id)]

    def __len__(self) -> int:
        with self._lock:
            return len(self._developers)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def create(self, fields: dict[str, Any]) -> Developer:
        """Append a new record built from fields and return it.

        The registry assigns the id; an id present in fields is discarded.
        """
        with self._lock:
            developer = Developer.from_dict({**fields, "id": self._next_id()})
            self._developers.append(developer)
        logger.info("Created developer id=%s", developer.id)
        return developer

    def update(self, dev_id: str, fields: dict[str, Any]) -> Developer:
        """Shallow-merge fields over the stored record, keeping its position.

        Merge order is existing then incoming, so an `id` in fields replaces
        the stored id.
        """
        with self._lock:
            index = self._index_of(dev_id)
            merged = {**self._developers[index].to_dict(), **fields}
            developer = Developer.from_dict(merged)
            self._developers[index] = developer
        logger.info("Updated developer id=%s", dev_id)
        return developer

    def delete(self, dev_id: str) -> None:
        """Remove the first record whose id equals dev_id."""
        with self._lock:
            del self._developers[self._index_of(dev_id)]
        logger.info("Deleted developer id=%s", dev_id)

    def clear(self) -> None:
        with self._lock:
            self._developers.clear()

    def close(self) -> None:
        """Drop all records. Called from the app lifespan on shutdown."""
        self.clear()

    # ------------------------------------------------------------------
    # Helpers -- callers must hold self._lock
    # ------------------------------------------------------------------

    def _index_of(self, dev_id: str) -> int:
        for index, developer in enumerate(self._developers):
            if developer.id == dev_id:
                return index
        raise DeveloperNotFound(dev_id)

    def _next_id(self) -> str:
        # Millisecond timestamp, bumped when the clock has not moved on.
        candidate = max(self._clock(), self._last_id + 1)
        self._last_id = candidate
        return str(candidate)
