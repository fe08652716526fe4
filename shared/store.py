"""
Thread-safe in-memory record store.

A ``RecordStore`` owns an ordered list of dataclass records that carry an
integer ``id`` field, plus a counter for the next identity to hand out.
Every operation holds the store lock for its whole duration, reads included,
so snapshots are always consistent with the counter.

Records handed out are copies; mutating them never touches stored state.
"""

import copy
import dataclasses
import threading
from dataclasses import dataclass
from typing import Callable, Generic, Iterable, List, Optional, TypeVar, Union

from shared.logging import get_logger

T = TypeVar("T")


@dataclass(frozen=True)
class NotFound:
    """Outcome of an operation addressed to an id that is not stored."""
    record_id: int


class RecordStore(Generic[T]):
    """In-memory collection with monotonic id assignment."""

    def __init__(self, name: str, seed: Iterable[T] = ()):
        self.name = name
        self.logger = get_logger(f"store.{name}")
        self._lock = threading.Lock()
        self._records: List[T] = [copy.copy(record) for record in seed]
        # Starts above the highest seed id and is never reused.
        self._next_id = max((record.id for record in self._records), default=0) + 1

    def list_all(self) -> List[T]:
        """Snapshot of every stored record, in insertion order."""
        with self._lock:
            return [copy.copy(record) for record in self._records]

    def get_by_id(self, record_id: int) -> Optional[T]:
        with self._lock:
            record = self._locate(record_id)
            return copy.copy(record) if record is not None else None

    def find(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """First stored record satisfying ``predicate``."""
        with self._lock:
            for record in self._records:
                if predicate(record):
                    return copy.copy(record)
            return None

    def create(self, candidate: T) -> T:
        """Store ``candidate`` under the next id. Any id it carries is ignored."""
        with self._lock:
            record = dataclasses.replace(candidate, id=self._next_id)
            self._next_id += 1
            self._records.append(record)
            self.logger.debug("Record created", store=self.name, record_id=record.id)
            return copy.copy(record)

    def update(self, record_id: int, candidate: T) -> Union[T, NotFound]:
        """Replace every field but ``id`` of the record stored under ``record_id``."""
        with self._lock:
            existing = self._locate(record_id)
            if existing is None:
                return NotFound(record_id)

            for item in dataclasses.fields(existing):
                if item.name != "id":
                    setattr(existing, item.name, getattr(candidate, item.name))

            self.logger.debug("Record updated", store=self.name, record_id=record_id)
            return copy.copy(existing)

    def delete(self, record_id: int) -> bool:
        with self._lock:
            existing = self._locate(record_id)
            if existing is None:
                return False

            self._records.remove(existing)
            self.logger.debug("Record deleted", store=self.name, record_id=record_id)
            return True

    def count(self) -> int:
        with self._lock:
            return len(self._records)

    def _locate(self, record_id: int) -> Optional[T]:
        # Caller must hold the lock.
        for record in self._records:
            if record.id == record_id:
                return record
        return None
