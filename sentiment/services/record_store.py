"""Bounded, id-ordered in-memory collection shared by the user and comment stores."""
from __future__ import annotations

import copy
import logging
import threading
from bisect import bisect_left
from typing import Callable, Generic, List, Optional, TypeVar

from sentiment.errors import CapacityExceeded, EmptyResult, NotFound
from sentiment.models import Record
from sentiment.services.search import SortDirection, filter_contains, sort_records

R = TypeVar("R", bound=Record)

logger = logging.getLogger("sentiment.store")


def is_blank(value: Optional[str]) -> bool:
    """True for None, empty or whitespace-only values. Blank edit fields leave a value unchanged."""
    return value is None or not value.strip()


class RecordStore(Generic[R]):
    """Owns a list of records kept sorted by id, plus the id counter.

    Ids start at 1 and only ever grow, so appending keeps the list sorted and
    removal keeps the relative order of the remaining records. Lookups by id
    use binary search over a parallel id list; ``_append`` checks the
    invariant. Every public operation holds the store lock.

    Methods return copies of records. Mutate through the store's edit methods.
    """

    kind = "record"

    def __init__(self, capacity: int):
        if capacity < 0:
            raise ValueError("capacity must be >= 0")
        self.capacity = capacity
        self._records: List[R] = []
        self._ids: List[int] = []
        self._next_id = 1
        self._lock = threading.RLock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    @property
    def next_id(self) -> int:
        """Id the next created record will get."""
        return self._next_id

    def _check_capacity(self) -> None:
        if len(self._records) >= self.capacity:
            logger.info("%s store full (%d), create refused", self.kind, self.capacity)
            raise CapacityExceeded(self.kind, self.capacity)

    def _allocate_id(self) -> int:
        self._check_capacity()
        record_id = self._next_id
        self._next_id += 1
        return record_id

    def _append(self, record: R) -> None:
        if self._ids and record.id <= self._ids[-1]:
            raise AssertionError(f"{self.kind} ids out of order: {record.id} after {self._ids[-1]}")
        self._records.append(record)
        self._ids.append(record.id)

    def _index_of(self, record_id: int) -> int:
        i = bisect_left(self._ids, record_id)
        if i < len(self._ids) and self._ids[i] == record_id:
            return i
        raise NotFound(f"{self.kind.capitalize()} with id {record_id} not found")

    def _get(self, record_id: int) -> R:
        return self._records[self._index_of(record_id)]

    def find_by_id(self, record_id: int) -> R:
        with self._lock:
            return copy.copy(self._get(record_id))

    def list_all(self) -> List[R]:
        """Snapshot of all live records, id ascending."""
        with self._lock:
            return [copy.copy(r) for r in self._records]

    def sort_by_id(self, direction: SortDirection = SortDirection.ASCENDING) -> List[R]:
        """Sorted snapshot. Storage order is left untouched."""
        with self._lock:
            return sort_records(self.list_all(), direction, key=lambda r: r.id)

    def _search(self, needle: str, field: Callable[[R], str]) -> List[R]:
        with self._lock:
            matches = filter_contains(self._records, needle, field)
            if not matches:
                raise EmptyResult(f"No {self.kind}s match '{needle}'")
            return [copy.copy(r) for r in matches]

    def _delete(self, record_id: int) -> None:
        with self._lock:
            i = self._index_of(record_id)
            del self._records[i]
            del self._ids[i]
            logger.debug("Deleted %s %d (%d live)", self.kind, record_id, len(self._records))
