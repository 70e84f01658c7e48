"""
Camarim Managers — Sequential Registry
========================================
Shared CRUD mechanics for every entity manager.

Rules:
- Ids start at 1, increase by one per create, never reused
- Records are kept in creation order
- find_by_id returns the live record or None
- remove returns a bool; update raises the domain not-found kind
- list_all returns a deep snapshot, detached from the registry
"""

from __future__ import annotations

import copy
import logging
from typing import Callable, Generic, List, Optional, Type, TypeVar

from camarim.errors import CamarimError

T = TypeVar("T")


class SequentialRegistry(Generic[T]):
    """Append-only-by-id list of records with a monotonic id counter."""

    area = "records"
    record_label = "Record"
    not_found_error: Type[CamarimError] = CamarimError

    def __init__(self) -> None:
        self._records: List[T] = []
        self._next_id = 1
        self._logger = logging.getLogger(f"camarim.{self.area}")

    def __len__(self) -> int:
        return len(self._records)

    @property
    def next_id(self) -> int:
        return self._next_id

    def _append(self, build: Callable[[int], T]) -> int:
        record = build(self._next_id)
        self._records.append(record)
        record_id = self._next_id
        self._next_id += 1
        self._logger.info(f"{self.record_label} {record_id} created")
        return record_id

    def _require(self, record_id: int) -> T:
        record = self.find_by_id(record_id)
        if record is None:
            raise self.not_found_error(
                f"{self.record_label} with ID {record_id} not found"
            )
        return record

    def _swap(self, old: T, new: T) -> None:
        for index, record in enumerate(self._records):
            if record is old:
                self._records[index] = new
                return

    def find_by_id(self, record_id: int) -> Optional[T]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def remove(self, record_id: int) -> bool:
        for index, record in enumerate(self._records):
            if record.id == record_id:
                del self._records[index]
                self._logger.info(f"{self.record_label} {record_id} removed")
                return True
        return False

    def list_all(self) -> List[T]:
        return copy.deepcopy(self._records)
