"""In-process record store for users, products, and orders."""

import copy
from typing import Generic, TypeVar

from app.application.interfaces import RecordRepository

T = TypeVar("T")


class InMemoryRecordRepository(RecordRepository[T], Generic[T]):
    """Implements the RecordRepository port with a dict keyed by record id.

    Records are deep-copied on the way in and on the way out. Concurrent
    writers are last-write-wins.
    """

    def __init__(self, records: list[T] | None = None):
        self._records: dict[str, T] = {}
        for record in records or []:
            self._records[record.id] = copy.deepcopy(record)

    async def list_all(self) -> list[T]:
        return [copy.deepcopy(r) for r in self._records.values()]

    async def get_by_id(self, record_id: str) -> T | None:
        record = self._records.get(record_id)
        return copy.deepcopy(record) if record is not None else None

    async def create(self, record: T) -> T:
        self._records[record.id] = copy.deepcopy(record)
        return copy.deepcopy(record)

    async def update(self, record: T) -> T:
        if record.id not in self._records:
            raise KeyError(f"Record {record.id} not found")
        self._records[record.id] = copy.deepcopy(record)
        return copy.deepcopy(record)

    async def delete(self, record_id: str) -> bool:
        return self._records.pop(record_id, None) is not None

    def __len__(self) -> int:
        return len(self._records)
