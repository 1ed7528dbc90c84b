"""Shared use-case logic for the record collections (users, products, orders)."""

from typing import Generic, TypeVar

from app.application.interfaces import RecordRepository
from app.application.services.fault_injection import NO_FAULTS, FaultInjector
from app.application.services.record_query import SearchPredicate, query_records
from app.domain.entities import Page, QueryParams
from app.domain.exceptions import EntityNotFoundError

T = TypeVar("T")


class RecordService(Generic[T]):
    """Read/delete operations common to every collection.

    Subclasses set the entity names, supply a search predicate, and
    implement ``create_record`` / ``update_record``. Every public operation
    passes through the fault injector exactly once.
    """

    entity_name: str = "Record"
    plural_name: str = "records"
    filter_field: str | None = None
    record_type: type | None = None

    def __init__(
        self,
        repository: RecordRepository[T],
        fault_injector: FaultInjector = NO_FAULTS,
    ):
        self._repository = repository
        self._faults = fault_injector

    async def list_records(self, params: QueryParams) -> Page[T]:
        await self._faults.maybe_fail(f"Failed to fetch {self.plural_name}")
        records = await self._repository.list_all()
        predicate = await self._search_predicate()
        return query_records(
            records, params, predicate, self.filter_field, record_type=self.record_type
        )

    async def get_record(self, record_id: str) -> T:
        await self._faults.maybe_fail(f"Failed to fetch {self.entity_name.lower()}")
        return await self._require(record_id)

    async def delete_record(self, record_id: str) -> None:
        await self._faults.maybe_fail(f"Failed to delete {self.entity_name.lower()}")
        deleted = await self._repository.delete(record_id)
        if not deleted:
            raise EntityNotFoundError(self.entity_name, record_id)

    async def _require(self, record_id: str) -> T:
        record = await self._repository.get_by_id(record_id)
        if record is None:
            raise EntityNotFoundError(self.entity_name, record_id)
        return record

    async def _search_predicate(self) -> SearchPredicate | None:
        return None
