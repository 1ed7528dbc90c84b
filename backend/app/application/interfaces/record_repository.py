"""Abstract repository interface (port) shared by users, products, and orders."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

T = TypeVar("T")


class RecordRepository(ABC, Generic[T]):
    """Port for record persistence: implemented in the infrastructure layer.

    Implementations hand out copies: mutating a returned record never
    changes the stored one until it is passed back through ``update``.
    """

    @abstractmethod
    async def list_all(self) -> list[T]:
        """Return a snapshot of every record, in insertion order."""
        ...

    @abstractmethod
    async def get_by_id(self, record_id: str) -> T | None:
        """Retrieve a single record by its ID."""
        ...

    @abstractmethod
    async def create(self, record: T) -> T:
        """Persist a new record and return it."""
        ...

    @abstractmethod
    async def update(self, record: T) -> T:
        """Replace an existing record."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...
