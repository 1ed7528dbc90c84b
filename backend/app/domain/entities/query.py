"""Domain value objects for list queries: filter, sort, paginate."""

from dataclasses import dataclass, field
from typing import Generic, Literal, TypeVar

T = TypeVar("T")

SortOrder = Literal["asc", "desc"]


@dataclass
class QueryParams:
    """Parameters of a list query.

    ``page`` and ``limit`` describe a half-open window
    ``[(page - 1) * limit, page * limit)`` over the filtered, sorted set.
    """

    page: int = 1
    limit: int = 10
    search: str | None = None
    sort_by: str | None = None
    sort_order: SortOrder = "asc"
    category: str | None = None
    status: str | None = None


@dataclass
class Pagination:
    """Pagination metadata returned alongside a page of records."""

    page: int
    limit: int
    total: int
    total_pages: int


@dataclass
class Page(Generic[T]):
    """One page of query results."""

    items: list[T] = field(default_factory=list)
    pagination: Pagination = field(default_factory=lambda: Pagination(1, 10, 0, 0))
