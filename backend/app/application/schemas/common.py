"""Response envelopes shared by every record endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel

from app.domain.entities import Pagination

T = TypeVar("T")


class PaginationResponse(BaseModel):
    page: int
    limit: int
    total: int
    total_pages: int

    @classmethod
    def from_domain(cls, pagination: Pagination) -> "PaginationResponse":
        return cls(
            page=pagination.page,
            limit=pagination.limit,
            total=pagination.total,
            total_pages=pagination.total_pages,
        )


class ApiResponse(BaseModel, Generic[T]):
    """Single-record envelope: ``{data, message, success}``."""

    data: T | None
    message: str
    success: bool = True


class PaginatedResponse(BaseModel, Generic[T]):
    """List envelope: ``{data, pagination, message, success}``."""

    data: list[T]
    pagination: PaginationResponse
    message: str
    success: bool = True


class ErrorResponse(BaseModel):
    detail: str
    success: bool = False
    errors: dict[str, str] | None = None
