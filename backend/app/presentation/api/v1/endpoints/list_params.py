"""Query-string parameters shared by the paginated list endpoints."""

from typing import Literal

from fastapi import Query

from app.domain.entities import QueryParams


def list_query_params(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1, le=100),
    search: str | None = Query(None, description="Case-insensitive substring search"),
    sort_by: str | None = Query(None, description="Field to sort by, e.g. 'name' or 'created_at'"),
    sort_order: Literal["asc", "desc"] = "asc",
) -> QueryParams:
    return QueryParams(
        page=page,
        limit=limit,
        search=search or None,
        sort_by=sort_by or None,
        sort_order=sort_order,
    )
