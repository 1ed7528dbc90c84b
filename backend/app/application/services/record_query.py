"""Generic list query engine: filter, search, stable sort, paginate.

Used identically for users, products, and orders. Pure: operates on the
snapshot it is given and never mutates it.
"""

import dataclasses
import math
import re
import types
from collections.abc import Callable, Sequence
from datetime import datetime
from functools import lru_cache
from typing import Any, Literal, TypeVar, Union, get_args, get_origin, get_type_hints

from app.domain.entities import Page, Pagination, QueryParams
from app.domain.exceptions import ValidationError

T = TypeVar("T")

SearchPredicate = Callable[[T, str], bool]

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

# bool is covered through int
_ORDERABLE = (str, int, float, datetime)


def query_records(
    collection: Sequence[T],
    params: QueryParams,
    search_predicate: SearchPredicate | None = None,
    filter_field: str | None = None,
    record_type: type | None = None,
) -> Page[T]:
    """Return one page of ``collection`` according to ``params``.

    Args:
        collection: Records to query, in insertion order.
        params: Paging, search, sort, and filter parameters.
        search_predicate: Collection-specific ``(record, search) -> bool``.
            When ``None`` the ``search`` parameter is ignored.
        filter_field: Attribute compared against ``params.category`` or
            ``params.status`` (whichever matches the attribute name).
        record_type: Dataclass of the records. Lets ``sort_by`` be checked
            against an empty collection; defaults to the first record's type.

    Raises:
        ValidationError: For non-positive page/limit, or a ``sort_by`` that
            is not a scalar field of the record type.
    """
    if params.page < 1 or params.limit < 1:
        raise ValidationError({"page": "page and limit must be at least 1"})

    records = list(collection)
    record_type = record_type or (type(records[0]) if records else None)
    sort_attribute = (
        _sort_attribute(params.sort_by, record_type)
        if params.sort_by and record_type is not None
        else None
    )

    # Exact-match filter runs before search.
    filter_value = _filter_value(params, filter_field)
    if filter_field and filter_value:
        records = [
            r for r in records
            if _matches_exactly(getattr(r, filter_field, None), filter_value)
        ]

    if params.search and search_predicate is not None:
        records = [r for r in records if search_predicate(r, params.search)]

    if sort_attribute:
        records = _stable_sort(records, sort_attribute, descending=params.sort_order == "desc")

    total = len(records)
    start = (params.page - 1) * params.limit
    items = records[start : start + params.limit]

    return Page(
        items=items,
        pagination=Pagination(
            page=params.page,
            limit=params.limit,
            total=total,
            total_pages=math.ceil(total / params.limit),
        ),
    )


def contains_ignore_case(*values: Any) -> Callable[[str], bool]:
    """Build a matcher testing ``search`` as a case-insensitive substring of any value."""
    haystacks = [str(v).casefold() for v in values if v is not None]

    def matches(search: str) -> bool:
        needle = search.casefold()
        return any(needle in h for h in haystacks)

    return matches


def to_attribute_name(field_name: str) -> str:
    """Map a camelCase field name (``createdAt``) to its attribute (``created_at``)."""
    return _CAMEL_BOUNDARY.sub("_", field_name).lower()


@lru_cache
def sortable_fields(record_type: type) -> frozenset[str]:
    """Dataclass fields of ``record_type`` holding a single orderable scalar."""
    hints = get_type_hints(record_type)
    return frozenset(
        f.name
        for f in dataclasses.fields(record_type)
        if _is_orderable(hints.get(f.name))
    )


def _is_orderable(annotation: Any) -> bool:
    if isinstance(annotation, type):
        return issubclass(annotation, _ORDERABLE)

    origin = get_origin(annotation)
    args = get_args(annotation)
    if origin is Literal:
        return all(isinstance(a, _ORDERABLE) for a in args)
    if origin in (Union, types.UnionType):
        # Optional[X] only: mixed unions don't compare
        members = [a for a in args if a is not type(None)]
        return len(members) == 1 and _is_orderable(members[0])
    return False


def _sort_attribute(sort_by: str, record_type: type) -> str:
    allowed = sortable_fields(record_type)
    for candidate in (sort_by, to_attribute_name(sort_by)):
        if candidate in allowed:
            return candidate
    raise ValidationError(
        {"sort_by": f"Cannot sort by '{sort_by}'. Sortable fields: {', '.join(sorted(allowed))}"}
    )


def _filter_value(params: QueryParams, filter_field: str | None) -> str | None:
    if filter_field == "category":
        return params.category
    if filter_field == "status":
        return params.status
    return params.category or params.status


def _matches_exactly(value: Any, expected: str) -> bool:
    if value is None:
        return False
    return str(value).casefold() == expected.casefold()


def _stable_sort(records: list[T], attribute: str, *, descending: bool) -> list[T]:
    present = [r for r in records if getattr(r, attribute) is not None]
    missing = [r for r in records if getattr(r, attribute) is None]

    # sorted() is stable, including with reverse=True.
    ordered = sorted(present, key=lambda r: getattr(r, attribute), reverse=descending)
    return ordered + missing
