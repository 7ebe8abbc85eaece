import re
from collections.abc import Iterable, Mapping
from operator import attrgetter
from typing import Any

from pydantic import BaseModel

from ..errors import InvalidParameterError
from .store import ResourceStore

RESERVED_PARAMS = frozenset({"sort", "limit", "offset"})

_INTEGER = re.compile(r"-?[0-9]+")

Filters = Mapping[str, Any] | Iterable[tuple[str, Any]]


def _coerce_filter(fields: dict[str, type], field: str, value: Any) -> Any:
    if field not in fields:
        raise InvalidParameterError(field, f"unknown filter field '{field}'")
    if fields[field] is int:
        if isinstance(value, int):
            return value
        if isinstance(value, str) and _INTEGER.fullmatch(value):
            return int(value)
        raise InvalidParameterError(field, f"filter '{field}' must be an integer")
    return str(value)


def _check_non_negative(name: str, value: int | None) -> None:
    if value is not None and value < 0:
        raise InvalidParameterError(name, f"{name} must be a non-negative integer")


def list_records(
    store: ResourceStore,
    collection_name: str,
    filters: Filters | None = None,
    sort_key: str | None = None,
    limit: int | None = None,
    offset: int | None = None,
) -> tuple[list[BaseModel], int]:
    """Filter, sort and slice a collection.

    Filters are exact matches combined with AND, given as a mapping or as
    ``(field, value)`` pairs; a field may appear more than once. ``sort_key``
    names a field, optionally prefixed with ``-`` for descending order; ties
    keep collection order either way. Returns the page and the filtered count
    before slicing.
    """
    _check_non_negative("limit", limit)
    _check_non_negative("offset", offset)

    collection = store.get_collection(collection_name)
    fields = collection.resource.fields
    pairs = filters.items() if isinstance(filters, Mapping) else (filters or ())
    criteria = [(field, _coerce_filter(fields, field, value)) for field, value in pairs]

    records = [
        record for record in collection.records
        if all(getattr(record, field) == value for field, value in criteria)
    ]
    total = len(records)

    if sort_key:
        descending = sort_key.startswith("-")
        field = sort_key[1:] if descending else sort_key
        if field not in fields:
            raise InvalidParameterError("sort", f"unknown sort field '{field}'")
        records = sorted(records, key=attrgetter(field), reverse=descending)

    start = offset or 0
    end = None if limit is None else start + limit
    return records[start:end], total


def get_record(store: ResourceStore, collection_name: str, record_id: int) -> BaseModel:
    return store.get_by_id(collection_name, record_id)
