"""
Data shaping: project typed objects onto the fields a client asked for.

`fields` is the raw comma-separated list from the query string. Empty or
missing means every public field of the source type, in declaration order;
otherwise fields come out in the requested order under their declared names.
A field the type does not have raises `UnknownFieldError`. The field gates
in the handlers are expected to catch that first.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from app.core.errors import NullSourceError, UnknownFieldError
from app.services.field_descriptors import FieldDescriptor, FieldTable, table_for, table_for_type


class ShapedRecord(dict):
    """Ordered field name -> value mapping; `links` is the only late addition."""


def _resolve_fields(table: FieldTable, fields: str | None) -> tuple[FieldDescriptor, ...]:
    if fields is None or not fields.strip():
        return tuple(table)

    resolved: list[FieldDescriptor] = []
    for token in fields.split(","):
        name = token.strip()
        descriptor = table.get(name)
        if descriptor is None:
            raise UnknownFieldError(name, table.type_name)
        resolved.append(descriptor)
    return tuple(resolved)


def _shape(instance: Any, descriptors: tuple[FieldDescriptor, ...]) -> ShapedRecord:
    return ShapedRecord((descriptor.name, descriptor.value_of(instance)) for descriptor in descriptors)


def shape_one(instance: Any, fields: str | None = None) -> ShapedRecord:
    if instance is None:
        raise NullSourceError("instance")
    return _shape(instance, _resolve_fields(table_for(instance), fields))


def shape_many(
    source: Iterable[Any] | None,
    fields: str | None = None,
    *,
    source_type: type | None = None,
) -> list[ShapedRecord]:
    if source is None:
        raise NullSourceError("source")

    items = list(source)
    if not items:
        return []

    table = table_for_type(source_type) if source_type is not None else table_for(items[0])
    descriptors = _resolve_fields(table, fields)
    return [_shape(item, descriptors) for item in items]
