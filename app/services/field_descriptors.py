"""
Per-type field descriptor tables.

A table lists the public fields of a projection type in declaration order,
each with an accessor, and answers lookups that ignore case and underscores.
Tables for projection classes are built once per type and cached; already-shaped
records (plain mappings) get a table built from their keys.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from functools import lru_cache
from operator import attrgetter, itemgetter
from typing import Any

from pydantic import BaseModel


def field_key(name: object) -> str:
    # "main_category", "mainCategory" and "MainCategory" name the same field.
    return str(name or "").strip().replace("_", "").casefold()


@dataclasses.dataclass(frozen=True)
class FieldDescriptor:
    name: str
    accessor: Callable[[Any], Any]

    def value_of(self, instance: Any) -> Any:
        return self.accessor(instance)


class FieldTable:
    def __init__(self, type_name: str, descriptors: tuple[FieldDescriptor, ...]):
        self.type_name = type_name
        self._descriptors = descriptors
        self._by_key = {field_key(descriptor.name): descriptor for descriptor in descriptors}

    def get(self, name: str) -> FieldDescriptor | None:
        return self._by_key.get(field_key(name))

    def names(self) -> tuple[str, ...]:
        return tuple(descriptor.name for descriptor in self._descriptors)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None

    def __iter__(self) -> Iterator[FieldDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)


def _public_field_names(cls: type) -> tuple[str, ...]:
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return tuple(cls.model_fields)
    if dataclasses.is_dataclass(cls):
        return tuple(f.name for f in dataclasses.fields(cls))
    raise TypeError(f"No field descriptors can be derived for {cls!r}")


@lru_cache(maxsize=None)
def table_for_type(cls: type) -> FieldTable:
    descriptors = tuple(
        FieldDescriptor(name=name, accessor=attrgetter(name))
        for name in _public_field_names(cls)
        if not name.startswith("_")
    )
    return FieldTable(cls.__name__, descriptors)


def table_for_mapping(record: Mapping[str, Any]) -> FieldTable:
    descriptors = tuple(FieldDescriptor(name=str(key), accessor=itemgetter(key)) for key in record)
    return FieldTable(type(record).__name__, descriptors)


def table_for(instance: Any) -> FieldTable:
    if isinstance(instance, Mapping):
        return table_for_mapping(instance)
    return table_for_type(type(instance))
