"""
Property mapping registry.

Maps public (projection) field names onto storage columns for sorting, keyed
by the (projection type, storage type) pair. Built once at start-up and
read-only afterwards; the app keeps its instance on `app.state`.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from app.core.errors import MappingNotFoundError
from app.models.author import Author
from app.schemas.catalog import AuthorOut
from app.services.field_descriptors import field_key
from app.services.sorting import is_valid_sort_expression


@dataclass(frozen=True)
class PropertyMappingValue:
    destination_fields: tuple[str, ...]
    revert: bool = False

    def __post_init__(self):
        if not self.destination_fields:
            raise ValueError("A property mapping needs at least one destination field.")


class PropertyMapping(Mapping[str, PropertyMappingValue]):
    """Immutable source field -> PropertyMappingValue table."""

    def __init__(self, entries: Mapping[str, PropertyMappingValue]):
        names: dict[str, str] = {}
        values: dict[str, PropertyMappingValue] = {}
        for name, value in entries.items():
            key = field_key(name)
            if key in values:
                raise ValueError(f'Duplicate property mapping for "{name}"')
            names[key] = name
            values[key] = value
        self._names = MappingProxyType(names)
        self._values = MappingProxyType(values)

    def __getitem__(self, name: str) -> PropertyMappingValue:
        return self._values[field_key(name)]

    def __contains__(self, name: object) -> bool:
        return field_key(name) in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._names.values())

    def __len__(self) -> int:
        return len(self._values)


class PropertyMappingRegistry:
    def __init__(self):
        self._mappings: dict[tuple[type, type], PropertyMapping] = {}
        self._frozen = False

    def register(
        self,
        source_type: type,
        destination_type: type,
        entries: Mapping[str, PropertyMappingValue],
    ) -> PropertyMapping:
        if self._frozen:
            raise RuntimeError("Property mapping registry is frozen.")
        for name, value in entries.items():
            for field in value.destination_fields:
                if not hasattr(destination_type, field):
                    raise ValueError(
                        f'Mapping "{name}" targets unknown field "{field}" on {destination_type.__name__}'
                    )
        mapping = PropertyMapping(entries)
        self._mappings[(source_type, destination_type)] = mapping
        return mapping

    def freeze(self) -> "PropertyMappingRegistry":
        self._frozen = True
        return self

    def get_mapping(self, source_type: type, destination_type: type) -> PropertyMapping:
        try:
            return self._mappings[(source_type, destination_type)]
        except KeyError:
            raise MappingNotFoundError(source_type, destination_type) from None

    def valid_mapping_exists_for(self, source_type: type, destination_type: type, sort_expression: str | None) -> bool:
        if sort_expression is None or not sort_expression.strip():
            return True
        return is_valid_sort_expression(sort_expression, self.get_mapping(source_type, destination_type))


AUTHOR_PROPERTY_MAPPING = {
    "id": PropertyMappingValue(("id",)),
    "main_category": PropertyMappingValue(("main_category",)),
    "age": PropertyMappingValue(("date_of_birth",), revert=True),
    "name": PropertyMappingValue(("first_name", "last_name")),
}


def build_property_mapping_registry() -> PropertyMappingRegistry:
    registry = PropertyMappingRegistry()
    registry.register(AuthorOut, Author, AUTHOR_PROPERTY_MAPPING)
    return registry.freeze()
