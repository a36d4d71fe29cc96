"""
Sort expression parsing and translation.

Clients sort with `orderBy=name,age desc`. Each clause is translated through a
PropertyMapping into storage-level `OrderingClause`s, which `apply_ordering`
hands to SQLAlchemy as `asc()` / `desc()` terms.

Two entry points on purpose:
- `is_valid_sort_expression` is the strict gate (unknown field -> False);
- `translate` is lenient and skips unknown fields.
Handlers call the gate first when they want a 400 on typos.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from sqlalchemy import asc, desc
from sqlalchemy.orm import Query

if TYPE_CHECKING:
    from app.services.property_mapping import PropertyMappingValue

DESC_SUFFIX = " desc"


@dataclass(frozen=True)
class SortDirective:
    field: str
    descending: bool = False


@dataclass(frozen=True)
class OrderingClause:
    field: str
    descending: bool = False


ResolvedOrdering = tuple[OrderingClause, ...]


def _parse_clause(clause: str) -> SortDirective:
    trimmed = clause.strip()
    descending = trimmed.lower().endswith(DESC_SUFFIX)
    field, _, _ = trimmed.partition(" ")
    return SortDirective(field=field, descending=descending)


def parse_sort_expression(sort_expression: str | None) -> list[SortDirective]:
    if sort_expression is None or not sort_expression.strip():
        return []
    return [_parse_clause(clause) for clause in sort_expression.split(",")]


def is_valid_sort_expression(sort_expression: str | None, mapping: Mapping[str, "PropertyMappingValue"]) -> bool:
    for directive in parse_sort_expression(sort_expression):
        if directive.field not in mapping:
            return False
    return True


def translate(sort_expression: str | None, mapping: Mapping[str, "PropertyMappingValue"]) -> ResolvedOrdering:
    clauses: list[OrderingClause] = []
    for directive in parse_sort_expression(sort_expression):
        if directive.field not in mapping:
            continue
        value = mapping[directive.field]
        descending = directive.descending != value.revert
        clauses.extend(OrderingClause(field=field, descending=descending) for field in value.destination_fields)
    return tuple(clauses)


def apply_ordering(q: Query, model, ordering: ResolvedOrdering) -> Query:
    for clause in ordering:
        col = getattr(model, clause.field)
        q = q.order_by(desc(col) if clause.descending else asc(col))
    return q
