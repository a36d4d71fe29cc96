from __future__ import annotations

from app.services.field_descriptors import table_for_type


def has_fields(target_type: type, fields: str | None) -> bool:
    """
    True when every comma-separated name in `fields` is a public field of
    `target_type` (see `field_key`). An empty list means "all fields".

    Shape fields only: sort suffixes such as " desc" are not stripped here.
    """
    if fields is None or not fields.strip():
        return True

    table = table_for_type(target_type)
    for token in fields.split(","):
        if table.get(token.strip()) is None:
            return False
    return True
