"""
Errors raised by the resource-shaping core.

Validation gates report client mistakes as booleans; the exceptions below are
contract or configuration violations and always propagate to the HTTP
boundary (see `app/core/error_handlers.py`).
"""

from __future__ import annotations


class ResourceShapingError(RuntimeError):
    pass


class MappingNotFoundError(ResourceShapingError):
    def __init__(self, source_type: type, destination_type: type):
        self.source_type = source_type
        self.destination_type = destination_type
        super().__init__(
            f"Cannot find property mapping for <{source_type.__name__}, {destination_type.__name__}>"
        )


class UnknownFieldError(ResourceShapingError):
    def __init__(self, field_name: str, type_name: str):
        self.field_name = field_name
        self.type_name = type_name
        super().__init__(f'Field "{field_name}" was not found on type {type_name}')


class NullSourceError(ResourceShapingError):
    def __init__(self, argument: str = "source"):
        self.argument = argument
        super().__init__(f"{argument} must not be None")
