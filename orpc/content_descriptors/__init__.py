"""Content descriptor builders for OpenRPC method parameters.

Every builder returns a plain dict shaped like an OpenRPC Content Descriptor
(`name`, `description`, `schema`). Resource builders return None for an empty
input so callers can skip the parameter.
"""

from orpc.content_descriptors.method_data import (
    InvalidCapabilityError,
    MethodDataContentDescriptor,
    ValidationRulesProvider,
)
from orpc.content_descriptors.pagination import CursorPaginatorContentDescriptor
from orpc.content_descriptors.resources import (
    FieldsContentDescriptor,
    FiltersContentDescriptor,
    RelationshipsContentDescriptor,
    SortsContentDescriptor,
)

__all__ = [
    "CursorPaginatorContentDescriptor",
    "FieldsContentDescriptor",
    "FiltersContentDescriptor",
    "InvalidCapabilityError",
    "MethodDataContentDescriptor",
    "RelationshipsContentDescriptor",
    "SortsContentDescriptor",
    "ValidationRulesProvider",
]
