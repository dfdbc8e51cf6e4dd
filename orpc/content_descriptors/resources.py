"""Resource-scoped content descriptors — fields, filters, relationships, sorts.

Each builder takes a map of resource name -> allowed tokens and produces one
method parameter whose schema is an object with one array property per
resource. The per-resource property shape differs between builders and is
part of the emitted document:

- fields, filters:       {"name": <resource>, "type": "array", "items": ...}
- relationships, sorts:  {"type": "array", "items": ...}

An empty map produces None, meaning the parameter should not be added to
the method at all.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

FIELDS_DESCRIPTION = (
    "The fields to return for each resource. If not specified, all fields are returned."
)
FILTERS_DESCRIPTION = (
    "The filters to apply to the resources. If not specified, no filters are applied."
)
RELATIONSHIPS_DESCRIPTION = (
    "The relationships to return for each resource. "
    "If not specified, no relationships will be returned."
)
SORTS_DESCRIPTION = (
    "The sort order of the resources. The order of the fields matter, the first fields "
    'have the highest priority. Prefix with "-" to sort in descending order. '
    "If not specified, the default sort order is used."
)

DESCENDING_PREFIX = "-"


def _as_listed(tokens: Sequence[str]) -> list[str]:
    return list(tokens)


def ascending_and_descending(tokens: Sequence[str]) -> list[str]:
    """All ascending tokens first, then the same tokens prefixed with '-'.

    ["name", "created_at"] -> ["name", "created_at", "-name", "-created_at"]
    """
    return [*tokens, *(f"{DESCENDING_PREFIX}{token}" for token in tokens)]


def build_resource_descriptor(
    name: str,
    description: str,
    resources: Mapping[str, Sequence[str]],
    *,
    include_name: bool,
    enum_transform: Callable[[Sequence[str]], list[str]] = _as_listed,
) -> dict[str, Any] | None:
    """Build a resource-keyed content descriptor, or None for an empty map.

    Args:
        name: Parameter name ("fields", "sorts", ...).
        description: Fixed human-readable description.
        resources: Resource name -> allowed tokens, in the order to emit.
        include_name: Whether each per-resource property repeats its key
            under "name".
        enum_transform: Maps a resource's tokens to its enum values.

    Raises:
        TypeError: If a resource maps to a bare string instead of a list of tokens.
    """
    properties: dict[str, Any] = {}

    for resource, tokens in resources.items():
        if isinstance(tokens, (str, bytes)):
            raise TypeError(
                f"{name}: resource '{resource}' expects a list of names, got a string"
            )
        prop: dict[str, Any] = {"name": resource} if include_name else {}
        prop["type"] = "array"
        prop["items"] = {
            "type": "string",
            "enum": enum_transform(tokens),
        }
        properties[resource] = prop

    if not properties:
        return None

    return {
        "name": name,
        "description": description,
        "schema": {
            "type": "object",
            "properties": properties,
        },
    }


class FieldsContentDescriptor:
    """Sparse fieldset parameter: which fields to return per resource."""

    @staticmethod
    def create(fields: Mapping[str, Sequence[str]]) -> dict[str, Any] | None:
        return build_resource_descriptor(
            "fields", FIELDS_DESCRIPTION, fields, include_name=True
        )


class FiltersContentDescriptor:
    """Filter parameter: which filters each resource accepts."""

    @staticmethod
    def create(filters: Mapping[str, Sequence[str]]) -> dict[str, Any] | None:
        return build_resource_descriptor(
            "filters", FILTERS_DESCRIPTION, filters, include_name=True
        )


class RelationshipsContentDescriptor:
    """Relationship inclusion parameter. Properties carry no "name" key."""

    @staticmethod
    def create(relationships: Mapping[str, Sequence[str]]) -> dict[str, Any] | None:
        return build_resource_descriptor(
            "relationships", RELATIONSHIPS_DESCRIPTION, relationships, include_name=False
        )


class SortsContentDescriptor:
    """Sort parameter. Each field is offered ascending and, with '-', descending."""

    @staticmethod
    def create(sorts: Mapping[str, Sequence[str]]) -> dict[str, Any] | None:
        return build_resource_descriptor(
            "sorts",
            SORTS_DESCRIPTION,
            sorts,
            include_name=False,
            enum_transform=ascending_and_descending,
        )
