"""Method-level OpenRPC objects: the method itself and what hangs off it."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from orpc.models.base import (
    UNSET,
    Flag,
    ValueObject,
    ValueObjectError,
    check_flag,
    check_map,
    check_text,
    nested,
)
from orpc.models.common import (
    ExternalDocumentationValue,
    ReferenceValue,
    ServerValue,
    TagValue,
)

PARAM_STRUCTURES = ("by-name", "by-position", "either")


@dataclass(frozen=True, kw_only=True)
class ContentDescriptorValue(ValueObject):
    """Describes one parameter, a result, or an error payload.

    `required` and `deprecated` are tri-state: UNSET (omitted), False, True.
    `schema` is a raw JSON Schema map and is kept as given.
    """

    name: str
    summary: str | None = None
    description: str | None = None
    required: Flag = UNSET
    schema: dict[str, Any] | None = None
    deprecated: Flag = UNSET

    def validate(self):
        check_text(self, "name")
        check_flag(self, "required")
        check_flag(self, "deprecated")
        check_map(self, "schema")


@dataclass(frozen=True, kw_only=True)
class ErrorValue(ValueObject):
    """A JSON-RPC error a method may return.

    Reserved code ranges (-32768..-32000) are conventional and not enforced.
    """

    code: int
    message: str
    data: Any = None

    def validate(self):
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise ValueObjectError(
                f"ErrorValue.code: expected an integer, got {type(self.code).__name__}"
            )
        check_text(self, "message")


@dataclass(frozen=True, kw_only=True)
class ExampleValue(ValueObject):
    """A sample value, inline (`value`) or by URL (`external_value`)."""

    name: str | None = None
    summary: str | None = None
    description: str | None = None
    value: Any = None
    external_value: str | None = None


@dataclass(frozen=True, kw_only=True)
class ExamplePairingValue(ValueObject):
    """A request/response pair of examples for a method."""

    name: str
    description: str | None = None
    summary: str | None = None
    params: tuple[ExampleValue | ReferenceValue, ...] = field(
        metadata=nested(ExampleValue, many=True, refs=True)
    )
    result: tuple[ExampleValue | ReferenceValue, ...] | None = field(
        default=None, metadata=nested(ExampleValue, many=True, refs=True)
    )

    def validate(self):
        check_text(self, "name")


@dataclass(frozen=True, kw_only=True)
class LinkValue(ValueObject):
    """A design-time link from a method result to another method."""

    name: str | None = None
    url: str | None = None
    summary: str | None = None
    description: str | None = None
    method: str | None = None
    params: dict[str, Any] | None = None
    server: ServerValue | None = field(default=None, metadata=nested(ServerValue))

    def validate(self):
        check_map(self, "params")


@dataclass(frozen=True, kw_only=True)
class MethodValue(ValueObject):
    """One RPC method.

    `params` is always serialized, even when empty.
    """

    name: str
    tags: tuple[TagValue | ReferenceValue, ...] | None = field(
        default=None, metadata=nested(TagValue, many=True, refs=True)
    )
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentationValue | None = field(
        default=None, metadata=nested(ExternalDocumentationValue)
    )
    params: tuple[ContentDescriptorValue | ReferenceValue, ...] = field(
        metadata=nested(ContentDescriptorValue, many=True, refs=True)
    )
    result: ContentDescriptorValue | ReferenceValue | None = field(
        default=None, metadata=nested(ContentDescriptorValue, refs=True)
    )
    deprecated: Flag = UNSET
    servers: tuple[ServerValue, ...] | None = field(
        default=None, metadata=nested(ServerValue, many=True)
    )
    errors: tuple[ErrorValue | ReferenceValue, ...] | None = field(
        default=None, metadata=nested(ErrorValue, many=True, refs=True)
    )
    links: tuple[LinkValue | ReferenceValue, ...] | None = field(
        default=None, metadata=nested(LinkValue, many=True, refs=True)
    )
    param_structure: str | None = None
    examples: tuple[ExamplePairingValue | ReferenceValue, ...] | None = field(
        default=None, metadata=nested(ExamplePairingValue, many=True, refs=True)
    )

    def validate(self):
        check_text(self, "name")
        check_flag(self, "deprecated")
        if self.param_structure is not None and self.param_structure not in PARAM_STRUCTURES:
            raise ValueObjectError(
                f"MethodValue.param_structure: '{self.param_structure}' is not one of "
                f"{list(PARAM_STRUCTURES)}"
            )
        names = [p.name for p in self.params if isinstance(p, ContentDescriptorValue)]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueObjectError(
                f"MethodValue.params: duplicate parameter names {duplicates}"
            )

    @classmethod
    def with_params(cls, name: str, *descriptors: dict[str, Any] | None, **kwargs) -> MethodValue:
        """Build a method from builder output, skipping builders that returned None.

        Example:
            MethodValue.with_params(
                "users.list",
                FieldsContentDescriptor.create(fields),
                SortsContentDescriptor.create({}),  # None, skipped
            )
        """
        params = [
            ContentDescriptorValue.from_dict(d) for d in descriptors if d is not None
        ]
        return cls(name=name, params=params, **kwargs)
