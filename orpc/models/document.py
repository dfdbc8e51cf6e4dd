"""The OpenRPC document root and its reusable component registry."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from orpc.models.base import ValueObject, ValueObjectError, check_text, dump, nested
from orpc.models.common import (
    ContactValue,
    ExternalDocumentationValue,
    LicenseValue,
    ReferenceValue,
    SchemaValue,
    ServerValue,
    TagValue,
)
from orpc.models.method import (
    ContentDescriptorValue,
    ErrorValue,
    ExamplePairingValue,
    ExampleValue,
    LinkValue,
    MethodValue,
)

_SEMVER = re.compile(r"\d+\.\d+\.\d+(?:-[0-9A-Za-z.-]+)?(?:\+[0-9A-Za-z.-]+)?")


@dataclass(frozen=True, kw_only=True)
class InfoValue(ValueObject):
    """API metadata: title and version are required."""

    title: str
    description: str | None = None
    terms_of_service: str | None = None
    contact: ContactValue | None = field(default=None, metadata=nested(ContactValue))
    license: LicenseValue | None = field(default=None, metadata=nested(LicenseValue))
    version: str

    def validate(self):
        check_text(self, "title")
        check_text(self, "version")


@dataclass(frozen=True, kw_only=True)
class ComponentsValue(ValueObject):
    """Reusable objects referenced from methods via `#/components/<section>/<id>`.

    Every section is a map of unique id -> object. A list of named objects is
    accepted too and keyed by each object's name; duplicate names are rejected.
    Schemas may be SchemaValue entries or raw JSON Schema maps; any other
    section may hold a ReferenceValue in place of an object.
    """

    content_descriptors: dict[str, ContentDescriptorValue | ReferenceValue] | None = field(
        default=None, metadata=nested(ContentDescriptorValue, keyed=True, refs=True)
    )
    schemas: dict[str, SchemaValue | dict[str, Any]] | None = field(
        default=None, metadata=nested(SchemaValue, keyed=True, raw=True)
    )
    examples: dict[str, ExampleValue | ReferenceValue] | None = field(
        default=None, metadata=nested(ExampleValue, keyed=True, refs=True)
    )
    links: dict[str, LinkValue | ReferenceValue] | None = field(
        default=None, metadata=nested(LinkValue, keyed=True, refs=True)
    )
    errors: dict[str, ErrorValue | ReferenceValue] | None = field(
        default=None, metadata=nested(ErrorValue, keyed=True, refs=True)
    )
    example_pairing_objects: dict[str, ExamplePairingValue | ReferenceValue] | None = field(
        default=None, metadata=nested(ExamplePairingValue, keyed=True, refs=True)
    )
    tags: dict[str, TagValue | ReferenceValue] | None = field(
        default=None, metadata=nested(TagValue, keyed=True, refs=True)
    )

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        # The map key already names the schema, so emit only its body.
        if self.schemas:
            data["schemas"] = {
                key: dump(value.data if isinstance(value, SchemaValue) else value)
                for key, value in self.schemas.items()
            }
        return data

    def reference(self, section: str, key: str) -> ReferenceValue:
        """A `$ref` to a registered component.

        Raises:
            ValueObjectError: If nothing is registered under `section`/`key`.
        """
        entries = getattr(self, _section_attribute(section), None) or {}
        if key not in entries:
            raise ValueObjectError(f"ComponentsValue: no {section} component named '{key}'")
        return ReferenceValue.to_component(section, key)


def _section_attribute(section: str) -> str:
    attribute = re.sub(r"(?<!^)(?=[A-Z])", "_", section).lower()
    if attribute not in ComponentsValue.__dataclass_fields__:
        raise ValueObjectError(f"ComponentsValue: unknown section '{section}'")
    return attribute


@dataclass(frozen=True, kw_only=True)
class DocumentValue(ValueObject):
    """The root of an OpenRPC document."""

    openrpc: str
    info: InfoValue = field(metadata=nested(InfoValue))
    servers: tuple[ServerValue, ...] | None = field(
        default=None, metadata=nested(ServerValue, many=True)
    )
    methods: tuple[MethodValue | ReferenceValue, ...] = field(
        metadata=nested(MethodValue, many=True, refs=True)
    )
    components: ComponentsValue | None = field(
        default=None, metadata=nested(ComponentsValue)
    )
    external_docs: ExternalDocumentationValue | None = field(
        default=None, metadata=nested(ExternalDocumentationValue)
    )

    def validate(self):
        check_text(self, "openrpc")
        if not _SEMVER.fullmatch(self.openrpc):
            raise ValueObjectError(
                f"DocumentValue.openrpc: '{self.openrpc}' is not a semantic version"
            )
        names = [m.name for m in self.methods if isinstance(m, MethodValue)]
        duplicates = sorted({n for n in names if names.count(n) > 1})
        if duplicates:
            raise ValueObjectError(f"DocumentValue.methods: duplicate method names {duplicates}")

    def method(self, name: str) -> MethodValue | None:
        return next(
            (m for m in self.methods if isinstance(m, MethodValue) and m.name == name),
            None,
        )
