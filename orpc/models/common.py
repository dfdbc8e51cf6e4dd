"""Leaf OpenRPC objects shared by methods and the document root."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any

from orpc.models.base import (
    ValueObject,
    ValueObjectError,
    check_map,
    check_text,
    nested,
)

_WHITESPACE = re.compile(r"\s")


# --- References ---


@dataclass(frozen=True, kw_only=True)
class ReferenceValue(ValueObject):
    """A `$ref` pointer to a component or an external document."""

    ref: str = field(metadata=nested(key="$ref"))

    def validate(self):
        check_text(self, "ref")
        if _WHITESPACE.search(self.ref):
            raise ValueObjectError(f"ReferenceValue.ref: '{self.ref}' is not a URI reference")
        # A fragment must be a JSON Pointer: "#" alone or "#/..."
        if self.ref.startswith("#") and len(self.ref) > 1 and self.ref[1] != "/":
            raise ValueObjectError(f"ReferenceValue.ref: '{self.ref}' is not a JSON Pointer")

    @classmethod
    def to_component(cls, section: str, name: str) -> ReferenceValue:
        """Pointer into the document's components, e.g. ("schemas", "User")."""
        return cls(ref=f"#/components/{section}/{name}")


@dataclass(frozen=True, kw_only=True)
class SchemaValue(ValueObject):
    """A named, reusable JSON Schema. Renders as `{name: data}`."""

    name: str
    data: dict[str, Any]

    def validate(self):
        check_text(self, "name")
        check_map(self, "data", required=True)

    def to_dict(self) -> dict[str, Any]:
        return {self.name: self.data}


# --- Metadata leaves ---


@dataclass(frozen=True, kw_only=True)
class ExternalDocumentationValue(ValueObject):
    description: str | None = None
    url: str

    def validate(self):
        check_text(self, "url")


@dataclass(frozen=True, kw_only=True)
class ContactValue(ValueObject):
    name: str | None = None
    url: str | None = None
    email: str | None = None


@dataclass(frozen=True, kw_only=True)
class LicenseValue(ValueObject):
    name: str | None = None
    url: str | None = None


@dataclass(frozen=True, kw_only=True)
class TagValue(ValueObject):
    """Groups methods in generated documentation."""

    name: str
    summary: str | None = None
    description: str | None = None
    external_docs: ExternalDocumentationValue | None = field(
        default=None, metadata=nested(ExternalDocumentationValue)
    )

    def validate(self):
        check_text(self, "name")


# --- Servers ---


@dataclass(frozen=True, kw_only=True)
class ServerVariableValue(ValueObject):
    """A substitution variable in a server URL template."""

    enum: tuple[str, ...] | None = None
    default: str
    description: str | None = None

    def validate(self):
        check_text(self, "default")
        if self.enum is None:
            return
        if isinstance(self.enum, str) or not isinstance(self.enum, (list, tuple)):
            raise ValueObjectError("ServerVariableValue.enum: expected a list of strings")
        object.__setattr__(self, "enum", tuple(self.enum))
        if self.enum and self.default not in self.enum:
            raise ValueObjectError(
                f"ServerVariableValue.default: '{self.default}' is not one of {list(self.enum)}"
            )


@dataclass(frozen=True, kw_only=True)
class ServerValue(ValueObject):
    name: str
    url: str
    summary: str | None = None
    description: str | None = None
    variables: dict[str, ServerVariableValue] | None = field(
        default=None, metadata=nested(ServerVariableValue, keyed=True)
    )

    def validate(self):
        check_text(self, "name")
        check_text(self, "url")
