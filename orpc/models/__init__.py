"""Immutable value objects mirroring the OpenRPC 1.2.x document model.

Compose leaves into a MethodValue, methods and components into a
DocumentValue, then render with `to_dict()` or `orpc.serializer`.
"""

from orpc.models.base import UNSET, ValueObject, ValueObjectError
from orpc.models.common import (
    ContactValue,
    ExternalDocumentationValue,
    LicenseValue,
    ReferenceValue,
    SchemaValue,
    ServerValue,
    ServerVariableValue,
    TagValue,
)
from orpc.models.document import ComponentsValue, DocumentValue, InfoValue
from orpc.models.method import (
    ContentDescriptorValue,
    ErrorValue,
    ExamplePairingValue,
    ExampleValue,
    LinkValue,
    MethodValue,
)

__all__ = [
    "UNSET",
    "ComponentsValue",
    "ContactValue",
    "ContentDescriptorValue",
    "DocumentValue",
    "ErrorValue",
    "ExamplePairingValue",
    "ExampleValue",
    "ExternalDocumentationValue",
    "InfoValue",
    "LicenseValue",
    "LinkValue",
    "MethodValue",
    "ReferenceValue",
    "SchemaValue",
    "ServerValue",
    "ServerVariableValue",
    "TagValue",
    "ValueObject",
    "ValueObjectError",
]
