"""Tests for reusable component schemas."""

from orpc.content_descriptors import CursorPaginatorContentDescriptor
from orpc.models import ComponentsValue, SchemaValue
from orpc.schemas import CursorPaginatorSchema


def test_cursor_paginator_schema():
    schema = CursorPaginatorSchema.create()
    assert schema["name"] == "CursorPaginator"
    assert schema["data"]["type"] == "object"
    assert schema["data"]["required"] == ["cursor"]
    assert schema["data"]["properties"]["cursor"]["type"] == "string"
    assert schema["data"]["properties"]["size"]["type"] == "integer"


def test_cursor_paginator_as_value():
    value = CursorPaginatorSchema.as_value()
    assert isinstance(value, SchemaValue)
    assert value.to_dict() == {"CursorPaginator": CursorPaginatorSchema.create()["data"]}


def test_cursor_paginator_reference_resolves_in_components():
    components = ComponentsValue(schemas=[CursorPaginatorSchema.as_value()])
    ref = components.reference("schemas", CursorPaginatorSchema.NAME)
    assert ref.to_dict() == CursorPaginatorContentDescriptor.create()["schema"]
