"""Tests for document serialization and loading."""

import json
import tempfile
from pathlib import Path

import pytest
import yaml

from orpc.content_descriptors import (
    CursorPaginatorContentDescriptor,
    FieldsContentDescriptor,
    SortsContentDescriptor,
)
from orpc.models import (
    ComponentsValue,
    DocumentValue,
    InfoValue,
    MethodValue,
    ValueObjectError,
)
from orpc.schemas import CursorPaginatorSchema
from orpc.serializer import load_document, read_data, to_json, to_yaml, write_document


def _make_document() -> DocumentValue:
    list_users = MethodValue.with_params(
        "users.list",
        FieldsContentDescriptor.create({"users": ["id", "name"]}),
        SortsContentDescriptor.create({"users": ["name"]}),
        CursorPaginatorContentDescriptor.create(),
        summary="List users",
    )
    return DocumentValue(
        openrpc="1.2.6",
        info=InfoValue(title="Users API", version="2.0.0"),
        methods=[list_users],
        components=ComponentsValue(schemas=[CursorPaginatorSchema.as_value()]),
    )


def test_to_json_end_to_end():
    data = json.loads(to_json(_make_document()))
    method = data["methods"][0]

    assert data["openrpc"] == "1.2.6"
    assert [p["name"] for p in method["params"]] == ["fields", "sorts", "page"]
    assert method["params"][1]["schema"]["properties"]["users"]["items"]["enum"] == ["name", "-name"]
    assert method["params"][2]["schema"] == {"$ref": "#/components/schemas/CursorPaginator"}
    assert data["components"]["schemas"]["CursorPaginator"]["required"] == ["cursor"]


def test_to_json_compact():
    text = to_json(MethodValue(name="system.ping", params=[]), indent=None)
    assert text == '{"name": "system.ping", "params": []}'


def test_to_yaml_keeps_field_order():
    text = to_yaml(_make_document())
    assert text.startswith("openrpc: 1.2.6\ninfo:\n")
    assert yaml.safe_load(text) == json.loads(to_json(_make_document()))


def test_write_and_load_yaml_document():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_document(_make_document(), Path(tmpdir) / "openrpc.yaml")
        assert path.suffix == ".yaml"
        document = load_document(path)

    assert document.to_dict() == _make_document().to_dict()
    assert document.components.schemas["CursorPaginator"]["required"] == ["cursor"]


def test_write_and_load_json_document():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = write_document(_make_document(), Path(tmpdir) / "nested" / "openrpc.json")
        data = json.loads(path.read_text())
        document = load_document(path)

    assert data["info"]["title"] == "Users API"
    assert document.method("users.list").summary == "List users"


def test_load_document_missing_methods():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "broken.json"
        path.write_text(json.dumps({"openrpc": "1.2.6", "info": {"title": "X", "version": "1"}}))
        with pytest.raises(ValueObjectError, match="methods"):
            load_document(path)


def test_load_document_rejects_list():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "list.yaml"
        path.write_text("- openrpc\n")
        with pytest.raises(ValueObjectError, match="top level"):
            load_document(path)


def test_read_data_reports_parse_errors():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "bad.yaml"
        path.write_text("openrpc: [1.2.6\n")
        with pytest.raises(ValueObjectError, match="not valid YAML or JSON"):
            read_data(path)


def test_read_data_reports_encoding_errors():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "bad.json"
        path.write_bytes(b"\xff\xfe")
        with pytest.raises(ValueObjectError, match="not UTF-8 text"):
            read_data(path)


def test_read_data_reports_unreadable_path():
    with tempfile.TemporaryDirectory() as tmpdir:
        with pytest.raises(ValueObjectError, match="cannot read file"):
            read_data(tmpdir)
