"""Tests for the orpc command line."""

import json
import tempfile
from pathlib import Path

import yaml
from click.testing import CliRunner

from orpc import __version__
from orpc.cli import main


def _write(tmpdir: str, name: str, data) -> str:
    path = Path(tmpdir) / name
    path.write_text(yaml.dump(data))
    return str(path)


def test_version():
    result = CliRunner().invoke(main, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_descriptors_from_resource_map():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(
            tmpdir,
            "resources.yaml",
            {
                "data": {"type": "object"},
                "fields": {"users": ["id", "name"]},
                "filters": {},
                "relationships": {"users": ["posts"]},
                "sorts": {"users": ["name"]},
                "paginate": True,
            },
        )
        result = CliRunner().invoke(main, ["descriptors", path])

    assert result.exit_code == 0, result.output
    params = json.loads(result.output)
    assert [p["name"] for p in params] == ["data", "fields", "relationships", "sorts", "page"]
    assert params[3]["schema"]["properties"]["users"]["items"]["enum"] == ["name", "-name"]


def test_descriptors_wrapped_in_method():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "resources.yaml", {"fields": {"users": ["id"]}})
        result = CliRunner().invoke(main, ["descriptors", path, "--method", "users.list", "--compact"])

    assert result.exit_code == 0, result.output
    method = json.loads(result.output)
    assert method["name"] == "users.list"
    assert method["params"][0]["name"] == "fields"


def test_descriptors_empty_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "empty.yaml"
        path.write_text("")
        result = CliRunner().invoke(main, ["descriptors", str(path)])

    assert result.exit_code == 0
    assert json.loads(result.output) == []


def test_descriptors_rejects_bad_section():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "resources.yaml", {"sorts": {"users": "name"}})
        result = CliRunner().invoke(main, ["descriptors", path])

    assert result.exit_code == 1
    assert "sorts" in result.output


def test_render_json_and_yaml():
    document = {
        "openrpc": "1.2.6",
        "info": {"title": "Demo", "version": "1.0.0"},
        "methods": [{"name": "system.ping", "params": [], "deprecated": False}],
    }
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "openrpc.yaml", document)
        as_json = CliRunner().invoke(main, ["render", path])
        as_yaml = CliRunner().invoke(main, ["render", path, "--format", "yaml"])

    assert as_json.exit_code == 0, as_json.output
    assert json.loads(as_json.output) == document
    assert yaml.safe_load(as_yaml.output) == document


def test_render_to_output_file():
    document = {
        "openrpc": "1.2.6",
        "info": {"title": "Demo", "version": "1.0.0"},
        "methods": [],
    }
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "openrpc.yaml", document)
        output = Path(tmpdir) / "out.json"
        result = CliRunner().invoke(main, ["render", path, "-o", str(output)])
        written = json.loads(output.read_text())

    assert result.exit_code == 0, result.output
    assert written == document


def test_render_reports_invalid_document():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = _write(tmpdir, "openrpc.yaml", {"openrpc": "1.2.6", "info": {"title": "Demo", "version": "1"}})
        result = CliRunner().invoke(main, ["render", path])

    assert result.exit_code == 1
    assert "'methods'" in result.output


def test_render_reports_undecodable_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "openrpc.json"
        path.write_bytes(b"\xff\xfe")
        result = CliRunner().invoke(main, ["render", str(path)])

    assert result.exit_code == 1
    assert "not UTF-8 text" in " ".join(result.output.split())


def test_descriptors_reports_undecodable_file():
    with tempfile.TemporaryDirectory() as tmpdir:
        path = Path(tmpdir) / "resources.yaml"
        path.write_bytes(b"\xff\xfe")
        result = CliRunner().invoke(main, ["descriptors", str(path)])

    assert result.exit_code == 1
    assert "not UTF-8 text" in " ".join(result.output.split())


def test_schema_cursor_paginator():
    result = CliRunner().invoke(main, ["schema", "cursor-paginator"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert list(data) == ["CursorPaginator"]
    assert data["CursorPaginator"]["required"] == ["cursor"]
