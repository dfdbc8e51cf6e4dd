"""Render value-object trees as JSON or YAML, and load documents back from disk."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import yaml

from orpc.models.base import ValueObjectError, dump
from orpc.models.document import DocumentValue

YAML_SUFFIXES = (".yaml", ".yml")


def to_json(value: Any, indent: int | None = 2) -> str:
    """Serialize a value object (or plain data holding value objects) to JSON.

    Keys keep OpenRPC field order; `$ref` is written literally.
    """
    return json.dumps(dump(value), indent=indent, ensure_ascii=False)


def to_yaml(value: Any) -> str:
    return yaml.dump(
        dump(value),
        default_flow_style=False,
        sort_keys=False,
        width=100,
        allow_unicode=True,
    )


def read_data(path: str | Path) -> Any:
    """Parse a YAML or JSON file into plain data.

    YAML is a superset of JSON, so one loader covers both.

    Raises:
        ValueObjectError: If the file cannot be read or parsed.
    """
    path = Path(path)
    try:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueObjectError(f"{path}: not valid YAML or JSON ({e})") from e
    except UnicodeDecodeError as e:
        raise ValueObjectError(f"{path}: not UTF-8 text ({e.reason} at byte {e.start})") from e
    except OSError as e:
        raise ValueObjectError(f"{path}: cannot read file ({e.strerror or e})") from e


def load_document(path: str | Path) -> DocumentValue:
    """Load an OpenRPC document file through the value objects.

    Raises:
        ValueObjectError: If the file can't be parsed or describes an invalid document.
    """
    data = read_data(path)
    if not isinstance(data, dict):
        raise ValueObjectError(f"{path}: expected an OpenRPC document object at the top level")
    return DocumentValue.from_dict(data)


def write_document(document: DocumentValue, path: str | Path) -> Path:
    """Write a document as YAML (.yaml/.yml) or JSON (anything else)."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    if path.suffix.lower() in YAML_SUFFIXES:
        text = to_yaml(document)
    else:
        text = to_json(document) + "\n"
    path.write_text(text, encoding="utf-8")
    return path
