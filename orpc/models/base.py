"""Shared machinery for OpenRPC value objects.

Value objects are frozen, keyword-only dataclasses. Nested value objects are
declared through field metadata (see `nested`) so that construction-time
checks, `to_dict` and `from_dict` can all be driven from one declaration.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import MISSING, Field, dataclass, fields
from typing import Any, TypeVar, Union

META_KEY = "orpc"

T = TypeVar("T", bound="ValueObject")


class ValueObjectError(ValueError):
    """A value object was given a missing, empty, or malformed field."""


class _Unset:
    """Marker for an optional flag the caller never set.

    Distinct from False: unset flags are left out of the serialized document,
    False is written.
    """

    _instance: _Unset | None = None

    def __new__(cls) -> _Unset:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self):
        return (_Unset, ())


UNSET = _Unset()

# Annotation for tri-state flags: UNSET, True or False.
Flag = Union[bool, _Unset]


@dataclass(frozen=True)
class Nested:
    """How a field holds other value objects."""

    type: type | None = None  # Value object class of the nested values
    many: bool = False  # Ordered sequence of values
    keyed: bool = False  # Map of component id -> value
    refs: bool = False  # A ReferenceValue may stand in for a value
    raw: bool = False  # Plain JSON maps are kept as they are
    key: str | None = None  # Serialized key when not the camelCase attribute name


def nested(
    type_: type | None = None,
    *,
    many: bool = False,
    keyed: bool = False,
    refs: bool = False,
    raw: bool = False,
    key: str | None = None,
) -> dict[str, Nested]:
    """Field metadata declaring a nested value or a renamed key."""
    return {META_KEY: Nested(type_, many=many, keyed=keyed, refs=refs, raw=raw, key=key)}


def camel_case(name: str) -> str:
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def output_key(f: Field) -> str:
    meta = f.metadata.get(META_KEY)
    if meta is not None and meta.key:
        return meta.key
    return camel_case(f.name)


def is_required(f: Field) -> bool:
    return f.default is MISSING and f.default_factory is MISSING


def is_optional_text(f: Field) -> bool:
    # Model modules use postponed annotations, so f.type is the source text.
    return f.type == "str | None"


# --- Field checks used by the value objects' validate() hooks ---


def check_text(obj: ValueObject, name: str, *, required: bool = True):
    """The field must be a string; required ones must also be non-empty."""
    value = getattr(obj, name)
    if value is None and not required:
        return
    if not isinstance(value, str):
        raise ValueObjectError(
            f"{type(obj).__name__}.{name}: expected a string, got {type(value).__name__}"
        )
    if required and not value:
        raise ValueObjectError(f"{type(obj).__name__}.{name}: must not be empty")


def check_flag(obj: ValueObject, name: str):
    """Tri-state flags hold UNSET, True or False."""
    value = getattr(obj, name)
    if value is not UNSET and not isinstance(value, bool):
        raise ValueObjectError(
            f"{type(obj).__name__}.{name}: expected a boolean, got {type(value).__name__}"
        )


def check_map(obj: ValueObject, name: str, *, required: bool = False):
    value = getattr(obj, name)
    if value is None and not required:
        return
    if not isinstance(value, Mapping):
        raise ValueObjectError(
            f"{type(obj).__name__}.{name}: expected an object, got {type(value).__name__}"
        )


class ValueObject:
    """Base for every OpenRPC value object.

    Subclasses are `@dataclass(frozen=True, kw_only=True)` and may override
    `validate()` for their own invariants.
    """

    def __post_init__(self):
        for f in fields(self):
            value = getattr(self, f.name)
            if is_required(f) and (value is None or value == ""):
                raise ValueObjectError(
                    f"{type(self).__name__}: missing required field '{f.name}'"
                )
            if is_optional_text(f) and value is not None:
                check_text(self, f.name, required=False)
            meta = f.metadata.get(META_KEY)
            if meta is None or meta.type is None or value is None:
                continue
            object.__setattr__(self, f.name, _coerce(self, f.name, meta, value))
        self.validate()

    def validate(self):
        """Hook for class-specific invariants. Raise ValueObjectError on failure."""

    def to_dict(self) -> dict[str, Any]:
        """Plain JSON-ready dict in OpenRPC key spelling.

        None and UNSET fields are omitted; False is kept.
        """
        data: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None or value is UNSET:
                continue
            data[output_key(f)] = dump(value)
        return data

    @classmethod
    def from_dict(cls: type[T], data: Mapping[str, Any]) -> T:
        """Build from an OpenRPC-shaped dict. Unknown keys are ignored.

        Raises:
            ValueObjectError: If `data` is not an object or a required key is missing.
        """
        if not isinstance(data, Mapping):
            raise ValueObjectError(
                f"{cls.__name__}: expected an object, got {type(data).__name__}"
            )

        kwargs: dict[str, Any] = {}
        for f in fields(cls):
            key = output_key(f)
            if key not in data:
                if is_required(f):
                    raise ValueObjectError(f"{cls.__name__}: missing required field '{key}'")
                continue
            kwargs[f.name] = _load(f, data[key])
        return cls(**kwargs)


def dump(value: Any) -> Any:
    """Recursively turn value objects, tuples and maps into plain JSON data."""
    if isinstance(value, ValueObject):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {k: dump(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [dump(v) for v in value]
    return value


# --- Construction-time coercion ---


def _coerce(owner: ValueObject, name: str, meta: Nested, value: Any) -> Any:
    where = f"{type(owner).__name__}.{name}"

    if meta.many:
        if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
            raise ValueObjectError(f"{where}: expected a list, got {type(value).__name__}")
        return tuple(_check_item(where, meta, item) for item in value)

    if meta.keyed:
        return _keyed(where, meta, value)

    return _check_item(where, meta, value)


def _keyed(where: str, meta: Nested, value: Any) -> dict[str, Any]:
    """Accept a map of id -> value, or a list of named values keyed by name."""
    if isinstance(value, Mapping):
        items = list(value.items())
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        items = []
        for item in value:
            item_name = getattr(item, "name", None)
            if not item_name:
                raise ValueObjectError(f"{where}: list entries need a name to be keyed by")
            items.append((item_name, item))
    else:
        raise ValueObjectError(f"{where}: expected an object, got {type(value).__name__}")

    keyed: dict[str, Any] = {}
    for key, item in items:
        if not isinstance(key, str) or not key:
            raise ValueObjectError(f"{where}: keys must be non-empty strings, got {key!r}")
        if key in keyed:
            raise ValueObjectError(f"{where}: duplicate key '{key}'")
        keyed[key] = _check_item(f"{where}[{key!r}]", meta, item)
    return keyed


def _check_item(where: str, meta: Nested, item: Any) -> Any:
    from orpc.models.common import ReferenceValue

    if isinstance(item, meta.type):
        return item
    if meta.refs and isinstance(item, ReferenceValue):
        return item
    if meta.raw and isinstance(item, Mapping):
        return item
    raise ValueObjectError(
        f"{where}: expected {meta.type.__name__}, got {type(item).__name__}"
    )


# --- from_dict loading ---


def _load(f: Field, value: Any) -> Any:
    meta = f.metadata.get(META_KEY)
    if meta is None or meta.type is None or value is None:
        return value
    if meta.many:
        if not isinstance(value, list):
            return value  # left for the constructor to reject
        return [_load_item(meta, item) for item in value]
    if meta.keyed:
        if not isinstance(value, Mapping):
            return value
        return {k: _load_item(meta, v) for k, v in value.items()}
    return _load_item(meta, value)


def _load_item(meta: Nested, value: Any) -> Any:
    from orpc.models.common import ReferenceValue

    if isinstance(value, ValueObject) or not isinstance(value, Mapping):
        return value
    if meta.refs and "$ref" in value:
        return ReferenceValue.from_dict(value)
    if meta.raw:
        return value
    return meta.type.from_dict(value)
