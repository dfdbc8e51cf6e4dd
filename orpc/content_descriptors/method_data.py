"""Payload content descriptor — the `data` parameter of a method."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, Union, runtime_checkable

DATA_DESCRIPTION = "The data that will be passed to the method."


class InvalidCapabilityError(TypeError):
    """Raised when a provider cannot produce validation rules."""


@runtime_checkable
class ValidationRulesProvider(Protocol):
    """Anything that can describe its payload as a JSON Schema map.

    Data classes usually implement this as a classmethod or staticmethod so
    the class itself can be passed around.
    """

    def get_validation_rules(self, context: dict[str, Any]) -> dict[str, Any]: ...


RulesSource = Union[ValidationRulesProvider, Callable[[dict[str, Any]], dict[str, Any]]]


class MethodDataContentDescriptor:
    """Builds the `data` parameter from a JSON Schema or a rules provider."""

    @staticmethod
    def create(schema: dict[str, Any]) -> dict[str, Any]:
        """Wrap a JSON Schema as the `data` parameter. The schema is not copied."""
        return {
            "name": "data",
            "description": DATA_DESCRIPTION,
            "schema": schema,
        }

    @staticmethod
    def create_from_data(provider: RulesSource) -> dict[str, Any]:
        """Resolve validation rules from `provider` (empty context) and wrap them.

        Raises:
            InvalidCapabilityError: If `provider` exposes no callable
                `get_validation_rules` and is not a plain function.
        """
        return MethodDataContentDescriptor.create(_resolve_rules(provider))


def _resolve_rules(provider: RulesSource) -> dict[str, Any]:
    get_rules = getattr(provider, "get_validation_rules", None)
    if callable(get_rules):
        return get_rules({})

    # A class is callable too; without the capability it is not a provider.
    if callable(provider) and not isinstance(provider, type):
        return provider({})

    name = getattr(provider, "__qualname__", None) or type(provider).__qualname__
    raise InvalidCapabilityError(
        f"{name} does not implement get_validation_rules(context)"
    )
