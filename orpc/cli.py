"""orpc CLI — build OpenRPC content descriptors and render documents."""

from collections.abc import Mapping

import click
from rich.console import Console
from rich.markup import escape

from orpc import __version__

console = Console()

RESOURCE_SECTIONS = ("fields", "filters", "relationships", "sorts")


@click.group()
@click.version_option(version=__version__)
def main():
    """orpc — OpenRPC document toolkit.

    Generate the standard method parameters (fields, filters, relationships,
    sorts, pagination, payload) from resource maps, and render OpenRPC
    documents through the typed value objects.
    """


def _fail(message: str):
    console.print(f"[red]x[/] {escape(message)}")
    raise SystemExit(1)


# ── Descriptors ──────────────────────────────────────────────────────


@main.command()
@click.argument("resources_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--method", "-m", "method_name", default=None, help="Wrap the params in a method with this name")
@click.option("--compact", is_flag=True, help="Single-line JSON output")
def descriptors(resources_file: str, method_name: str | None, compact: bool):
    """Build content descriptors from a resource map file.

    RESOURCES_FILE is YAML or JSON with optional top-level maps `fields`,
    `filters`, `relationships` and `sorts` (resource -> list of names),
    an optional `data` JSON Schema and an optional `paginate: true`.
    """
    from orpc.content_descriptors import (
        CursorPaginatorContentDescriptor,
        FieldsContentDescriptor,
        FiltersContentDescriptor,
        MethodDataContentDescriptor,
        RelationshipsContentDescriptor,
        SortsContentDescriptor,
    )
    from orpc.models import MethodValue, ValueObjectError
    from orpc.serializer import read_data, to_json

    try:
        resource_map = read_data(resources_file) or {}
    except ValueObjectError as e:
        _fail(str(e))

    if not isinstance(resource_map, Mapping):
        _fail(f"{resources_file}: expected a map at the top level")

    for section in RESOURCE_SECTIONS:
        resources = resource_map.get(section) or {}
        if not isinstance(resources, Mapping) or not all(
            isinstance(names, list) for names in resources.values()
        ):
            _fail(f"{section}: expected a map of resource -> list of names")

    params = []
    if resource_map.get("data") is not None:
        params.append(MethodDataContentDescriptor.create(resource_map["data"]))
    params.append(FieldsContentDescriptor.create(resource_map.get("fields") or {}))
    params.append(FiltersContentDescriptor.create(resource_map.get("filters") or {}))
    params.append(RelationshipsContentDescriptor.create(resource_map.get("relationships") or {}))
    params.append(SortsContentDescriptor.create(resource_map.get("sorts") or {}))
    if resource_map.get("paginate"):
        params.append(CursorPaginatorContentDescriptor.create())

    indent = None if compact else 2

    if method_name:
        try:
            method = MethodValue.with_params(method_name, *params)
        except ValueObjectError as e:
            _fail(str(e))
        click.echo(to_json(method, indent=indent))
        return

    click.echo(to_json([p for p in params if p is not None], indent=indent))


# ── Render ───────────────────────────────────────────────────────────


@main.command()
@click.argument("document_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--format", "-f", "fmt", default="json", type=click.Choice(["json", "yaml"]))
@click.option("--output", "-o", default=None, help="Write to a file (format from its suffix)")
def render(document_file: str, fmt: str, output: str | None):
    """Load an OpenRPC document through the value objects and re-emit it.

    Fails with exit status 1 if the document is missing required fields
    or holds malformed values.
    """
    from orpc.models import ValueObjectError
    from orpc.serializer import load_document, to_json, to_yaml, write_document

    try:
        document = load_document(document_file)
    except ValueObjectError as e:
        _fail(str(e))

    if output:
        path = write_document(document, output)
        console.print(
            f"[green]v[/] {escape(document.info.title)} "
            f"({len(document.methods)} methods) written to {escape(str(path))}"
        )
        return

    click.echo(to_yaml(document) if fmt == "yaml" else to_json(document), nl=fmt == "json")


# ── Schema ───────────────────────────────────────────────────────────


@main.command(name="schema")
@click.argument("name", type=click.Choice(["cursor-paginator"]))
def dump_schema(name: str):
    """Print a reusable component schema as JSON, keyed by its component name."""
    from orpc.schemas import CursorPaginatorSchema
    from orpc.serializer import to_json

    schemas = {"cursor-paginator": CursorPaginatorSchema}
    click.echo(to_json(schemas[name].as_value()))


if __name__ == "__main__":
    main()
