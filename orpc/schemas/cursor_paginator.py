"""The CursorPaginator component schema.

`CursorPaginatorContentDescriptor` points at `#/components/schemas/CursorPaginator`;
register this schema in the document's components so that pointer resolves.
"""

from __future__ import annotations

from typing import Any

from orpc.models.common import SchemaValue


class CursorPaginatorSchema:
    """Cursor token plus optional page size."""

    NAME = "CursorPaginator"

    @staticmethod
    def create() -> dict[str, Any]:
        return {
            "name": CursorPaginatorSchema.NAME,
            "data": {
                "type": "object",
                "required": ["cursor"],
                "properties": {
                    "cursor": {
                        "type": "string",
                        "description": "The cursor to start from. If not specified, the first page is returned.",
                    },
                    "size": {
                        "type": "integer",
                        "description": "The number of items to return per page. If not specified, the default page size is used.",
                    },
                },
            },
        }

    @staticmethod
    def as_value() -> SchemaValue:
        return SchemaValue(**CursorPaginatorSchema.create())
