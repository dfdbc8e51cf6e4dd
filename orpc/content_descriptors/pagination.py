"""Pagination content descriptor."""

from __future__ import annotations

from typing import Any

CURSOR_PAGINATOR_REF = "#/components/schemas/CursorPaginator"


class CursorPaginatorContentDescriptor:
    """The `page` parameter of a cursor-paginated method.

    The schema is a reference; register `CursorPaginatorSchema` in the
    document's components so the pointer resolves.
    """

    @staticmethod
    def create() -> dict[str, Any]:
        return {
            "name": "page",
            "description": "The page to return. If not specified, the first page is returned.",
            "schema": {
                "$ref": CURSOR_PAGINATOR_REF,
            },
        }
