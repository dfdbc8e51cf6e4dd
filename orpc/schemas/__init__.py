"""Reusable component schemas referenced by the content descriptors."""

from orpc.schemas.cursor_paginator import CursorPaginatorSchema

__all__ = ["CursorPaginatorSchema"]
