"""Data models for Keyset Pager API."""

from .cursors import (
    RowKey,
    CursorInspection,
    PageBoundaryRequest
)

__all__ = [
    "RowKey",
    "CursorInspection",
    "PageBoundaryRequest"
]
