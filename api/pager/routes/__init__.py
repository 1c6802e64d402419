"""API routes for Keyset Pager API."""

from .cursors import cursors_router

__all__ = ["cursors_router"]
