"""Keyset Pager: stateless cursor pagination for ordered result sets."""

__version__ = "1.0.0"
