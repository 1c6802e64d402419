"""Pagination module for keyset (cursor-based) pagination."""

from .cursor import (
    SEPARATOR,
    INVALID_DIRECTION_CODE,
    Direction,
    CursorKey,
    CursorData,
    encode_cursor,
    decode_cursor
)
from .errors import (
    PaginationError,
    InvalidCursorError,
    MalformedTokenError,
    InherentlyInvalidDirectionError,
    DirectionMismatchError,
    AmbiguousDirectionError,
    InvalidLimitError,
    InvalidTokenError
)
from .paginator import (
    DEFAULT_LIMIT,
    MIN_LIMIT,
    MAX_LIMIT,
    NIL_UUID,
    Lookahead,
    PageAnchor,
    Paginator,
    PaginationParams,
    get_tokens,
    build_paginator,
    get_paginator_direction,
    parse_limit,
    paginate_rows
)

__all__ = [
    "SEPARATOR",
    "INVALID_DIRECTION_CODE",
    "Direction",
    "CursorKey",
    "CursorData",
    "encode_cursor",
    "decode_cursor",
    "PaginationError",
    "InvalidCursorError",
    "MalformedTokenError",
    "InherentlyInvalidDirectionError",
    "DirectionMismatchError",
    "AmbiguousDirectionError",
    "InvalidLimitError",
    "InvalidTokenError",
    "DEFAULT_LIMIT",
    "MIN_LIMIT",
    "MAX_LIMIT",
    "NIL_UUID",
    "Lookahead",
    "PageAnchor",
    "Paginator",
    "PaginationParams",
    "get_tokens",
    "build_paginator",
    "get_paginator_direction",
    "parse_limit",
    "paginate_rows"
]
