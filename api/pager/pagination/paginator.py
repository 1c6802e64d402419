"""Page boundary resolution and the Paginator value object."""

import hashlib
import logging
from typing import Any, List, Mapping, NamedTuple, Optional, Sequence, Tuple
from urllib.parse import urlencode
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from .cursor import CursorKey, Direction, decode_cursor, encode_cursor, parse_integer
from .errors import (
    AmbiguousDirectionError,
    InvalidCursorError,
    InvalidLimitError,
    InvalidTokenError,
)


logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 10
MIN_LIMIT = 1
MAX_LIMIT = 1000

NIL_UUID = UUID(int=0)


class Lookahead(NamedTuple):
    """Whether a limit+1 query found rows beyond each edge of a page."""

    more_after: bool = False
    more_before: bool = False


class PageAnchor(NamedTuple):
    """Where a requested page starts and which way it extends.

    ``direction`` is None for an unanchored first page.
    """

    direction: Optional[Direction]
    id: UUID
    serial: int


class Paginator(BaseModel):
    """Pagination metadata returned alongside a page of results."""

    next_token: str = Field(default="", description="Cursor token for the next page")
    next_page: str = Field(default="", description="URL of the next page")
    prev_token: str = Field(default="", description="Cursor token for the previous page")
    prev_page: str = Field(default="", description="URL of the previous page")
    size: int = Field(default=0, ge=0, description="Number of items in this page")
    limit: int = Field(default=DEFAULT_LIMIT, description="Maximum number of items per page")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "next_token": "ZmZmZmZmZmYtZmZmZi1mZmZmLWZmZmYtZmZmZmZmZmZmZmZmOzA7Mg==",
                "next_page": "http://localhost:8000/v1/items?next_token=ZmZmZmZmZmYtZmZmZi1mZmZmLWZmZmYtZmZmZmZmZmZmZmZmOzA7Mg%3D%3D&limit=10",
                "prev_token": "",
                "prev_page": "",
                "size": 10,
                "limit": 10
            }
        }
    )

    def __str__(self) -> str:
        return (
            f"Paginator{{next: {self.next_page}, next_token: {self.next_token}, "
            f"prev: {self.prev_page}, prev_token: {self.prev_token}, "
            f"size: {self.size}, limit: {self.limit}}}"
        )

    def validate_request(self, min_limit: int = MIN_LIMIT, max_limit: int = MAX_LIMIT) -> None:
        """Validate a paginator submitted by a client.

        Args:
            min_limit: Smallest accepted page size
            max_limit: Largest accepted page size

        Raises:
            InvalidLimitError: If limit is outside [min_limit, max_limit]
            InvalidTokenError: If a non-empty token cannot be decoded in its direction
        """
        if not min_limit <= self.limit <= max_limit:
            raise InvalidLimitError(min_limit, max_limit)

        if self.next_token:
            try:
                decode_cursor(self.next_token, Direction.NEXT)
            except InvalidCursorError as e:
                raise InvalidTokenError("next token cannot be decoded") from e

        if self.prev_token:
            try:
                decode_cursor(self.prev_token, Direction.PREV)
            except InvalidCursorError as e:
                raise InvalidTokenError("prev token cannot be decoded") from e

    def generate_pages(self, url: str) -> None:
        """Fill next_page and prev_page from the tokens, relative to ``url``."""
        self.next_page = _page_url(url, "next_token", self.next_token, self.limit)
        self.prev_page = _page_url(url, "prev_token", self.prev_token, self.limit)

    def unique_id(self) -> str:
        """Stable SHA-256 hex digest of the tokens, size and limit."""
        key = f"{self.next_token}\x00{self.prev_token}\x00{self.size}\x00{self.limit}"
        return hashlib.sha256(key.encode("utf-8")).hexdigest()


class PaginationParams(BaseModel):
    """Validated pagination query parameters of a list request."""

    limit: int = Field(description="Number of items per page")
    next_token: str = Field(default="", description="Cursor token for the next page")
    prev_token: str = Field(default="", description="Cursor token for the previous page")
    direction: Optional[Direction] = Field(default=None, description="Direction of the supplied token")
    anchor_id: UUID = Field(default=NIL_UUID, description="Identifier of the row the page starts after")
    anchor_serial: int = Field(default=0, description="Serial of the row the page starts after")

    @classmethod
    def from_query(
        cls,
        next_token: Optional[str],
        prev_token: Optional[str],
        limit: Optional[str],
        default_limit: int = DEFAULT_LIMIT,
        min_limit: int = MIN_LIMIT,
        max_limit: int = MAX_LIMIT
    ) -> "PaginationParams":
        """Parse and validate the next_token, prev_token and limit query parameters.

        Raises:
            InvalidLimitError: If limit is malformed or out of bounds
            InvalidTokenError: If a token cannot be decoded in its direction
            AmbiguousDirectionError: If both tokens are provided
        """
        if next_token and prev_token:
            raise AmbiguousDirectionError()

        request = Paginator(
            next_token=next_token or "",
            prev_token=prev_token or "",
            limit=parse_limit(limit, default_limit, min_limit, max_limit)
        )
        request.validate_request(min_limit, max_limit)

        anchor = get_paginator_direction(request.next_token, request.prev_token)
        return cls(
            limit=request.limit,
            next_token=request.next_token,
            prev_token=request.prev_token,
            direction=anchor.direction,
            anchor_id=anchor.id,
            anchor_serial=anchor.serial
        )

    def anchor(self) -> PageAnchor:
        """The resolved page anchor."""
        return PageAnchor(self.direction, self.anchor_id, self.anchor_serial)


def _page_url(url: str, param: str, token: str, limit: int) -> str:
    if not token:
        return ""
    return f"{url}?{urlencode({param: token, 'limit': limit})}"


def get_tokens(
    size: int,
    first: CursorKey,
    last: CursorKey,
    direction_used: Optional[Direction],
    lookahead: Lookahead
) -> Tuple[str, str]:
    """Decide which of the next and prev tokens a page should expose.

    A page reached through a next token always has the page it came from
    behind it, so its prev token is emitted unconditionally; the same holds
    for next tokens on pages reached through a prev token. The other side
    depends on the lookahead result.

    Args:
        size: Number of rows on the page
        first: Key of the first row on the page
        last: Key of the last row on the page
        direction_used: Direction of the token that fetched this page, or
            None for an unanchored load
        lookahead: Lookahead results for both edges

    Returns:
        Tuple of (next_token, prev_token), empty strings where absent
    """
    if size == 0:
        return "", ""

    next_token = ""
    if direction_used is Direction.PREV or lookahead.more_after:
        next_token = encode_cursor(last.id, last.serial, Direction.NEXT)

    prev_token = ""
    if direction_used is Direction.NEXT or lookahead.more_before:
        prev_token = encode_cursor(first.id, first.serial, Direction.PREV)

    return next_token, prev_token


def build_paginator(
    size: int,
    limit: int,
    first: Optional[CursorKey],
    last: Optional[CursorKey],
    direction_used: Optional[Direction] = None,
    lookahead: Lookahead = Lookahead(),
    base_url: Optional[str] = None
) -> Paginator:
    """Build the Paginator for a fetched page.

    ``first`` and ``last`` may be None only when ``size`` is zero.
    """
    if size == 0:
        next_token, prev_token = "", ""
    else:
        next_token, prev_token = get_tokens(size, first, last, direction_used, lookahead)

    paginator = Paginator(
        next_token=next_token,
        prev_token=prev_token,
        size=size,
        limit=limit
    )
    if base_url is not None:
        paginator.generate_pages(base_url)

    logger.debug(f"Built {paginator}")
    return paginator


def get_paginator_direction(next_token: Optional[str], prev_token: Optional[str]) -> PageAnchor:
    """Resolve the direction and anchor row of a request from its tokens.

    Raises:
        AmbiguousDirectionError: If both tokens are provided
        InvalidCursorError: If the provided token fails to decode
    """
    if next_token and prev_token:
        raise AmbiguousDirectionError()

    if next_token:
        cursor = decode_cursor(next_token, Direction.NEXT)
        return PageAnchor(cursor.direction, cursor.id, cursor.serial)

    if prev_token:
        cursor = decode_cursor(prev_token, Direction.PREV)
        return PageAnchor(cursor.direction, cursor.id, cursor.serial)

    return PageAnchor(None, NIL_UUID, 0)


def parse_limit(
    value: Optional[str],
    default: int = DEFAULT_LIMIT,
    min_limit: int = MIN_LIMIT,
    max_limit: int = MAX_LIMIT
) -> int:
    """Parse the ``limit`` query parameter.

    A missing or blank value selects ``default``.

    Raises:
        InvalidLimitError: If the value is not an integer or is out of bounds
    """
    if value is None or not value.strip():
        return default

    try:
        limit = parse_integer(value.strip())
    except ValueError as e:
        raise InvalidLimitError(min_limit, max_limit) from e

    if not min_limit <= limit <= max_limit:
        raise InvalidLimitError(min_limit, max_limit)

    return limit


def paginate_rows(
    rows: Sequence[Mapping[str, Any]],
    limit: int,
    direction_used: Optional[Direction],
    base_url: Optional[str] = None,
    id_field: str = "id",
    serial_field: str = "serial"
) -> Tuple[List[Mapping[str, Any]], Paginator]:
    """Process the rows of a limit+1 query into a page and its Paginator.

    ``rows`` are in fetch order, walking away from the anchor. Rows fetched
    through a prev token are therefore reversed into display order.

    Args:
        rows: Up to limit+1 rows from the data layer
        limit: Requested page size
        direction_used: Direction of the token used for the query, or None
        base_url: Optional URL for next_page/prev_page
        id_field: Row key holding the identifier
        serial_field: Row key holding the serial

    Returns:
        Tuple of (page_rows, paginator)
    """
    has_more = len(rows) > limit
    page = list(rows[:limit])

    if direction_used is Direction.NEXT:
        lookahead = Lookahead(more_after=has_more, more_before=True)
    elif direction_used is Direction.PREV:
        lookahead = Lookahead(more_after=True, more_before=has_more)
        page.reverse()
    else:
        lookahead = Lookahead(more_after=has_more)

    first = last = None
    if page:
        first = CursorKey(page[0][id_field], page[0][serial_field])
        last = CursorKey(page[-1][id_field], page[-1][serial_field])

    paginator = build_paginator(len(page), limit, first, last, direction_used, lookahead, base_url)
    return page, paginator
