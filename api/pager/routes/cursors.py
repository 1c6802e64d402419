"""Cursor API endpoints."""

import logging

from fastapi import APIRouter

from ..config import get_settings
from ..dependencies import Pagination
from ..models.cursors import CursorInspection, PageBoundaryRequest
from ..pagination import Paginator, InvalidLimitError, build_paginator


logger = logging.getLogger(__name__)

cursors_router = APIRouter(
    prefix="/cursors",
    tags=["Cursors"],
    responses={
        400: {"description": "Bad Request - Invalid token or limit"}
    }
)


@cursors_router.get(
    "",
    response_model=CursorInspection,
    summary="Resolve pagination parameters",
    description="Validate next_token, prev_token and limit and return the position they resolve to."
)
async def inspect_cursor(pagination: Pagination) -> CursorInspection:
    """Resolve the pagination query parameters of a list request.

    A request without tokens resolves to an unanchored first page with a
    null direction and the nil UUID.
    """
    direction = str(pagination.direction) if pagination.direction else None
    logger.info(f"Resolved cursor: direction={direction}, serial={pagination.anchor_serial}, limit={pagination.limit}")

    return CursorInspection(
        direction=direction,
        id=pagination.anchor_id,
        serial=pagination.anchor_serial,
        limit=pagination.limit
    )


@cursors_router.post(
    "",
    response_model=Paginator,
    summary="Issue page tokens",
    description="Compute the next and prev tokens for a fetched page from its edge rows and lookahead results."
)
async def issue_tokens(page: PageBoundaryRequest) -> Paginator:
    """Build the Paginator for a page the caller has already fetched.

    The limit is checked against the configured page size bounds.

    Raises:
        InvalidLimitError: If limit is outside the configured bounds
    """
    settings = get_settings()
    if not settings.min_page_size <= page.limit <= settings.max_page_size:
        raise InvalidLimitError(settings.min_page_size, settings.max_page_size)

    paginator = build_paginator(
        page.size,
        page.limit,
        page.first.to_cursor_key() if page.first else None,
        page.last.to_cursor_key() if page.last else None,
        page.direction_used(),
        page.lookahead(),
        page.base_url
    )

    logger.info(f"Issued tokens for page of {page.size} (next={bool(paginator.next_token)}, prev={bool(paginator.prev_token)})")
    return paginator
