"""FastAPI dependencies for paginated endpoints."""

import logging
from typing import Annotated, Optional

from fastapi import Depends, Query

from .config import get_settings
from .pagination import PaginationParams


logger = logging.getLogger(__name__)


async def get_pagination_params(
    next_token: Annotated[Optional[str], Query(description="Cursor token for the next page")] = None,
    prev_token: Annotated[Optional[str], Query(description="Cursor token for the previous page")] = None,
    limit: Annotated[Optional[str], Query(description="Number of items per page")] = None
) -> PaginationParams:
    """Validate the pagination query parameters against the configured page sizes.

    Args:
        next_token: Token taken from a previous response's next_token
        prev_token: Token taken from a previous response's prev_token
        limit: Requested page size, defaults to the configured default

    Returns:
        Validated pagination parameters with the resolved anchor

    Raises:
        InvalidLimitError: If limit is malformed or out of bounds
        InvalidTokenError: If a token cannot be decoded in its direction
        AmbiguousDirectionError: If both tokens are provided
    """
    settings = get_settings()

    logger.debug(f"Pagination query: next_token={next_token}, prev_token={prev_token}, limit={limit}")

    return PaginationParams.from_query(
        next_token,
        prev_token,
        limit,
        default_limit=settings.default_page_size,
        min_limit=settings.min_page_size,
        max_limit=settings.max_page_size
    )


Pagination = Annotated[PaginationParams, Depends(get_pagination_params)]
