"""Pydantic models for the cursor endpoints."""

from typing import Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field, ConfigDict, model_validator

from ..pagination import CursorKey, Direction, Lookahead


class RowKey(BaseModel):
    """Sort key of a boundary row."""

    id: UUID = Field(description="Row identifier")
    serial: int = Field(ge=-(2 ** 63), le=2 ** 63 - 1, description="Monotonic serial tiebreaker")

    def to_cursor_key(self) -> CursorKey:
        """Convert to a CursorKey."""
        return CursorKey(self.id, self.serial)


class CursorInspection(BaseModel):
    """Resolved position of a paginated request."""

    direction: Optional[Literal["next", "prev"]] = Field(
        default=None,
        description="Direction of the supplied token, null for a first page"
    )
    id: UUID = Field(description="Identifier of the anchor row")
    serial: int = Field(description="Serial of the anchor row")
    limit: int = Field(description="Validated page size")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "direction": "next",
                "id": "11111111-1111-1111-1111-111111111111",
                "serial": 1000,
                "limit": 10
            }
        }
    )


class PageBoundaryRequest(BaseModel):
    """Description of a fetched page, used to issue its tokens."""

    size: int = Field(ge=0, description="Number of rows on the page")
    limit: int = Field(description="Requested page size")
    first: Optional[RowKey] = Field(default=None, description="Key of the first row on the page")
    last: Optional[RowKey] = Field(default=None, description="Key of the last row on the page")
    direction: Optional[Literal["next", "prev"]] = Field(
        default=None,
        description="Direction of the token used to fetch the page, null for a first page"
    )
    more_after: bool = Field(default=False, description="Lookahead found rows after the last row")
    more_before: bool = Field(default=False, description="Lookahead found rows before the first row")
    base_url: Optional[str] = Field(default=None, description="URL the next_page and prev_page links point at")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "size": 10,
                "limit": 10,
                "first": {"id": "11111111-1111-1111-1111-111111111111", "serial": 1000},
                "last": {"id": "99999999-9999-9999-9999-999999999999", "serial": 9000},
                "direction": "prev",
                "more_after": False,
                "more_before": True
            }
        }
    )

    @model_validator(mode="after")
    def check_edges(self):
        """Non-empty pages need both edge rows and cannot exceed the limit."""
        if self.size > 0 and (self.first is None or self.last is None):
            raise ValueError("first and last are required when size is greater than zero")
        if self.size > self.limit:
            raise ValueError("size cannot exceed limit")
        return self

    def direction_used(self) -> Optional[Direction]:
        """Direction as an enum member, None for an unanchored page."""
        if self.direction is None:
            return None
        return Direction[self.direction.upper()]

    def lookahead(self) -> Lookahead:
        """Lookahead flags as a typed pair."""
        return Lookahead(more_after=self.more_after, more_before=self.more_before)
