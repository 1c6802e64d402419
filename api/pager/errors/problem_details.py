"""Problem Details (RFC 9457) responses for Keyset Pager API."""

from typing import Optional, Any
from pydantic import BaseModel, Field
from fastapi import Request
from fastapi.responses import JSONResponse


PROBLEM_JSON = "application/problem+json"


class ProblemDetail(BaseModel):
    """Problem Details as defined in RFC 9457."""

    type: str = Field(default="about:blank", description="A URI reference that identifies the problem type")
    title: str = Field(description="A short, human-readable summary of the problem type")
    status: int = Field(description="The HTTP status code")
    detail: Optional[str] = Field(default=None, description="A human-readable explanation specific to this occurrence")
    instance: Optional[str] = Field(default=None, description="A URI reference that identifies the specific occurrence")

    # Extension members (min_limit, max_limit, ...) ride along as extra fields
    model_config = {"extra": "allow"}


class ProblemDetailException(Exception):
    """Base exception for Problem Details responses."""

    def __init__(
        self,
        status: int,
        title: str,
        detail: Optional[str] = None,
        type_uri: str = "about:blank",
        instance: Optional[str] = None,
        **extensions: Any
    ):
        self.status = status
        self.title = title
        self.detail = detail
        self.type_uri = type_uri
        self.instance = instance
        self.extensions = extensions
        super().__init__(detail or title)

    def to_problem_detail(self, request: Optional[Request] = None) -> ProblemDetail:
        """Convert to ProblemDetail model."""
        instance = self.instance
        if instance is None and request:
            instance = str(request.url.path)

        return ProblemDetail(
            type=self.type_uri,
            title=self.title,
            status=self.status,
            detail=self.detail,
            instance=instance,
            **self.extensions
        )

    def to_response(self, request: Optional[Request] = None) -> JSONResponse:
        """Convert to JSONResponse with Problem Details format."""
        problem = self.to_problem_detail(request)
        return JSONResponse(
            status_code=self.status,
            content=problem.model_dump(exclude_none=True),
            media_type=PROBLEM_JSON
        )


class BadRequestError(ProblemDetailException):
    """400 Bad Request error."""

    def __init__(self, detail: str, type_uri: str = "about:blank", **extensions: Any):
        super().__init__(
            status=400,
            title="Bad Request",
            detail=detail,
            type_uri=type_uri,
            **extensions
        )


def create_problem_response(
    status: int,
    title: str,
    detail: Optional[str] = None,
    type_uri: str = "about:blank",
    instance: Optional[str] = None,
    request: Optional[Request] = None,
    **extensions: Any
) -> JSONResponse:
    """Create a Problem Details response."""
    if instance is None and request:
        instance = str(request.url.path)

    problem = ProblemDetail(
        type=type_uri,
        title=title,
        status=status,
        detail=detail,
        instance=instance,
        **extensions
    )

    return JSONResponse(
        status_code=status,
        content=problem.model_dump(exclude_none=True),
        media_type=PROBLEM_JSON
    )
