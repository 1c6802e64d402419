"""Pagination errors, rendered as 400 Problem Details."""

from typing import Any

from ..errors.problem_details import BadRequestError


class PaginationError(BadRequestError):
    """Base class for client errors raised by the pagination layer."""

    type_uri = "about:blank"

    def __init__(self, detail: str, **extensions: Any):
        super().__init__(detail, type_uri=self.type_uri, **extensions)


class InvalidCursorError(PaginationError):
    """A cursor token could not be accepted."""


class MalformedTokenError(InvalidCursorError):
    """Token is not valid base64, has the wrong field count, or a field fails to parse."""

    type_uri = "/problems/malformed-token"


class InherentlyInvalidDirectionError(InvalidCursorError):
    """Token embeds the invalid direction sentinel."""

    type_uri = "/problems/invalid-direction"

    def __init__(self, detail: str = "token contains an inherently invalid direction"):
        super().__init__(detail)


class DirectionMismatchError(InvalidCursorError):
    """Token is well formed but was presented in the wrong navigational context."""

    type_uri = "/problems/direction-mismatch"

    def __init__(self, expected, actual):
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"token direction mismatch: expected {expected}, got {actual}",
            expected_direction=str(expected),
            actual_direction=str(actual)
        )


class AmbiguousDirectionError(PaginationError):
    """Both next and prev tokens were supplied."""

    type_uri = "/problems/ambiguous-direction"

    def __init__(self, detail: str = "both next and prev tokens cannot be provided"):
        super().__init__(detail)


class InvalidLimitError(PaginationError):
    """Page size outside the configured bounds."""

    type_uri = "/problems/invalid-limit"

    def __init__(self, min_limit: int, max_limit: int):
        self.min_limit = min_limit
        self.max_limit = max_limit
        super().__init__(
            f"invalid limit: must be between {min_limit} and {max_limit}",
            min_limit=min_limit,
            max_limit=max_limit
        )


class InvalidTokenError(PaginationError):
    """A paginator request carries a token that cannot be decoded."""

    type_uri = "/problems/invalid-token"

    def __init__(self, message: str):
        self.message = message
        super().__init__(f"invalid token: {message}")
