"""Error handling module for Keyset Pager API."""

from .problem_details import (
    ProblemDetail,
    ProblemDetailException,
    BadRequestError,
    create_problem_response
)
from .handlers import register_exception_handlers

__all__ = [
    "ProblemDetail",
    "ProblemDetailException",
    "BadRequestError",
    "create_problem_response",
    "register_exception_handlers"
]
