"""Tests for error handling and Problem Details implementation."""

import json

import pytest
from fastapi import Request
from fastapi.responses import JSONResponse
from unittest.mock import Mock

from pager.errors.problem_details import (
    ProblemDetail,
    ProblemDetailException,
    BadRequestError,
    create_problem_response
)
from pager.pagination import Direction
from pager.pagination.errors import (
    PaginationError,
    InvalidCursorError,
    MalformedTokenError,
    InherentlyInvalidDirectionError,
    DirectionMismatchError,
    AmbiguousDirectionError,
    InvalidLimitError,
    InvalidTokenError
)


def response_body(response: JSONResponse) -> dict:
    return json.loads(response.body)


class TestProblemDetail:
    """Test ProblemDetail model."""

    def test_problem_detail_defaults(self):
        """Test ProblemDetail with default values."""
        problem = ProblemDetail(title="Test Error", status=400)

        assert problem.type == "about:blank"
        assert problem.title == "Test Error"
        assert problem.status == 400
        assert problem.detail is None
        assert problem.instance is None

    def test_problem_detail_extra_fields(self):
        """Test ProblemDetail allows extension members."""
        problem = ProblemDetail(title="Test Error", status=400, min_limit=1, max_limit=1000)

        assert problem.min_limit == 1
        assert problem.max_limit == 1000


class TestProblemDetailException:
    """Test ProblemDetailException base class."""

    def test_basic_exception(self):
        """Test basic exception creation."""
        exc = ProblemDetailException(status=400, title="Test Error", detail="Test detail")

        assert exc.status == 400
        assert exc.title == "Test Error"
        assert exc.detail == "Test detail"
        assert exc.type_uri == "about:blank"
        assert exc.instance is None
        assert str(exc) == "Test detail"

    def test_to_problem_detail_with_request(self):
        """Test the request path becomes the instance."""
        request = Mock(spec=Request)
        request.url.path = "/v1/cursors"

        exc = ProblemDetailException(status=400, title="Test Error", detail="Test detail")

        assert exc.to_problem_detail(request).instance == "/v1/cursors"

    def test_to_response(self):
        """Test converting to JSONResponse."""
        exc = ProblemDetailException(status=400, title="Test Error", detail="Test detail", error_code="E1")

        response = exc.to_response()

        assert isinstance(response, JSONResponse)
        assert response.status_code == 400
        assert response.headers["Content-Type"] == "application/problem+json"
        assert response_body(response) == {
            "type": "about:blank",
            "title": "Test Error",
            "status": 400,
            "detail": "Test detail",
            "error_code": "E1"
        }

    def test_bad_request_error(self):
        """Test BadRequestError."""
        exc = BadRequestError("Invalid input")

        assert exc.status == 400
        assert exc.title == "Bad Request"
        assert exc.detail == "Invalid input"


class TestCreateProblemResponse:
    """Test create_problem_response function."""

    def test_create_problem_response_basic(self):
        """Test basic problem response creation."""
        response = create_problem_response(status=404, title="Not Found", detail="Missing")

        assert response.status_code == 404
        assert response.headers["Content-Type"] == "application/problem+json"
        assert response_body(response)["detail"] == "Missing"

    def test_create_problem_response_with_extensions(self):
        """Test problem response with extensions."""
        request = Mock(spec=Request)
        request.url.path = "/test/path"

        response = create_problem_response(status=400, title="Test Error", request=request, error_code="E1")

        body = response_body(response)
        assert body["instance"] == "/test/path"
        assert body["error_code"] == "E1"
        assert "detail" not in body


class TestPaginationErrors:
    """Test the pagination error taxonomy."""

    @pytest.mark.parametrize("exc", [
        MalformedTokenError("invalid token: not base64"),
        InherentlyInvalidDirectionError(),
        DirectionMismatchError(Direction.NEXT, Direction.PREV),
        AmbiguousDirectionError(),
        InvalidLimitError(1, 1000),
        InvalidTokenError("next token cannot be decoded"),
    ])
    def test_all_are_bad_requests(self, exc):
        """Test every pagination error renders as a 400 problem."""
        assert isinstance(exc, PaginationError)
        assert isinstance(exc, BadRequestError)
        assert exc.status == 400
        assert exc.to_response().status_code == 400

    def test_cursor_errors_share_a_base(self):
        """Test codec errors can be caught together."""
        assert issubclass(MalformedTokenError, InvalidCursorError)
        assert issubclass(InherentlyInvalidDirectionError, InvalidCursorError)
        assert issubclass(DirectionMismatchError, InvalidCursorError)
        assert not issubclass(AmbiguousDirectionError, InvalidCursorError)
        assert not issubclass(InvalidLimitError, InvalidCursorError)

    def test_invalid_limit_carries_bounds(self):
        """Test InvalidLimitError tells the client the accepted range."""
        exc = InvalidLimitError(1, 1000)

        body = response_body(exc.to_response())

        assert body["detail"] == "invalid limit: must be between 1 and 1000"
        assert body["min_limit"] == 1
        assert body["max_limit"] == 1000
        assert body["type"] == "/problems/invalid-limit"

    def test_direction_mismatch_names_directions(self):
        """Test DirectionMismatchError reports both directions."""
        exc = DirectionMismatchError(Direction.NEXT, Direction.PREV)

        body = response_body(exc.to_response())

        assert body["detail"] == "token direction mismatch: expected next, got prev"
        assert body["expected_direction"] == "next"
        assert body["actual_direction"] == "prev"

    def test_default_messages(self):
        """Test default details."""
        assert InherentlyInvalidDirectionError().detail == "token contains an inherently invalid direction"
        assert AmbiguousDirectionError().detail == "both next and prev tokens cannot be provided"
        assert InvalidTokenError("prev token cannot be decoded").detail == "invalid token: prev token cannot be decoded"
