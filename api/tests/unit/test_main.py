"""Tests for main FastAPI application."""

from fastapi.testclient import TestClient

from pager import __version__
from pager.main import create_app


class TestMainApp:
    """Test main FastAPI application."""

    def test_create_app(self):
        """Test app creation."""
        app = create_app()

        assert app.title == "Keyset Pager API"
        assert app.version == __version__
        assert app.docs_url == "/docs"
        assert app.openapi_url == "/openapi.json"

    def test_root_endpoint(self, test_client: TestClient):
        """Test root endpoint."""
        response = test_client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert data["service"] == "Keyset Pager API"
        assert data["version"] == __version__
        assert data["docs"] == "/docs"
        assert data["health"] == "/health"

    def test_health_check(self, test_client: TestClient):
        """Test health endpoint."""
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_liveness_check(self, test_client: TestClient):
        """Test liveness endpoint."""
        response = test_client.get("/live")

        assert response.status_code == 200
        assert response.json() == {"status": "alive", "service": "Keyset Pager API"}

    def test_unknown_route_is_problem_json(self, test_client: TestClient):
        """Test 404s are rendered as Problem Details."""
        response = test_client.get("/v1/nope")

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/problem+json"
        data = response.json()
        assert data["title"] == "Not Found"
        assert data["instance"] == "/v1/nope"

    def test_method_not_allowed(self, test_client: TestClient):
        """Test 405s are rendered as Problem Details."""
        response = test_client.delete("/v1/cursors")

        assert response.status_code == 405
        assert response.json()["title"] == "Method Not Allowed"

    def test_openapi_lists_cursor_routes(self, test_client: TestClient):
        """Test the cursor endpoints are documented."""
        response = test_client.get("/openapi.json")

        assert response.status_code == 200
        paths = response.json()["paths"]
        assert "/v1/cursors" in paths
        assert set(paths["/v1/cursors"]) == {"get", "post"}
