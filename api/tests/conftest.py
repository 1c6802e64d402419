"""Pytest configuration and shared fixtures for the Keyset Pager tests."""

import base64
import logging
from typing import Dict, Any, List
from uuid import UUID

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from pager.config import settings
from pager.main import create_app


# Disable logging for cleaner test output
logging.getLogger("pager").setLevel(logging.WARNING)


FIRST_ID = UUID("11111111-1111-1111-1111-111111111111")
LAST_ID = UUID("99999999-9999-9999-9999-999999999999")


@pytest.fixture
def raw_token():
    """Base64 encode an arbitrary payload, bypassing the codec."""
    def encode(payload: str) -> str:
        return base64.b64encode(payload.encode("utf-8")).decode("ascii")
    return encode


@pytest.fixture
def first_id() -> UUID:
    """Identifier of the first row in the sample page."""
    return FIRST_ID


@pytest.fixture
def last_id() -> UUID:
    """Identifier of the last row in the sample page."""
    return LAST_ID


@pytest.fixture
def page_settings(monkeypatch):
    """Narrow page size bounds on the shared settings instance."""
    monkeypatch.setattr(settings, "default_page_size", 5)
    monkeypatch.setattr(settings, "min_page_size", 2)
    monkeypatch.setattr(settings, "max_page_size", 20)
    yield settings


@pytest.fixture
def app() -> FastAPI:
    """Create FastAPI application instance for testing."""
    return create_app()


@pytest.fixture
def test_client(app: FastAPI) -> TestClient:
    """Create test client for API testing."""
    return TestClient(app)


@pytest.fixture
def sample_rows() -> List[Dict[str, Any]]:
    """Rows ordered by serial descending, as a first-page query returns them."""
    return [
        {"id": UUID(int=serial), "serial": serial, "name": f"row {serial}"}
        for serial in range(20, 0, -1)
    ]


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, no network)")
    config.addinivalue_line("markers", "api: Tests that exercise the HTTP surface")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        if "api" in item.name:
            item.add_marker(pytest.mark.api)
