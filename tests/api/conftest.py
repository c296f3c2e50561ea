"""
Fixtures for HTTP-layer tests.

Services are replaced with AsyncMocks through dependency overrides, so no
database or lifespan is involved.
"""

from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from lookup_dashboard.api.deps import get_job_service, get_overview_service, get_stats_service
from lookup_dashboard.api.main import create_app


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def mock_stats_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_stats_service] = lambda: service
    return service


@pytest.fixture
def mock_job_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_job_service] = lambda: service
    return service


@pytest.fixture
def mock_overview_service(app):
    service = AsyncMock()
    app.dependency_overrides[get_overview_service] = lambda: service
    return service
