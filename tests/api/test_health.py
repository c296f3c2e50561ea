from datetime import datetime, timezone

from lookup_dashboard.core.exceptions import StoreError


def test_health_check(client):
    response = client.get("/api/v1/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"
    assert response.json()["message"] == "Server Healthy"


def test_health_check_db(client, mock_overview_service):
    mock_overview_service.get_server_time.return_value = datetime(2026, 10, 19, 12, tzinfo=timezone.utc)

    response = client.get("/api/v1/health/db")

    assert response.status_code == 200
    assert response.json()["message"] == "Database connection OK"
    assert response.json()["now"].startswith("2026-10-19T12:00:00")


def test_health_check_db_unavailable(client, mock_overview_service):
    mock_overview_service.get_server_time.side_effect = StoreError("Database query failed while loading health")

    response = client.get("/api/v1/health/db")

    assert response.status_code == 503
    assert response.json()["status"] == "unhealthy"


def test_correlation_id_is_echoed(client):
    response = client.get("/api/v1/health", headers={"X-Correlation-ID": "abc-123"})

    assert response.headers["X-Correlation-ID"] == "abc-123"


def test_correlation_id_is_generated(client):
    response = client.get("/api/v1/health")

    assert response.headers["X-Correlation-ID"]
