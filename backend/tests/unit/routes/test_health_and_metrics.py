"""Tests for the health and metrics endpoints."""


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["database"] == "ok"
    assert body["service"] == "academic-schedule-api"


def test_metrics_exposes_request_timings(client):
    client.get("/api/v1/health")

    response = client.get("/metrics")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert "academic_schedule_http_request_duration_seconds" in response.text
    assert 'endpoint="/api/v1/health"' in response.text
