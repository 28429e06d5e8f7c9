# tests/api/test_health.py
"""Tests for the health check endpoint."""

from cloudregions import __version__


class TestHealthEndpoint:
    """Tests for GET /api/v1/health."""

    def test_health_returns_200(self, client):
        """Health endpoint should return 200 OK."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200

    def test_health_returns_status_ok(self, client):
        """Health endpoint should return status 'ok'."""
        response = client.get("/api/v1/health")
        data = response.json()
        assert data["status"] == "ok"

    def test_health_returns_version(self, client):
        """Health endpoint should include the application version."""
        data = client.get("/api/v1/health").json()
        assert data["version"] == __version__

    def test_health_reports_dataset(self, client):
        """Health endpoint should report where the data came from and how much of it there is."""
        data = client.get("/api/v1/health").json()
        assert data["source"] == "bundled"
        assert data["total_regions"] == 7
