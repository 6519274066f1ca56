"""Tests for the health check endpoint."""

from unittest.mock import patch


class TestHealthCheck:
    def test_reports_healthy(self, client, db):
        response = client.get("/health/")

        assert response.status_code == 200
        assert response.json() == {
            "status": "healthy",
            "database": "connected",
            "channel_layer": "connected",
        }

    def test_missing_channel_layer_is_not_fatal(self, client, db):
        with patch("core.views.get_channel_layer", return_value=None):
            response = client.get("/health/")

        assert response.status_code == 200
        assert response.json()["channel_layer"] == "not_configured"
