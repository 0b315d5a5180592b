"""Unit tests for health check endpoint."""

import unittest
from datetime import datetime, timedelta

from fastapi import FastAPI
from fastapi.testclient import TestClient

from hijri_calendar import __version__
from hijri_calendar.frameworks.api.endpoints.health_check import HealthCheckEndpoint

NOW = datetime(2025, 3, 10, 12, 0, 0)


class TestHealthCheckEndpoint(unittest.TestCase):
    """Test suite for HealthCheckEndpoint."""

    def setUp(self):
        self.endpoint = HealthCheckEndpoint(clock=lambda: NOW)

        self.app = FastAPI()
        self.app.include_router(self.endpoint.create_rest_api_route())
        self.client = TestClient(self.app)

    def test_create_rest_api_route(self):
        router = self.endpoint.create_rest_api_route()

        self.assertEqual(router.prefix, "/health")
        self.assertEqual(router.tags, ["Health"])

    def test_health_check(self):
        # Arrange
        self.endpoint.start_time = NOW - timedelta(days=1, hours=2, minutes=30, seconds=15)

        # Act
        response = self.client.get("/health/")

        # Assert
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["status"], "ok")
        self.assertEqual(data["version"], __version__)
        self.assertEqual(data["uptime"], "1d 2h 30m 15s")
        self.assertEqual(data["timestamp"], "2025-03-10T12:00:00")

    def test_ping(self):
        response = self.client.get("/health/ping")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"ping": "pong"})
