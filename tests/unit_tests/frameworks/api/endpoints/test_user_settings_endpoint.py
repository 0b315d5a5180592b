"""Unit tests for UserSettingsEndpoint."""

import unittest

from fastapi import FastAPI
from fastapi.testclient import TestClient

from hijri_calendar.adapters.repositories.key_value.user_settings_repository import UserSettingsRepository
from hijri_calendar.adapters.repositories.memory.in_memory_key_value_store import InMemoryKeyValueStore
from hijri_calendar.frameworks.api.endpoints.user_settings import UserSettingsEndpoint


class TestUserSettingsEndpoint(unittest.TestCase):
    def setUp(self):
        self.repository = UserSettingsRepository(InMemoryKeyValueStore())
        self.endpoint = UserSettingsEndpoint(self.repository)

        self.app = FastAPI()
        self.app.include_router(self.endpoint.create_rest_api_route())
        self.client = TestClient(self.app)

    def test_defaults(self):
        response = self.client.get("/settings/")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["holiday_country"], "ID")
        self.assertEqual(data["prayer_method"], 20)
        self.assertFalse(data["alarms"]["sahur"]["is_on"])

    def test_replace(self):
        payload = self.client.get("/settings/").json()
        payload["manual_location"] = {"city": "Medan", "country": "Indonesia"}
        payload["alarms"]["sahur"] = {"is_on": True, "time": "03:45"}

        response = self.client.put("/settings/", json=payload)

        self.assertEqual(response.status_code, 200)
        stored = self.repository.load()
        self.assertTrue(stored.manual_location.is_set)
        self.assertEqual(self.client.get("/settings/").json()["alarms"]["sahur"]["time"], "03:45")

    def test_rejects_invalid_times(self):
        response = self.client.put("/settings/", json={"alarms": {"sahur": {"is_on": True, "time": "3:45pm"}}})

        self.assertEqual(response.status_code, 422)
