"""Unit tests for RemindersEndpoint."""

import unittest
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from hijri_calendar.entities.reminder import Reminder, ReminderKind
from hijri_calendar.frameworks.api.endpoints.reminders import RemindersEndpoint

NOW = datetime(2025, 3, 10, 3, 33)


class TestRemindersEndpoint(unittest.TestCase):
    def setUp(self):
        self.due_reminders = MagicMock()
        self.due_reminders.check = AsyncMock(
            return_value=[
                Reminder(key="alarm:sahur", kind=ReminderKind.ALARM, message="Time for suhoor", due_at=NOW)
            ]
        )
        self.endpoint = RemindersEndpoint(self.due_reminders, clock=lambda: NOW)

        self.app = FastAPI()
        self.app.include_router(self.endpoint.create_rest_api_route())
        self.client = TestClient(self.app)

    def test_due_now(self):
        response = self.client.get("/reminders/due")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["checked_at"], "2025-03-10T03:33:00")
        self.assertEqual(data["reminders"][0]["kind"], "alarm")
        self.due_reminders.check.assert_awaited_once_with(NOW)

    def test_due_at_a_given_time(self):
        self.due_reminders.check.return_value = []

        response = self.client.get("/reminders/due", params={"at": "2025-03-10T17:00:00"})

        self.assertEqual(response.json()["reminders"], [])
        self.due_reminders.check.assert_awaited_once_with(datetime(2025, 3, 10, 17, 0))
