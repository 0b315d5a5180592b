"""Unit tests for CalendarEndpoint."""

import unittest
from unittest.mock import AsyncMock, MagicMock

from fastapi import FastAPI
from fastapi.testclient import TestClient

from hijri_calendar.adapters.repositories.key_value.custom_event_repository import (
    CustomEventRepository,
    CustomHijriEventRepository,
)
from hijri_calendar.adapters.repositories.key_value.user_settings_repository import UserSettingsRepository
from hijri_calendar.adapters.repositories.memory.in_memory_key_value_store import InMemoryKeyValueStore
from hijri_calendar.entities.custom_event import CustomEventDraft
from hijri_calendar.frameworks.api.endpoints.calendar import CalendarEndpoint
from hijri_calendar.use_cases.calendar_assembly import CalendarAssembly
from hijri_calendar.use_cases.calendar_search import CalendarSearch
from hijri_calendar.use_cases.national_holidays import NationalHolidayService
from hijri_calendar.utils.exceptions import OracleUnavailable
from tests.unit_tests.factories import make_month


def fetch_month(year, month):
    if month == 6:
        raise OracleUnavailable("Calendar service unavailable")
    return make_month(year, month)


class TestCalendarEndpoint(unittest.TestCase):
    """Test suite for CalendarEndpoint."""

    def setUp(self):
        self.oracle = MagicMock()
        self.oracle.fetch_month = AsyncMock(side_effect=fetch_month)
        self.oracle.fetch_hijri_holidays = AsyncMock(return_value={})
        self.provider = MagicMock()
        self.provider.fetch_holidays = AsyncMock(return_value={"2025-03-31": "Hari Raya Idul Fitri"})

        store = InMemoryKeyValueStore()
        self.event_repository = CustomEventRepository(store)
        self.assembly = CalendarAssembly(
            oracle=self.oracle,
            holiday_service=NationalHolidayService(self.provider),
            event_repository=self.event_repository,
            hijri_event_repository=CustomHijriEventRepository(store),
        )
        self.endpoint = CalendarEndpoint(
            self.assembly, CalendarSearch(self.assembly), UserSettingsRepository(store)
        )

        self.app = FastAPI()
        self.app.include_router(self.endpoint.create_rest_api_route())
        self.client = TestClient(self.app)

    def test_create_rest_api_route(self):
        router = self.endpoint.create_rest_api_route()

        self.assertEqual(router.prefix, "/calendar")
        self.assertEqual(router.tags, ["Calendar"])

    def test_month_view(self):
        # Arrange
        self.event_repository.add_event(CustomEventDraft(gregorian_date="2025-03-10", text="Pay rent"))

        # Act
        response = self.client.get("/calendar/month/2025/3")

        # Assert
        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(len(data["days"]), 31)
        self.assertEqual(data["calendar"]["hijri_month_name"], "Ramadan")
        self.assertEqual(data["days"][9]["notes"]["gregorian"][0]["text"], "Pay rent")
        last = data["days"][30]
        self.assertEqual(last["national_holiday"], "Hari Raya Idul Fitri")
        self.assertEqual(last["observance"]["category"], "major_islamic_holiday")
        self.provider.fetch_holidays.assert_awaited_once_with("ID", 2025)
        self.assertEqual(self.assembly.current_month.month, 3)

    def test_month_view_country_override(self):
        self.client.get("/calendar/month/2025/3?country=my")

        self.provider.fetch_holidays.assert_awaited_once_with("MY", 2025)

    def test_month_out_of_range(self):
        response = self.client.get("/calendar/month/2025/13")

        self.assertEqual(response.status_code, 422)

    def test_month_unavailable(self):
        response = self.client.get("/calendar/month/2025/6")

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()["detail"], {"error": "Calendar service unavailable"})

    def test_year_view_keeps_loaded_months(self):
        response = self.client.get("/calendar/year/2025")

        self.assertEqual(response.status_code, 200)
        months = response.json()["months"]
        self.assertEqual(len(months), 12)
        self.assertIsNone(months[5])
        self.assertEqual(sum(month is not None for month in months), 11)

    def test_day_detail(self):
        response = self.client.get("/calendar/day/2025/3/31")

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["day"]["hijri"]["month"], 10)
        self.assertEqual(data["national_holiday"], "Hari Raya Idul Fitri")

    def test_day_that_does_not_exist(self):
        response = self.client.get("/calendar/day/2025/2/30")

        self.assertEqual(response.status_code, 422)

    def test_day_missing_from_the_calendar(self):
        self.oracle.fetch_month.side_effect = lambda year, month: make_month(2025, 3)

        response = self.client.get("/calendar/day/2025/4/1")

        self.assertEqual(response.status_code, 404)

    def test_search(self):
        response = self.client.get("/calendar/search", params={"q": "idul", "year": 2025, "month": 3})

        self.assertEqual(response.status_code, 200)
        data = response.json()
        self.assertEqual(data["query"], "idul")
        self.assertEqual(len(data["results"]), 1)
        self.assertEqual(data["results"][0]["reason"], "Hari Raya Idul Fitri")
        self.assertEqual(data["results"][0]["day"]["gregorian"]["day"], 31)
