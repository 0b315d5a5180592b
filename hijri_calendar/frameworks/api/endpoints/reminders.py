"""Reminders API endpoint."""

from __future__ import annotations

from datetime import datetime
from typing import Callable, Optional

from fastapi import APIRouter, Query

from hijri_calendar.entities.api_schemas import DueRemindersResponse
from hijri_calendar.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from hijri_calendar.use_cases.reminders import DueRemindersUseCase


class RemindersEndpoint(ServiceAPIEndpointBluePrint):
    """Polled by a ticker once a minute; each reminder is returned once."""

    def __init__(self, due_reminders: DueRemindersUseCase, clock: Callable[[], datetime] = datetime.now):
        self.due_reminders = due_reminders
        self.clock = clock

    def create_rest_api_route(self) -> APIRouter:
        api_route = APIRouter(prefix="/reminders", tags=["Reminders"])

        @api_route.get(
            "/due",
            summary="Reminders due now",
            description="Alarms, prayer alarms, note reminders and sunnah fasting notifications",
            response_model=DueRemindersResponse,
        )
        async def get_due(at: Optional[datetime] = Query(None, description="Evaluate at this time instead of now")):
            now = at or self.clock()
            reminders = await self.due_reminders.check(now)
            return DueRemindersResponse(checked_at=now, reminders=reminders)

        return api_route
