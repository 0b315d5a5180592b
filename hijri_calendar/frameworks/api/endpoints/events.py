"""Custom event API endpoint."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Response, status

from hijri_calendar import LOGGER
from hijri_calendar.entities.custom_event import (
    CustomEvent,
    CustomEventDraft,
    CustomHijriEvent,
    CustomHijriEventDraft,
)
from hijri_calendar.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from hijri_calendar.use_cases.interfaces.custom_event_repository_interface import (
    CustomEventRepositoryInterface,
    CustomHijriEventRepositoryInterface,
)
from hijri_calendar.utils.exceptions import EventNotFound


class EventsEndpoint(ServiceAPIEndpointBluePrint):
    """CRUD for Gregorian and Hijri notes."""

    def __init__(
        self,
        event_repository: CustomEventRepositoryInterface,
        hijri_event_repository: CustomHijriEventRepositoryInterface,
    ):
        self.event_repository = event_repository
        self.hijri_event_repository = hijri_event_repository

    def create_rest_api_route(self) -> APIRouter:
        api_route = APIRouter(prefix="/events", tags=["Events"])

        @api_route.get("/gregorian", summary="List Gregorian notes", response_model=List[CustomEvent])
        async def list_gregorian():
            return self.event_repository.list_events()

        @api_route.post(
            "/gregorian",
            summary="Add a Gregorian note",
            response_model=CustomEvent,
            status_code=status.HTTP_201_CREATED,
        )
        async def add_gregorian(draft: CustomEventDraft):
            event = self.event_repository.add_event(draft)
            LOGGER.info(f"Added note {event.id} on {event.gregorian_date}")
            return event

        @api_route.put("/gregorian/{event_id}", summary="Replace a Gregorian note", response_model=CustomEvent)
        async def update_gregorian(event_id: str, draft: CustomEventDraft):
            try:
                return self.event_repository.update_event(event_id, draft)
            except EventNotFound as e:
                raise self.http_error(e, f"updating note {event_id}")

        @api_route.delete(
            "/gregorian/{event_id}",
            summary="Delete a Gregorian note",
            status_code=status.HTTP_204_NO_CONTENT,
        )
        async def delete_gregorian(event_id: str):
            try:
                self.event_repository.delete_event(event_id)
            except EventNotFound as e:
                raise self.http_error(e, f"deleting note {event_id}")
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        @api_route.get("/hijri", summary="List Hijri notes", response_model=List[CustomHijriEvent])
        async def list_hijri():
            return self.hijri_event_repository.list_events()

        @api_route.post(
            "/hijri",
            summary="Add a Hijri note",
            response_model=CustomHijriEvent,
            status_code=status.HTTP_201_CREATED,
        )
        async def add_hijri(draft: CustomHijriEventDraft):
            event = self.hijri_event_repository.add_event(draft)
            LOGGER.info(
                f"Added Hijri note {event.id} on {event.hijri_day}-{event.hijri_month}-{event.hijri_year}"
            )
            return event

        @api_route.put("/hijri/{event_id}", summary="Replace a Hijri note", response_model=CustomHijriEvent)
        async def update_hijri(event_id: str, draft: CustomHijriEventDraft):
            try:
                return self.hijri_event_repository.update_event(event_id, draft)
            except EventNotFound as e:
                raise self.http_error(e, f"updating Hijri note {event_id}")

        @api_route.delete(
            "/hijri/{event_id}",
            summary="Delete a Hijri note",
            status_code=status.HTTP_204_NO_CONTENT,
        )
        async def delete_hijri(event_id: str):
            try:
                self.hijri_event_repository.delete_event(event_id)
            except EventNotFound as e:
                raise self.http_error(e, f"deleting Hijri note {event_id}")
            return Response(status_code=status.HTTP_204_NO_CONTENT)

        return api_route
