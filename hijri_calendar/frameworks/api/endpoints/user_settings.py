"""User settings API endpoint."""

from __future__ import annotations

from fastapi import APIRouter

from hijri_calendar import LOGGER
from hijri_calendar.entities.user_settings import UserSettings
from hijri_calendar.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint
from hijri_calendar.use_cases.interfaces.custom_event_repository_interface import (
    UserSettingsRepositoryInterface,
)


class UserSettingsEndpoint(ServiceAPIEndpointBluePrint):
    def __init__(self, settings_repository: UserSettingsRepositoryInterface):
        self.settings_repository = settings_repository

    def create_rest_api_route(self) -> APIRouter:
        api_route = APIRouter(prefix="/settings", tags=["Settings"])

        @api_route.get("/", summary="Current settings", response_model=UserSettings)
        async def get_settings():
            return self.settings_repository.load()

        @api_route.put(
            "/",
            summary="Replace settings",
            description="Stores the full settings document and returns it",
            response_model=UserSettings,
        )
        async def put_settings(settings: UserSettings):
            self.settings_repository.save(settings)
            LOGGER.info("User settings updated")
            return settings

        return api_route
