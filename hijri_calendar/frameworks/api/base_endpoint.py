"""Base blueprint for API endpoints."""

from __future__ import annotations

from abc import ABC, abstractmethod

from fastapi import APIRouter

from hijri_calendar import LOGGER
from hijri_calendar.utils.exceptions import CustomHTTPException, HijriCalendarException


class ServiceAPIEndpointBluePrint(ABC):
    """Blueprint for API endpoints.

    Endpoints receive their use cases through the constructor and keep the
    HTTP concerns (paths, status codes, error mapping) on this side of the
    boundary.
    """

    @abstractmethod
    def create_rest_api_route(self) -> APIRouter:
        """Create and return a configured APIRouter with route handlers.

        Returns:
            APIRouter with all endpoint routes properly configured
        """
        pass

    @staticmethod
    def http_error(error: HijriCalendarException, action: str) -> CustomHTTPException:
        """Log a domain failure and turn it into an HTTP error.

        Args:
            error: The domain exception
            action: What the endpoint was doing, for the log line

        Returns:
            Exception to raise from the route handler
        """
        LOGGER.error(f"Error {action}: {error}", exc_info=True)
        return CustomHTTPException.from_exception(error)
