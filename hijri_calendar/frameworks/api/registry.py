"""Registry for API endpoints."""

from __future__ import annotations

from typing import List

from hijri_calendar import LOGGER
from hijri_calendar.frameworks.api.base_endpoint import ServiceAPIEndpointBluePrint


class SubServiceEndpoints:
    """Collects endpoint services so the app can mount their routers."""

    def __init__(self):
        self.endpoints: List[ServiceAPIEndpointBluePrint] = []

    def register(self, endpoint: ServiceAPIEndpointBluePrint) -> None:
        """Register an endpoint with the registry.

        Args:
            endpoint: The endpoint to register
        """
        LOGGER.info(f"Registering endpoint: {endpoint.__class__.__name__}")
        self.endpoints.append(endpoint)
