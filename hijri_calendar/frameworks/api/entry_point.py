"""FastAPI application entry point."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hijri_calendar import LOGGER
from hijri_calendar.app_container import create_fastapi_integration, get_container, shutdown, startup
from hijri_calendar.frameworks.api.configs import fastapi_information, fastapi_tags_metadata
from hijri_calendar.frameworks.api.registry import SubServiceEndpoints


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    LOGGER.info("Starting API server...")
    await startup()
    yield
    LOGGER.info("Shutting down API server...")
    await shutdown()


app = FastAPI(
    title=fastapi_information["title"],
    description=fastapi_information["description"],
    version=fastapi_information["version"],
    openapi_tags=fastapi_tags_metadata,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

deps = create_fastapi_integration()

for endpoint in get_container()[SubServiceEndpoints].endpoints:
    app.include_router(endpoint.create_rest_api_route())


@app.get("/", tags=["Main"], summary="Service index")
async def index(registry: SubServiceEndpoints = deps.depends(SubServiceEndpoints)):
    return {
        "service": fastapi_information["title"],
        "version": fastapi_information["version"],
        "endpoints": [endpoint.__class__.__name__ for endpoint in registry.endpoints],
    }
