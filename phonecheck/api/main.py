"""FastAPI application factory.

Assembles CORS and the API routers.  The metadata store is loaded during
startup so the first request does not pay for it.
This module is the authoritative app object — phonecheck/main.py re-exports it.
"""
from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from phonecheck.api.routes.health import router as health_router
from phonecheck.api.routes.regions import router as regions_router
from phonecheck.api.routes.validate import router as validate_router
from phonecheck.core.logging import setup_logging
from phonecheck.core.settings import get_settings
from phonecheck.metadata.store import get_metadata_store


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    get_metadata_store()
    yield


settings = get_settings()

app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    lifespan=lifespan,
)

# CORS — the browser front end calls the API directly
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health_router)
app.include_router(validate_router)
app.include_router(regions_router)
