"""FastAPI application.

The replacement table is loaded during startup so a missing or malformed
table stops the service before it accepts requests.
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from placenorm.api.routes.health import router as health_router
from placenorm.api.routes.places import router as places_router
from placenorm.core.logging import setup_logging
from placenorm.core.settings import get_settings
from placenorm.normalization.place_normalizer import get_normalizer

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    setup_logging()
    normalizer = get_normalizer()
    logger.info("Normalizer ready with %d character replacements", len(normalizer.replacements))
    yield


settings = get_settings()
app = FastAPI(title=settings.app_name, version=settings.app_version, lifespan=lifespan)
app.include_router(health_router)
app.include_router(places_router)
