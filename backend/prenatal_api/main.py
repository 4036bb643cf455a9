"""Prenatal Companion API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PrenatalAPIError → {"error": message} JSON responses
    - Fixed CORS header set stamped on every response by middleware
    - Anthropic client created on startup only when an API key is configured

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from prenatal_api.api.cors_headers import permissive_cors_headers
from prenatal_api.api.error_handlers import register_error_handlers
from prenatal_api.api.routes import baby_development, exercise_recommendations, health
from prenatal_api.api.routes.health import SERVICE_VERSION
from prenatal_api.config import get_settings
from prenatal_api.infrastructure.anthropic_client import (
    close_messages_client,
    init_messages_client,
)
from prenatal_api.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    init_messages_client(settings)
    logger.info("Prenatal Companion API started")
    yield
    await close_messages_client()
    logger.info("Prenatal Companion API shutting down")


app = FastAPI(
    title="Prenatal Companion API", version=SERVICE_VERSION, lifespan=lifespan,
)

app.middleware("http")(permissive_cors_headers)

app.include_router(health.router)
app.include_router(baby_development.router)
app.include_router(exercise_recommendations.router)

register_error_handlers(app)
