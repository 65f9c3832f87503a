"""Logistics Registry API - FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map RegistryError -> structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database initialized and registry hydrated on startup via lifespan context manager

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - The Registry is built once here and handed to the service; no other module
      constructs one
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.error_handlers import register_error_handlers
from app.api.routes import (
    health, drivers, customers, orders, shipments, registry_stats,
)
from app.config import get_settings
from app.core.registry import Registry
from app.infrastructure.database import init_db
from app.infrastructure.notifications import LoggingNotificationSink
from app.infrastructure.observability import setup_logging
from app.services.registry_service import init_registry_service
from app.services.registry_store import SqlRegistryStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if not settings.operator_key:
        logger.warning("OPERATOR_KEY is not set - all mutating routes will be rejected")
    db = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    service = init_registry_service(
        Registry(sink=LoggingNotificationSink()), SqlRegistryStore(db),
    )
    await service.hydrate()
    logger.info("Logistics Registry API started")
    yield
    logger.info("Logistics Registry API shutting down")
    await db.dispose()


app = FastAPI(
    title="Logistics Registry API", version="1.0.0", lifespan=lifespan,
)

# CORS - configured from settings, not hardcoded
settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routes - explicit registration
app.include_router(health.router)
app.include_router(drivers.router)
app.include_router(customers.router)
app.include_router(orders.router)
app.include_router(shipments.router)
app.include_router(registry_stats.router)

register_error_handlers(app)
