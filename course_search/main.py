"""
FastAPI application entry point.
Challenge: Mount routes, middleware (Prometheus), startup events (catalog load + ES index).
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import make_asgi_app

from course_search.api.v1.router import api_router
from course_search.config import get_settings
from course_search.core.logging_config import configure_logging
from course_search.search.elasticsearch_client import CourseStore, close_elasticsearch, get_elasticsearch
from course_search.services.catalog_loader import bootstrap_catalog

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup: load catalog and index it (catalog errors abort startup). Shutdown: close ES client."""
    settings = get_settings()
    configure_logging(settings.log_level)
    if settings.load_catalog_on_startup:
        store = CourseStore(await get_elasticsearch())
        indexed = await bootstrap_catalog(store, settings.courses_index, settings.catalog_path)
        if not indexed:
            logger.warning("Catalog not indexed; search returns empty results until the index is loaded")
    yield
    await close_elasticsearch()


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        description="Course search: filtered full-text search and title autocomplete over Elasticsearch.",
        version="1.0.0",
        lifespan=lifespan,
    )

    # CORS for frontend/API consumers
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Prometheus metrics at /metrics
    metrics_app = make_asgi_app()
    app.mount("/metrics", metrics_app)

    app.include_router(api_router, prefix="/api")

    return app


app = create_app()
