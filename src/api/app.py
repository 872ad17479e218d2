"""
FastAPI Application Factory.

Usage:
    # Development
    uvicorn api.app:create_app --factory --reload

    # Production
    uvicorn api.app:app --host 0.0.0.0 --port 8080 --workers 4

    # Tests: inject a service backed by a stub client
    app = create_app(search_service=SearchService(client=stub))
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from config.settings import get_settings
from core.logging import configure_logging, get_logger
from core.middleware import RequestTracingMiddleware
from product_search.client import StorefrontSearchClient
from product_search.service import SearchService


logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan handler.

    Startup: configure logging, build the one SearchService for this process
    (unless one was injected). Shutdown: close the search client it owns.
    """
    settings = get_settings()

    configure_logging(
        json_logs=settings.is_production,
        log_level="DEBUG" if settings.debug else settings.log_level,
    )

    owned_client: Optional[StorefrontSearchClient] = None
    if getattr(app.state, "search_service", None) is None:
        owned_client = StorefrontSearchClient(settings=settings)
        app.state.search_service = SearchService(client=owned_client)

    logger.info(
        "Starting product search API",
        environment=settings.environment,
        port=settings.port,
        search_url=settings.search_url,
    )

    yield

    logger.info("Shutting down product search API")
    if owned_client is not None:
        await owned_client.aclose()
        app.state.search_service = None


def create_app(search_service: Optional[SearchService] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        search_service: Pre-built service to use instead of creating one
            at startup (the caller keeps ownership of its client).

    Returns:
        Configured FastAPI application
    """
    settings = get_settings()

    app = FastAPI(
        title="Product Search API",
        description="""
        Storefront product search with faceted filtering.

        ## Main Endpoints

        - `/api/search/products` - Search with listing-page URL parameters
        - `/api/search/categories/{slug}/products` - Search within a category
        - `/api/search/quick` - Free-text quick search

        ## Health Checks

        - `/health` - Basic health check
        - `/health/detailed` - Health with configuration status
        - `/ready` - Kubernetes readiness probe
        - `/live` - Kubernetes liveness probe
        """,
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs" if settings.is_development else None,
        redoc_url="/redoc" if settings.is_development else None,
    )
    app.state.search_service = search_service

    # =========================================================================
    # Middleware (order matters - first added = outermost)
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestTracingMiddleware)

    # =========================================================================
    # Routes
    # =========================================================================

    from api.routes.health import router as health_router
    app.include_router(health_router)

    from api.routes.search import router as search_router
    app.include_router(search_router)

    return app


# Default app instance for uvicorn
# Usage: uvicorn api.app:app
app = create_app()
