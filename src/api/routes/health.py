"""
Health check endpoints.

Provides endpoints for monitoring application health and status.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

from config.settings import get_settings


router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "service": "product-search-api",
    }


@router.get("/health/detailed")
async def detailed_health_check(request: Request) -> Dict[str, Any]:
    """
    Detailed health with configuration status.

    The search backend is not probed: a search against an unreachable
    backend degrades to empty results, so it is reported as configured or not.
    """
    settings = get_settings()
    service = getattr(request.app.state, "search_service", None)

    return {
        "status": "healthy" if service is not None else "degraded",
        "service": "product-search-api",
        "environment": settings.environment,
        "checks": {
            "config": "ok",
            "search": {
                "status": "configured" if service is not None else "not_configured",
                "endpoint": settings.search_url,
            },
        },
    }


@router.get("/ready")
async def readiness_check(request: Request) -> Dict[str, str]:
    """
    Kubernetes-style readiness probe.

    Ready once the search service has been created.
    """
    if getattr(request.app.state, "search_service", None) is None:
        return {"status": "not_ready", "reason": "search_service_not_initialized"}

    return {"status": "ready"}


@router.get("/live")
async def liveness_check() -> Dict[str, str]:
    """
    Kubernetes-style liveness probe.

    Returns 200 if the service is alive.
    """
    return {"status": "alive"}
