"""Health check routes for Workboard."""

from datetime import datetime, timezone

from fastapi import APIRouter

from workboard import __version__


def create_health_router(settings):
    router = APIRouter(tags=["health"])

    @router.get("/")
    async def service_info():
        """Service name, version and environment."""
        return {
            "name": "Workboard API",
            "version": __version__,
            "environment": settings.environment,
        }

    @router.get("/health")
    async def health_check():
        """Health check endpoint.

        Returns:
            dict: Health status, timestamp, and version
        """
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "version": __version__,
        }

    return router
