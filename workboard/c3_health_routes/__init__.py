"""C3 Health Routes - service info and health check."""
from workboard.c3_health_routes.health_routes import create_health_router
__all__ = ["create_health_router"]
