"""C3 Auth Routes - registration, login and current user."""
from workboard.c3_auth_routes.auth_routes import create_auth_router
__all__ = ["create_auth_router"]
