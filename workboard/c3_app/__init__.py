"""C3 App - FastAPI application factory."""
from workboard.c3_app.server import AppState, configure_logging, create_app
__all__ = ["AppState", "configure_logging", "create_app"]
