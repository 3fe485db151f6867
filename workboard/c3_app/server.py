"""FastAPI application for Workboard."""

import logging
import time
import uuid
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware

from workboard import __version__
from workboard.c1_database_session import DatabaseManager
from workboard.c2_auth_service import AuthService
from workboard.c2_project_service import ProjectService
from workboard.c2_repositories import ProjectRepository, UserRepository, WorkItemRepository
from workboard.c2_work_item_service import WorkItemService
from workboard.c3_api_common import create_limiter, error_response, rate_limit_exceeded_handler
from workboard.c3_auth_routes import create_auth_router
from workboard.c3_board_routes import create_board_router
from workboard.c3_health_routes import create_health_router
from workboard.c3_project_routes import create_project_router
from workboard.c3_work_item_routes import create_work_item_router
from workboard.core.config import Settings, get_settings
from workboard.core.errors import AppError

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(level: str = "INFO"):
    """Configure root logging for the service."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)


class AppState:
    """Repositories and services shared by every router."""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager
        self.user_repository = UserRepository(db_manager)
        self.project_repository = ProjectRepository(db_manager)
        self.work_item_repository = WorkItemRepository(db_manager)
        self.auth_service = AuthService(self.user_repository)
        self.project_service = ProjectService(self.project_repository)
        self.work_item_service = WorkItemService(self.work_item_repository, self.project_service)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    return f"{location}: {first.get('msg')}" if location else str(first.get("msg"))


def create_app(
    settings: Optional[Settings] = None,
    db_manager: Optional[DatabaseManager] = None,
) -> FastAPI:
    """
    Build the Workboard API.

    Args:
        settings: Settings to use (defaults to the global settings)
        db_manager: Database manager to use (defaults to one built from settings)

    Returns:
        FastAPI: Configured application
    """
    settings = settings or get_settings()
    if db_manager is None:
        db_manager = DatabaseManager(settings.database.path, echo=settings.database.echo)
    app_state = AppState(db_manager)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        db_manager.create_tables()
        logger.info(f"Workboard API {__version__} started ({settings.environment})")
        yield
        logger.info("Workboard API shutting down")

    app = FastAPI(
        title="Workboard API",
        description="Project management API with Kanban boards and backlog ordering",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.workboard = app_state

    if settings.server.enable_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.server.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
            expose_headers=[
                "ETag",
                "x-request-id",
                "Retry-After",
                "X-RateLimit-Limit",
                "X-RateLimit-Remaining",
                "X-RateLimit-Reset",
            ],
        )

    app.state.limiter = create_limiter(settings.rate_limit, enabled=settings.rate_limit_active)
    app.add_middleware(SlowAPIMiddleware)
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        request_id = str(uuid.uuid4())
        started = time.perf_counter()
        logger.info(f"[{request_id}] {request.method} {request.url.path}")
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            f"[{request_id}] {request.method} {request.url.path} - "
            f"{response.status_code} ({elapsed_ms:.1f}ms)"
        )
        response.headers["x-request-id"] = request_id
        return response

    @app.exception_handler(AppError)
    async def handle_app_error(request: Request, exc: AppError):
        return error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={
                "success": False,
                "error": {
                    "code": "VALIDATION_ERROR",
                    "message": _validation_message(exc),
                    "details": {"errors": [error.get("msg") for error in exc.errors()]},
                },
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected(request: Request, exc: Exception):
        logger.error(
            f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc
        )
        return JSONResponse(
            status_code=500,
            content={
                "success": False,
                "error": {"code": "INTERNAL_ERROR", "message": "Internal server error"},
            },
        )

    app.include_router(create_health_router(settings))
    app.include_router(create_auth_router(app_state))
    app.include_router(create_project_router(app_state))
    app.include_router(create_work_item_router(app_state))
    app.include_router(create_board_router(app_state))

    return app
