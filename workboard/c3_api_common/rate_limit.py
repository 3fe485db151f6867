"""Per-client request limiting backed by slowapi."""

import logging

from fastapi import Request
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import Response

from workboard.c3_api_common.responses import error_response
from workboard.core.config import RateLimitConfig
from workboard.core.errors import RateLimitError

logger = logging.getLogger(__name__)

FORWARDED_HEADERS = ("x-forwarded-for", "x-real-ip", "cf-connecting-ip")


def client_key(request: Request) -> str:
    """
    Identify the calling client.

    Proxy headers win over the socket address. For ``X-Forwarded-For`` the
    first (originating) address is used.
    """
    for header in FORWARDED_HEADERS:
        value = request.headers.get(header)
        if value and value.strip():
            return value.split(",")[0].strip()
    return get_remote_address(request)


def create_limiter(config: RateLimitConfig, enabled: bool) -> Limiter:
    """
    Build an in-memory limiter applying ``config`` to every route.

    Args:
        config: Window and request budget
        enabled: False turns every check into a pass-through

    Returns:
        Limiter: To be stored on ``app.state.limiter`` for SlowAPIMiddleware
    """
    return Limiter(
        key_func=client_key,
        default_limits=[config.limit_string],
        headers_enabled=True,
        enabled=enabled,
        storage_uri="memory://",
    )


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    """Answer 429 in the error envelope with Retry-After and X-RateLimit-* headers.

    Kept synchronous: SlowAPIMiddleware calls the registered handler directly.
    """
    logger.warning(
        f"[RATE_LIMIT] {client_key(request)} exceeded {exc.detail} on "
        f"{request.method} {request.url.path}"
    )
    limiter: Limiter = request.app.state.limiter
    response = error_response(RateLimitError())
    current_limit = getattr(request.state, "view_rate_limit", None)
    response = limiter._inject_headers(response, current_limit)
    if "retry-after" not in response.headers and current_limit is not None:
        response.headers["Retry-After"] = str(current_limit[0].get_expiry())
    return response
