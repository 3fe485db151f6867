"""C3 shared HTTP helpers: response envelopes and request dependencies."""
from workboard.c3_api_common.responses import (
    STATUS_BY_KIND,
    error_response,
    success_response,
    version_headers,
)
from workboard.c3_api_common.dependencies import (
    create_current_user_dependency,
    expected_version_header,
    parse_if_match,
)
from workboard.c3_api_common.rate_limit import (
    client_key,
    create_limiter,
    rate_limit_exceeded_handler,
)

__all__ = [
    "STATUS_BY_KIND",
    "error_response",
    "success_response",
    "version_headers",
    "create_current_user_dependency",
    "expected_version_header",
    "parse_if_match",
    "client_key",
    "create_limiter",
    "rate_limit_exceeded_handler",
]
