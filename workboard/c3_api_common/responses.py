"""Response envelopes shared by every router."""

import logging
from typing import Any, Dict, Optional

from fastapi.responses import JSONResponse

from workboard.core.errors import AppError, ErrorKind

logger = logging.getLogger(__name__)

STATUS_BY_KIND: Dict[ErrorKind, int] = {
    ErrorKind.VALIDATION: 400,
    ErrorKind.UNAUTHORIZED: 401,
    ErrorKind.FORBIDDEN: 403,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.CONFLICT: 409,
    ErrorKind.BUSINESS_RULE: 400,
    ErrorKind.RATE_LIMITED: 429,
    ErrorKind.INTERNAL: 500,
}


def success_response(
    data: Any,
    message: str,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    """Wrap a payload in the ``{success, data, message}`` envelope."""
    return JSONResponse(
        status_code=status_code,
        content={"success": True, "data": data, "message": message},
        headers=headers,
    )


def error_response(error: AppError, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    """Render an application error with the status its kind maps to."""
    status_code = STATUS_BY_KIND[error.kind]
    if status_code >= 500:
        logger.error(f"[API] {error.code}: {error.message}")
    else:
        logger.info(f"[API] {status_code} {error.code}: {error.message}")
    return JSONResponse(
        status_code=status_code,
        content={"success": False, "error": error.to_dict()},
        headers=headers,
    )


def version_headers(work_item) -> Dict[str, str]:
    """ETag carrying the item's version, for clients that send If-Match back."""
    return {"ETag": f'"{work_item.version}"'}
