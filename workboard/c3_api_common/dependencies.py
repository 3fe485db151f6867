"""FastAPI dependencies for authentication and versioned writes."""

from typing import Optional

from fastapi import Header

from workboard.c1_user_models import User
from workboard.c2_auth_service import extract_bearer_token
from workboard.core.errors import UnauthorizedError, ValidationError


def create_current_user_dependency(app_state):
    """Build the dependency that resolves the bearer token to a user.

    Args:
        app_state: AppState instance exposing ``auth_service``

    Returns:
        Async dependency raising UnauthorizedError/TokenError (401) on failure
    """

    async def get_current_user(authorization: Optional[str] = Header(None)) -> User:
        token = extract_bearer_token(authorization)
        if token is None:
            raise UnauthorizedError("Authorization token is required")
        return await app_state.auth_service.verify_token(token)

    return get_current_user


def parse_if_match(value: Optional[str]) -> Optional[int]:
    """
    Read an expected version from an If-Match header value.

    Accepts ``3``, ``"3"`` and ``W/"3"``. Returns None when the header is absent.

    Raises:
        ValidationError: If the value is not a positive integer version
    """
    if value is None or not value.strip():
        return None
    raw = value.strip()
    if raw.startswith("W/"):
        raw = raw[2:]
    raw = raw.strip('"')
    try:
        version = int(raw)
    except ValueError:
        raise ValidationError("If-Match must carry an integer version") from None
    if version < 1:
        raise ValidationError("If-Match must carry an integer version")
    return version


async def expected_version_header(
    if_match: Optional[str] = Header(None, alias="If-Match"),
) -> Optional[int]:
    return parse_if_match(if_match)
