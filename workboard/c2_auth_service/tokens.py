"""JWT access tokens."""

import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional

from jose import JWTError, jwt

from workboard.core.config import get_settings

logger = logging.getLogger(__name__)


def create_access_token(
    user_id: str,
    email: str,
    role: str,
    expires_delta: Optional[timedelta] = None,
) -> str:
    """Sign an access token for a user."""
    auth_config = get_settings().auth
    if expires_delta is None:
        expires_delta = timedelta(seconds=auth_config.expires_in_seconds)

    now = datetime.now(timezone.utc)
    payload = {
        "sub": user_id,
        "email": email,
        "role": role,
        "type": "access",
        "iat": int(now.timestamp()),
        "exp": int((now + expires_delta).timestamp()),
    }
    return jwt.encode(
        payload,
        auth_config.jwt_secret.get_secret_value(),
        algorithm=auth_config.jwt_algorithm,
    )


def verify_access_token(token: str) -> Optional[Dict[str, Any]]:
    """Decode and verify an access token; None if invalid, expired or of another type."""
    auth_config = get_settings().auth
    try:
        payload = jwt.decode(
            token,
            auth_config.jwt_secret.get_secret_value(),
            algorithms=[auth_config.jwt_algorithm],
        )
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        return None

    if payload.get("type") != "access" or not payload.get("sub"):
        return None
    return payload


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Pull the token out of an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()
