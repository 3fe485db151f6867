"""C2 Auth Service - registration, login and bearer tokens."""
from workboard.c2_auth_service.auth_service import AuthService
from workboard.c2_auth_service.passwords import (
    hash_password,
    validate_password_strength,
    verify_password,
)
from workboard.c2_auth_service.tokens import (
    create_access_token,
    extract_bearer_token,
    verify_access_token,
)
__all__ = [
    "AuthService",
    "hash_password",
    "validate_password_strength",
    "verify_password",
    "create_access_token",
    "extract_bearer_token",
    "verify_access_token",
]
