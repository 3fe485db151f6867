"""Service layer for registration, login and token verification."""

import logging
from typing import Any, Dict, Optional

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from workboard.c1_user_models import User
from workboard.c1_work_item_enums import UserRole
from workboard.c2_auth_service.passwords import (
    hash_password,
    validate_password_strength,
    verify_password,
)
from workboard.c2_auth_service.tokens import create_access_token, verify_access_token
from workboard.c2_repositories import UserRepository
from workboard.core.config import get_settings
from workboard.core.errors import (
    ConflictError,
    PersistenceError,
    TokenError,
    UnauthorizedError,
    ValidationError,
)

logger = logging.getLogger(__name__)


class AuthService:
    """User registration and bearer-token authentication."""

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def register(
        self,
        email: Optional[str],
        password: Optional[str],
        name: Optional[str],
        role: Optional[str],
    ) -> User:
        """
        Register a new user.

        Raises:
            ValidationError: If a field is missing, the role is unknown, or the
                password is too weak (rule list in ``details.errors``)
            ConflictError: If the email is already registered
        """
        if not email or not password or not name or not role:
            raise ValidationError("Email, password, name, and role are required")
        if role not in UserRole.values():
            raise ValidationError("Invalid role", details={"allowed": UserRole.values()})

        email = email.strip().lower()
        if await self.user_repository.find_by_email(email):
            raise ConflictError("User with this email already exists")

        errors = validate_password_strength(password)
        if errors:
            raise ValidationError("Password does not meet requirements", details={"errors": errors})

        try:
            user = await self.user_repository.create(
                {
                    "email": email,
                    "name": name.strip(),
                    "password_hash": hash_password(password),
                    "role": role,
                }
            )
        except IntegrityError as e:
            raise ConflictError("User with this email already exists") from e
        except SQLAlchemyError as e:
            logger.error(f"[AUTH_SERVICE] Failed to register user: {e}", exc_info=True)
            raise PersistenceError("Failed to register user") from e

        logger.info(f"[AUTH_SERVICE] Registered user {user.id} ({role})")
        return user

    async def login(self, email: Optional[str], password: Optional[str]) -> Dict[str, Any]:
        """
        Authenticate with email and password.

        Returns:
            Dictionary with ``user``, ``token`` and ``expiresIn``

        Raises:
            ValidationError: If either credential is missing
            UnauthorizedError: If the credentials do not match
        """
        if not email or not password:
            raise ValidationError("Email and password are required")

        user = await self.user_repository.find_by_email(email.strip().lower())
        if user is None or not verify_password(password, user.password_hash):
            logger.warning(f"[AUTH_SERVICE] Failed login for {email}")
            raise UnauthorizedError("Invalid credentials")

        token = create_access_token(user.id, user.email, user.role)
        return {
            "user": user,
            "token": token,
            "expiresIn": get_settings().auth.jwt_expires_in,
        }

    async def verify_token(self, token: Optional[str]) -> User:
        """Resolve a bearer token to its user.

        Raises:
            TokenError: If the token is missing, invalid, expired, or names an unknown user
        """
        if not token:
            raise TokenError("Token is required")

        payload = verify_access_token(token)
        if payload is None:
            raise TokenError()

        user = await self.user_repository.find_by_id(payload["sub"])
        if user is None:
            raise TokenError()
        return user
