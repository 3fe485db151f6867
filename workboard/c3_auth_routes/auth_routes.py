"""Authentication routes for Workboard."""

import logging
from typing import Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from workboard.c1_user_models import User
from workboard.c3_api_common import create_current_user_dependency, success_response

logger = logging.getLogger(__name__)


class RegisterRequest(BaseModel):
    email: Optional[str] = Field(None, description="Login email, stored lowercased")
    password: Optional[str] = Field(None, description="Plain-text password")
    name: Optional[str] = Field(None, description="Display name")
    role: Optional[str] = Field(None, description="Role: admin, manager, developer")


class LoginRequest(BaseModel):
    email: Optional[str] = Field(None, description="Login email")
    password: Optional[str] = Field(None, description="Plain-text password")


def create_auth_router(app_state):
    """Create auth router.

    Args:
        app_state: AppState instance with auth_service

    Returns:
        APIRouter: Router with /auth endpoints
    """
    router = APIRouter(prefix="/auth", tags=["auth"])
    get_current_user = create_current_user_dependency(app_state)

    @router.post("/register", status_code=201)
    async def register(request: RegisterRequest):
        user = await app_state.auth_service.register(
            request.email, request.password, request.name, request.role
        )
        return success_response(
            {"user": user.to_dict()}, "User registered successfully", status_code=201
        )

    @router.post("/login")
    async def login(request: LoginRequest):
        result = await app_state.auth_service.login(request.email, request.password)
        return success_response(
            {
                "user": result["user"].to_dict(),
                "token": result["token"],
                "expiresIn": result["expiresIn"],
            },
            "Login successful",
        )

    @router.get("/me")
    async def me(current_user: User = Depends(get_current_user)):
        """Profile of the authenticated caller."""
        return success_response({"user": current_user.to_dict()}, "User retrieved successfully")

    return router
