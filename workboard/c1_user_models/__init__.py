"""User account models for Workboard."""

from workboard.c1_user_models.user import User

__all__ = ["User"]
