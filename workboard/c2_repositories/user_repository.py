"""Data access for user accounts."""

from typing import Any, Dict, Optional

from workboard.c1_database_session import DatabaseManager, generate_id, utcnow
from workboard.c1_user_models import User


class UserRepository:
    """SQLAlchemy-backed store for users."""

    def __init__(self, db_manager: DatabaseManager):
        self.db_manager = db_manager

    async def create(self, data: Dict[str, Any]) -> User:
        now = utcnow()
        user = User(
            id=generate_id(),
            email=data["email"],
            name=data["name"],
            password_hash=data["password_hash"],
            role=data["role"],
            created_at=now,
            updated_at=now,
        )
        with self.db_manager.session_scope() as db:
            db.add(user)
        return user

    async def find_by_id(self, user_id: str) -> Optional[User]:
        with self.db_manager.session_scope() as db:
            return db.query(User).filter_by(id=user_id).first()

    async def find_by_email(self, email: str) -> Optional[User]:
        with self.db_manager.session_scope() as db:
            return db.query(User).filter(User.email == email.lower()).first()
