"""Database base and declarative_base for Workboard."""

import uuid
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import declarative_base

Base = declarative_base()


def generate_id() -> str:
    """Generate an opaque primary key."""
    return str(uuid.uuid4())


def utcnow() -> datetime:
    """Naive UTC timestamp, as stored in every table."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value: Optional[datetime]) -> Optional[str]:
    """Serialize a stored timestamp as ISO-8601 UTC."""
    if value is None:
        return None
    return value.isoformat() + "Z"
