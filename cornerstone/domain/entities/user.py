"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing a dashboard user."""

    id: str | None
    name: str
    email: str
    password: str
    is_active: bool
    last_login: datetime | None
    created_at: datetime | None
