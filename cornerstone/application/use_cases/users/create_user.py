"""Use case for creating users."""

from sqlalchemy.orm import Session

from cornerstone.domain.entities import User
from cornerstone.infrastructure.repositories import UserRepository
from cornerstone.infrastructure.security import get_password_hash
from cornerstone.utils import now_in_app_timezone


def create_user(session: Session, *, name: str, email: str, password: str) -> User:
    """Create a new user ensuring unique email addresses."""

    repository = UserRepository(session)

    if not name.strip():
        raise ValueError("Name is required")
    if len(password) < 8:
        raise ValueError("Password must be at least 8 characters long")
    if repository.get_by_email(email):
        raise ValueError("Email address is already registered")

    user = User(
        id=None,
        name=name.strip(),
        email=email,
        password=get_password_hash(password),
        is_active=True,
        last_login=None,
        created_at=now_in_app_timezone(),
    )
    return repository.create(user)
