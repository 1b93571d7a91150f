"""Shared fixtures: environment, a throwaway SQLite database and user factories."""

from __future__ import annotations

import os
import sys
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "cornerstone_test.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"

from cornerstone.config import get_settings  # noqa: E402

get_settings.cache_clear()

from cornerstone.infrastructure.database import (  # noqa: E402
    Base,
    SessionLocal,
    engine,
    initialize_database,
)
from cornerstone.infrastructure.models import NotificationModel, UserModel  # noqa: E402
from cornerstone.utils import now_in_app_naive_datetime  # noqa: E402


@pytest.fixture(autouse=True)
def reset_database():
    """Ensure the test database starts from a clean state for each test."""

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture
def session():
    """Yield a session bound to the test database."""

    with SessionLocal() as db:
        yield db


@pytest.fixture
def make_user():
    """Insert a user row without paying for password hashing."""

    def _make_user(email: str, *, name: str = "Test User", is_active: bool = True) -> str:
        with SessionLocal() as db:
            user = UserModel(
                name=name,
                email=email,
                password="not-a-real-hash",
                is_active=is_active,
            )
            db.add(user)
            db.commit()
            db.refresh(user)
            return user.id

    return _make_user


@pytest.fixture
def insert_notifications():
    """Insert ``count`` notifications for ``owner_id``, one minute apart.

    The first inserted row is the oldest one.
    """

    def _insert(owner_id: str, count: int, *, read: bool = False) -> list[str]:
        base = now_in_app_naive_datetime() - timedelta(minutes=count)
        ids: list[str] = []
        with SessionLocal() as db:
            for index in range(count):
                created_at: datetime = base + timedelta(minutes=index)
                model = NotificationModel(
                    owner_id=owner_id,
                    title=f"Notification {index}",
                    created_at=created_at,
                    read_at=created_at if read else None,
                )
                db.add(model)
                db.flush()
                ids.append(model.id)
            db.commit()
        return ids

    return _insert
