"""FastAPI dependency utilities."""

import logging
from typing import Any

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from cornerstone.application.use_cases.audit import log_audit
from cornerstone.domain.entities import AuditAction, User
from cornerstone.infrastructure.database import get_db
from cornerstone.infrastructure.repositories import UserRepository
from cornerstone.infrastructure.security import decode_access_token

logger = logging.getLogger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="auth/token", auto_error=False)


def resolve_user(token: str | None, db: Session) -> User | None:
    """Return the active user identified by ``token`` or ``None``.

    Missing, malformed and expired tokens all resolve to ``None``.
    """

    if not token:
        return None

    try:
        payload = decode_access_token(token)
    except ValueError:
        logger.debug("Rejected an invalid access token")
        return None

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        return None

    user = UserRepository(db).get(user_id)
    if user is None or not user.is_active:
        return None
    return user


def get_current_principal(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> str | None:
    """Return the identifier of the authenticated user, or ``None``."""

    user = resolve_user(token, db)
    return user.id if user is not None else None


def get_current_user(
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> User:
    """Return the authenticated user or reject the request with 401."""

    user = resolve_user(token, db)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


class AuditWriter:
    """Activity log writer bound to the current request.

    Entries are attributed to the caller's principal, or to nobody when the
    request is anonymous.
    """

    def __init__(self, db: Session, principal: str | None) -> None:
        self.db = db
        self.principal = principal

    def __call__(
        self,
        action: AuditAction | str,
        entity_type: str,
        entity_id: str,
        meta: dict[str, Any] | None = None,
    ) -> None:
        log_audit(self.db, self.principal, action, entity_type, entity_id, meta)


def get_audit_writer(
    db: Session = Depends(get_db),
    principal: str | None = Depends(get_current_principal),
) -> AuditWriter:
    """Return an activity log writer for the current request."""

    return AuditWriter(db, principal)
