"""Routes for the settings page appearance section."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from cornerstone.application.use_cases.preferences import (
    get_preferences,
    update_preferences,
)
from cornerstone.domain.entities import User
from cornerstone.infrastructure.database import get_db
from cornerstone.interfaces.api.dependencies import get_current_user
from cornerstone.interfaces.api.schemas import AppearanceRead, AppearanceUpdate

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/appearance", response_model=AppearanceRead)
def read_appearance(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AppearanceRead:
    """Return the caller's theme and density, or the defaults."""

    return AppearanceRead.model_validate(get_preferences(db, current_user.id))


@router.put("/appearance", response_model=AppearanceRead)
def update_appearance(
    payload: AppearanceUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AppearanceRead:
    """Store the caller's theme and/or density."""

    try:
        preferences = update_preferences(
            db, current_user.id, theme=payload.theme, density=payload.density
        )
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc)
        ) from exc
    return AppearanceRead.model_validate(preferences)


__all__ = ["router"]
