"""Routes exposing the authenticated user's profile."""

from fastapi import APIRouter, Depends

from cornerstone.domain.entities import User
from cornerstone.interfaces.api.dependencies import get_current_user
from cornerstone.interfaces.api.schemas import UserRead

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserRead)
def read_current_user(current_user: User = Depends(get_current_user)):
    """Return the authenticated user."""

    return UserRead.model_validate(current_user)
