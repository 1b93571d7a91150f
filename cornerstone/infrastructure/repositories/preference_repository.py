"""Persistence layer for appearance preferences."""

from __future__ import annotations

from sqlalchemy.orm import Session

from cornerstone.domain.entities import AppearancePreferences
from cornerstone.infrastructure.models import UserPreferenceModel


class PreferenceRepository:
    """Read and write the single preference row of a user."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: str) -> AppearancePreferences | None:
        model = self.session.get(UserPreferenceModel, user_id)
        if model is None:
            return None
        return AppearancePreferences.from_stored(model.theme, model.density)

    def save(self, user_id: str, preferences: AppearancePreferences) -> AppearancePreferences:
        model = self.session.get(UserPreferenceModel, user_id)
        if model is None:
            model = UserPreferenceModel(user_id=user_id)
        model.theme = preferences.theme
        model.density = preferences.density
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return AppearancePreferences.from_stored(model.theme, model.density)


__all__ = ["PreferenceRepository"]
