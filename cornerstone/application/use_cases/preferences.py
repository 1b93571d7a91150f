"""Use cases for reading and updating appearance preferences."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy.orm import Session

from cornerstone.domain.entities import DENSITIES, THEMES, AppearancePreferences
from cornerstone.infrastructure.repositories import PreferenceRepository


def get_preferences(session: Session, user_id: str) -> AppearancePreferences:
    """Return the stored preferences of ``user_id`` or the defaults."""

    stored = PreferenceRepository(session).get(user_id)
    return stored if stored is not None else AppearancePreferences()


def update_preferences(
    session: Session,
    user_id: str,
    *,
    theme: str | None = None,
    density: str | None = None,
) -> AppearancePreferences:
    """Persist the given changes; untouched fields keep their current value."""

    if theme is not None and theme not in THEMES:
        raise ValueError(f"Unknown theme '{theme}'")
    if density is not None and density not in DENSITIES:
        raise ValueError(f"Unknown density '{density}'")

    repository = PreferenceRepository(session)
    stored = repository.get(user_id)
    current = stored if stored is not None else AppearancePreferences()
    updated = replace(
        current,
        theme=theme if theme is not None else current.theme,
        density=density if density is not None else current.density,
    )
    if stored is not None and updated == stored:
        return stored
    return repository.save(user_id, updated)


__all__ = ["get_preferences", "update_preferences"]
