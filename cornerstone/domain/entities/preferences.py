"""Domain entity describing per-user appearance preferences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

THEMES: Final[tuple[str, ...]] = ("dark", "light", "system")
DENSITIES: Final[tuple[str, ...]] = ("compact", "comfortable", "spacious")

DEFAULT_THEME: Final[str] = "dark"
DEFAULT_DENSITY: Final[str] = "compact"


@dataclass(frozen=True)
class AppearancePreferences:
    """Theme and table density chosen by a user."""

    theme: str = DEFAULT_THEME
    density: str = DEFAULT_DENSITY

    @classmethod
    def from_stored(
        cls, theme: str | None, density: str | None
    ) -> "AppearancePreferences":
        """Build preferences from stored values, ignoring unknown ones."""

        return cls(
            theme=theme if theme in THEMES else DEFAULT_THEME,
            density=density if density in DENSITIES else DEFAULT_DENSITY,
        )


__all__ = [
    "AppearancePreferences",
    "DEFAULT_DENSITY",
    "DEFAULT_THEME",
    "DENSITIES",
    "THEMES",
]
