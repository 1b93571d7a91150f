"""Schemas for appearance preferences."""

from typing import Literal

from pydantic import BaseModel, ConfigDict

Theme = Literal["dark", "light", "system"]
Density = Literal["compact", "comfortable", "spacious"]


class AppearanceRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    theme: Theme
    density: Density


class AppearanceUpdate(BaseModel):
    """Partial update; omitted fields keep their stored value."""

    theme: Theme | None = None
    density: Density | None = None


__all__ = ["AppearanceRead", "AppearanceUpdate"]
