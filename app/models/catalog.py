from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StyleOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    description: str


class AspectRatioOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str  # e.g., "1:1"
    label: str
