from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class GenerationRequest(BaseModel):
    """A validated generation request as received from the UI.

    Only the prompt can make a request invalid. A style that is not a string
    is treated like an unknown style, and a numeric aspect ratio is kept as
    its text form.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    prompt: str
    style: Optional[str] = None
    aspect_ratio: Optional[str] = Field(None, alias="aspectRatio")  # e.g., "16:9"

    @field_validator("prompt")
    @classmethod
    def _prompt_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("prompt must not be blank")
        return value

    @field_validator("style", mode="before")
    @classmethod
    def _style_text_only(cls, value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @field_validator("aspect_ratio", mode="before")
    @classmethod
    def _aspect_ratio_as_text(cls, value: Any) -> Optional[str]:
        if not value or isinstance(value, bool):
            return None
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if isinstance(value, (int, float)):
            return str(value)
        return value if isinstance(value, str) else None


class GenerationResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    image_url: str = Field(..., alias="imageUrl")  # URL or data URI returned by the model
    description: str
    prompt: str  # Enriched prompt actually sent upstream


class ErrorResult(BaseModel):
    error: str
