"""Prompt enrichment with style and aspect-ratio modifiers."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Optional

STYLE_MODIFIERS: Mapping[str, str] = MappingProxyType(
    {
        "realistic": "ultra-realistic, photorealistic, detailed photography style, 8K resolution",
        "anime": "anime art style, vibrant colors, detailed anime illustration, studio quality",
        "cyberpunk": "cyberpunk aesthetic, neon lights, futuristic, dark sci-fi atmosphere, high tech",
        "sketch": "pencil sketch style, hand-drawn illustration, artistic sketch, detailed linework",
        "oil-painting": "oil painting style, classical art, rich textures, masterpiece quality, fine art",
        "fantasy": "fantasy art style, magical, ethereal lighting, epic fantasy illustration",
        "3d-render": "3D rendered, CGI quality, octane render, volumetric lighting, photorealistic 3D",
        "minimalist": "minimalist design, clean aesthetic, simple composition, modern art style",
    }
)

ASPECT_RATIO_SUFFIX = "aspect ratio composition"


def enrich(prompt: str, style: Optional[str] = None, aspect_ratio: Optional[str] = None) -> str:
    """Return *prompt* trimmed and suffixed with the style and aspect-ratio hints.

    The caller must reject blank prompts beforehand. Unknown styles add nothing.
    """

    enriched = prompt.strip()

    modifier = STYLE_MODIFIERS.get(style) if style else None
    if modifier:
        enriched = f"{enriched}, {modifier}"

    if aspect_ratio:
        enriched = f"{enriched}, {aspect_ratio} {ASPECT_RATIO_SUFFIX}"

    return enriched
