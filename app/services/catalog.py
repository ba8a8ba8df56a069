"""Styles and aspect ratios offered to the UI."""
from __future__ import annotations

from typing import Tuple

from app.models import AspectRatioOption, StyleOption

STYLE_OPTIONS: Tuple[StyleOption, ...] = (
    StyleOption(id="realistic", label="Realistic", description="Photorealistic quality"),
    StyleOption(id="anime", label="Anime", description="Japanese art style"),
    StyleOption(id="cyberpunk", label="Cyberpunk", description="Neon futuristic"),
    StyleOption(id="sketch", label="Sketch", description="Hand-drawn look"),
    StyleOption(id="oil-painting", label="Oil Paint", description="Classical art"),
    StyleOption(id="fantasy", label="Fantasy", description="Magical & ethereal"),
    StyleOption(id="3d-render", label="3D Render", description="CGI quality"),
    StyleOption(id="minimalist", label="Minimal", description="Clean & simple"),
)

# Advisory only: /generate-image accepts any aspect-ratio label.
ASPECT_RATIO_OPTIONS: Tuple[AspectRatioOption, ...] = (
    AspectRatioOption(id="1:1", label="Square"),
    AspectRatioOption(id="16:9", label="Landscape"),
    AspectRatioOption(id="9:16", label="Portrait"),
    AspectRatioOption(id="4:3", label="Standard"),
)
