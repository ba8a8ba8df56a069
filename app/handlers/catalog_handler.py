"""Read-only listings of the styles and aspect ratios the UI can offer."""
from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.handlers.cors import json_response, preflight
from app.services.catalog import ASPECT_RATIO_OPTIONS, STYLE_OPTIONS

router = APIRouter()

router.add_api_route("/styles", preflight, methods=["OPTIONS"])
router.add_api_route("/aspect-ratios", preflight, methods=["OPTIONS"])


@router.get("/styles")
async def list_styles() -> JSONResponse:
    return json_response([option.model_dump() for option in STYLE_OPTIONS])


@router.get("/aspect-ratios")
async def list_aspect_ratios() -> JSONResponse:
    return json_response([option.model_dump() for option in ASPECT_RATIO_OPTIONS])
