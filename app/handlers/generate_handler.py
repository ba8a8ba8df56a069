"""Image generation endpoint consumed by the web UI."""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.config import Settings, load_settings
from app.handlers.cors import error_response, json_response, preflight
from app.services.errors import ImageGenerationError
from app.services.generation import generate_image, parse_generation_request

router = APIRouter()
logger = logging.getLogger(__name__)

router.add_api_route("/generate-image", preflight, methods=["OPTIONS"])


@router.post("/generate-image")
async def generate_image_endpoint(
    request: Request,
    settings: Settings = Depends(load_settings),
) -> JSONResponse:
    """Return ``{imageUrl, description, prompt}`` for a generation request.

    Every outcome is a JSON response; nothing escapes this handler.
    """
    try:
        payload = await request.json()
        generation_request = parse_generation_request(payload)
        result = await generate_image(generation_request, settings)
    except ImageGenerationError as exc:
        return error_response(exc.message, exc.status_code)
    except Exception as exc:  # pylint: disable=broad-except
        logger.exception("Error in generate-image handler: %s", exc)
        return error_response(str(exc) or "An unexpected error occurred", 500)

    return json_response(result.model_dump(by_alias=True))
