"""Request validation and the generate pipeline.

validate -> enrich -> call gateway -> extract. Each call is independent and
works from its own freshly loaded settings.
"""
from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from app.config import Settings
from app.models import GenerationRequest, GenerationResult
from app.services.errors import InvalidPromptError
from app.services.extractor import extract
from app.services.gateway import ImageGatewayClient
from app.services.prompt_enricher import enrich

logger = logging.getLogger(__name__)


def parse_generation_request(payload: Any) -> GenerationRequest:
    """Validate a decoded JSON body into a ``GenerationRequest``."""

    if not isinstance(payload, dict):
        logger.error("Invalid prompt received")
        raise InvalidPromptError()

    try:
        return GenerationRequest.model_validate(payload)
    except ValidationError as exc:
        logger.error("Invalid prompt received: %s", exc)
        raise InvalidPromptError() from exc


async def generate_image(request: GenerationRequest, settings: Settings) -> GenerationResult:
    """Run one generation end to end. Errors propagate as ``ImageGenerationError``."""

    # Raises before any upstream work when the key is missing.
    client = ImageGatewayClient.from_settings(settings)

    enriched_prompt = enrich(request.prompt, request.style, request.aspect_ratio)
    logger.info("Generating image with prompt: %s", enriched_prompt)

    payload = await client.generate(enriched_prompt)
    return extract(payload, enriched_prompt)
