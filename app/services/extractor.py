"""Pull the generated image out of a chat-completions payload.

The gateway nests the image under the first choice:

    choices[0].message.images[0].image_url.url

and may put a short caption in ``choices[0].message.content``. Everything else
in the payload is ignored.
"""
from __future__ import annotations

import json
import logging
from typing import Any

from app.models import GenerationResult
from app.services.errors import NoImageGeneratedError

logger = logging.getLogger(__name__)

DEFAULT_DESCRIPTION = "Image generated successfully"


def extract(payload: Any, enriched_prompt: str) -> GenerationResult:
    """Return the result for *payload*, echoing the enriched prompt.

    Raises ``NoImageGeneratedError`` when no image URL can be found. The HTTP
    call succeeded in that case, so the model most likely refused the prompt.
    """

    message = _first(_get(payload, "choices"))
    message = _get(message, "message")

    image = _first(_get(message, "images"))
    image_url = _get(_get(image, "image_url"), "url")
    if not isinstance(image_url, str) or not image_url:
        logger.error("No image in response: %s", json.dumps(payload, default=str))
        raise NoImageGeneratedError()

    text = _get(message, "content")
    description = text if isinstance(text, str) and text else DEFAULT_DESCRIPTION

    return GenerationResult(image_url=image_url, description=description, prompt=enriched_prompt)


def _get(obj: Any, key: str) -> Any:
    return obj.get(key) if isinstance(obj, dict) else None


def _first(items: Any) -> Any:
    return items[0] if isinstance(items, list) and items else None
