"""AI gateway client for image generation.

Sends one OpenAI-style chat-completions request asking the image model for
both an image and a short text. One attempt per call, no retry and no client-side
timeout, the same as a plain fetch.
"""
from __future__ import annotations

import logging
from typing import Any

import httpx

from app.config import Settings
from app.services.errors import (
    ApiKeyNotConfiguredError,
    RateLimitExceededError,
    UpstreamRequestError,
    UsageLimitReachedError,
)

logger = logging.getLogger(__name__)

IMAGE_INSTRUCTION = "Generate a high-quality image: "


class ImageGatewayClient:  # pylint: disable=too-few-public-methods
    """Minimal async client for the image model behind the AI gateway."""

    def __init__(
        self,
        *,
        api_key: str,
        url: str,
        model: str,
    ) -> None:
        self._url = url
        self._model = model
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    @classmethod
    def from_settings(cls, settings: Settings) -> "ImageGatewayClient":
        """Build a client, failing fast when the credential is not configured."""

        if not settings.lovable_api_key:
            logger.error("LOVABLE_API_KEY is not configured")
            raise ApiKeyNotConfiguredError()
        return cls(
            api_key=settings.lovable_api_key,
            url=settings.upstream_url,
            model=settings.upstream_model,
        )

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    async def generate(self, enriched_prompt: str) -> dict[str, Any]:
        """Ask the model for an image and return the decoded JSON payload.

        Raises
        ------
        RateLimitExceededError
            Upstream answered 429.
        UsageLimitReachedError
            Upstream answered 402.
        UpstreamRequestError
            Any other non-2xx status.
        """

        payload = build_payload(self._model, enriched_prompt)
        logger.debug("POST %s -> %s", self._url, payload)

        async with httpx.AsyncClient(timeout=None, headers=self._headers) as client:
            resp = await client.post(self._url, json=payload)

        if not resp.is_success:
            raise _classify_failure(resp)

        logger.info("AI gateway response received successfully")
        return resp.json()


# ------------------------------------------------------------------
# Helper functions
# ------------------------------------------------------------------

def build_payload(model: str, enriched_prompt: str) -> dict[str, Any]:
    return {
        "model": model,
        "messages": [
            {
                "role": "user",
                "content": f"{IMAGE_INSTRUCTION}{enriched_prompt}",
            },
        ],
        "modalities": ["image", "text"],
    }


def _classify_failure(resp: httpx.Response) -> Exception:
    # The body is only logged; the status alone decides the category.
    logger.error("AI gateway error: %s %s", resp.status_code, resp.text)
    if resp.status_code == 429:
        return RateLimitExceededError()
    if resp.status_code == 402:
        return UsageLimitReachedError()
    return UpstreamRequestError(resp.status_code, resp.text)
