"""Error taxonomy for image generation.

Every error carries the HTTP status and the message shown to the end user.
Services raise these; only the route handler turns them into responses.
"""
from __future__ import annotations


class ImageGenerationError(Exception):
    """Base class for failures that map onto a client-facing error response."""

    status_code: int = 500
    message: str = "An unexpected error occurred"

    def __init__(self, message: str | None = None, *, status_code: int | None = None) -> None:
        if message is not None:
            self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class InvalidPromptError(ImageGenerationError):
    status_code = 400
    message = "Please provide a valid prompt"


class ApiKeyNotConfiguredError(ImageGenerationError):
    """The upstream credential is missing. Fatal for the request, never retried."""

    status_code = 500
    message = "API key not configured"


class RateLimitExceededError(ImageGenerationError):
    status_code = 429
    message = "Rate limit exceeded. Please wait a moment and try again."


class UsageLimitReachedError(ImageGenerationError):
    status_code = 402
    message = "Usage limit reached. Please check your account."


class UpstreamRequestError(ImageGenerationError):
    """Any other non-2xx answer from the gateway."""

    status_code = 500
    message = "Failed to generate image. Please try again."

    def __init__(self, upstream_status: int, upstream_body: str = "") -> None:
        super().__init__()
        self.upstream_status = upstream_status
        self.upstream_body = upstream_body


class NoImageGeneratedError(ImageGenerationError):
    """The gateway answered 2xx but the payload holds no image."""

    status_code = 500
    message = "No image was generated. Try a different prompt."
