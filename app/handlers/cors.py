"""Permissive CORS headers shared by every public endpoint.

The browser UI calls us cross-origin with its own auth headers, so preflight
requests are answered explicitly and every response echoes the same headers.
"""
from __future__ import annotations

from typing import Any

from fastapi import Response
from fastapi.responses import JSONResponse

from app.models import ErrorResult

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


async def preflight() -> Response:
    """Answer an OPTIONS preflight with no body."""
    return Response(headers=CORS_HEADERS)


def json_response(content: Any, status_code: int = 200) -> JSONResponse:
    return JSONResponse(content=content, status_code=status_code, headers=CORS_HEADERS)


def error_response(message: str, status_code: int) -> JSONResponse:
    return json_response(ErrorResult(error=message).model_dump(), status_code=status_code)
