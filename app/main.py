from __future__ import annotations

import logging

from fastapi import FastAPI

from app.config import get_settings
from app.handlers import catalog_handler, generate_handler

logging.basicConfig(
    level=get_settings().log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Gemini Vision API")

app.include_router(generate_handler.router)
app.include_router(catalog_handler.router)


@app.get("/healthz")
async def healthz():
    return {"status": "ok"}
