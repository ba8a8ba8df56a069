from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from app.config import Settings, load_settings
from app.main import app

UPSTREAM_URL = "https://gateway.test/v1/chat/completions"


def make_settings(**overrides) -> Settings:
    values = {
        "LOVABLE_API_KEY": "test-key",
        "UPSTREAM_URL": UPSTREAM_URL,
        "UPSTREAM_MODEL": "test/image-model",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings() -> Settings:
    return make_settings()


@pytest.fixture
def client(settings: Settings):
    app.dependency_overrides[load_settings] = lambda: settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def image_payload(url: str = "data:image/png;base64,AAAA", content=None) -> dict:
    message = {"role": "assistant", "images": [{"type": "image_url", "image_url": {"url": url}}]}
    if content is not None:
        message["content"] = content
    return {"id": "gen-1", "choices": [{"index": 0, "message": message}]}
