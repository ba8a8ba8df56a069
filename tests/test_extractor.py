import pytest

from app.services.errors import NoImageGeneratedError
from app.services.extractor import DEFAULT_DESCRIPTION, extract

from .conftest import image_payload


def test_extracts_first_image_and_text():
    payload = image_payload(url="https://cdn.test/fox.png", content="A fox in the snow.")
    payload["choices"][0]["message"]["images"].append({"image_url": {"url": "https://cdn.test/other.png"}})

    result = extract(payload, "a red fox, 1:1 aspect ratio composition")

    assert result.image_url == "https://cdn.test/fox.png"
    assert result.description == "A fox in the snow."
    assert result.prompt == "a red fox, 1:1 aspect ratio composition"


@pytest.mark.parametrize("content", [None, ""])
def test_missing_text_uses_default_description(content):
    result = extract(image_payload(content=content), "a red fox")
    assert result.description == DEFAULT_DESCRIPTION


def test_serializes_with_camel_case_keys():
    result = extract(image_payload(url="https://cdn.test/fox.png"), "a red fox")
    assert result.model_dump(by_alias=True) == {
        "imageUrl": "https://cdn.test/fox.png",
        "description": DEFAULT_DESCRIPTION,
        "prompt": "a red fox",
    }


@pytest.mark.parametrize(
    "payload",
    [
        {},
        {"choices": []},
        {"choices": [{"message": {"content": "I can't draw that."}}]},
        {"choices": [{"message": {"images": []}}]},
        {"choices": [{"message": {"images": [{"image_url": {}}]}}]},
        {"choices": [{"message": {"images": [{"image_url": {"url": ""}}]}}]},
        {"choices": "unexpected"},
        [],
        None,
    ],
)
def test_missing_image_raises(payload):
    with pytest.raises(NoImageGeneratedError) as exc_info:
        extract(payload, "a red fox")
    assert exc_info.value.status_code == 500
    assert exc_info.value.message == "No image was generated. Try a different prompt."
