import pytest
from pydantic import ValidationError

from app.models import GenerationRequest
from app.services.errors import InvalidPromptError
from app.services.generation import parse_generation_request


@pytest.mark.parametrize("prompt", ["", "   ", "\n\t"])
def test_blank_prompt_fails_model_validation(prompt):
    with pytest.raises(ValidationError):
        GenerationRequest(prompt=prompt)


def test_request_reads_camel_case_aspect_ratio():
    request = GenerationRequest.model_validate({"prompt": "a red fox", "style": "anime", "aspectRatio": "16:9"})
    assert request.prompt == "a red fox"
    assert request.style == "anime"
    assert request.aspect_ratio == "16:9"


@pytest.mark.parametrize("style", [3, True, ["anime"], {"id": "anime"}])
def test_non_string_style_becomes_unknown(style):
    assert GenerationRequest(prompt="a red fox", style=style).style is None


@pytest.mark.parametrize(
    "aspect_ratio,expected",
    [(16, "16"), (1.5, "1.5"), (16.0, "16"), (0, None), ("", None), (True, None), (["16:9"], None)],
)
def test_aspect_ratio_normalization(aspect_ratio, expected):
    assert GenerationRequest(prompt="a red fox", aspect_ratio=aspect_ratio).aspect_ratio == expected


@pytest.mark.parametrize("payload", [{"prompt": " "}, {"prompt": 7}, {}, ["a red fox"], None])
def test_parse_rejects_invalid_prompt(payload):
    with pytest.raises(InvalidPromptError) as exc_info:
        parse_generation_request(payload)
    assert exc_info.value.status_code == 400


def test_parse_keeps_prompt_untrimmed():
    assert parse_generation_request({"prompt": "  a red fox "}).prompt == "  a red fox "
