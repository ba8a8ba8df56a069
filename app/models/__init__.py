from .catalog import AspectRatioOption, StyleOption
from .generation import ErrorResult, GenerationRequest, GenerationResult

__all__ = [
    "AspectRatioOption",
    "StyleOption",
    "ErrorResult",
    "GenerationRequest",
    "GenerationResult",
]
