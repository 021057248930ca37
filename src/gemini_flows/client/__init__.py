"""The generation client and its response helpers."""

from .error_classifier import classify_backend_error, message_for
from .generation import GenerationClient
from .structured import load_json, parse_structured

__all__ = [
    "GenerationClient",
    "classify_backend_error",
    "load_json",
    "message_for",
    "parse_structured",
]
