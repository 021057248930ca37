"""Model backends: the Gemini adapter and an offline mock."""

from .base import BackendResponse, MediaPayload, ModelBackend
from .mock import MockBackend

__all__ = [
    "BackendResponse",
    "MediaPayload",
    "MockBackend",
    "ModelBackend",
]
