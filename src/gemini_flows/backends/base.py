"""The model backend seam.

A backend exposes one coroutine, ``invoke_model(prompt, options)``, and
returns a ``BackendResponse`` mapping. Backends may raise any exception; the
generation client is responsible for turning it into a failed result.

Recognized ``options`` keys (all optional):

- ``model``: explicit model name
- ``response_modalities``: e.g. ``("TEXT", "IMAGE")``
- ``temperature``: float
- ``safety_settings``: sequence of ``{"category": ..., "threshold": ...}``
- ``response_schema``: pydantic model class for JSON output
- ``system_instruction``: str
- ``attachments``: tuple of ``MediaRef`` sent alongside the prompt
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, TypedDict, runtime_checkable


class MediaPayload(TypedDict, total=False):
    url: str
    content_type: str | None


class BackendResponse(TypedDict, total=False):
    """What a backend hands back: some text, some media, or both."""

    text: str
    media: MediaPayload


@runtime_checkable
class ModelBackend(Protocol):
    """Anything that can run a single generation against a model."""

    async def invoke_model(
        self, prompt: str, options: Mapping[str, Any]
    ) -> BackendResponse:
        """Run one generation; may raise on provider errors."""
        ...
