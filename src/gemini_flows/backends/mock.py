"""Deterministic backend used for tests and offline development (no network)."""

from __future__ import annotations

from collections.abc import Mapping
import json
from typing import Any

from .base import BackendResponse

# 1x1 transparent PNG
MOCK_PNG_DATA_URI = (
    "data:image/png;base64,"
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAQAAAC1HAwCAAAAC0lEQVR42mNkYAAAAAYAAjCB0C8AAAAASUVORK5CYII="
)


class MockBackend:
    """Echo backend.

    - Image requests return a tiny PNG data URI plus a short caption.
    - Requests with a ``response_schema`` return placeholder JSON that
      validates against that schema.
    - Everything else echoes the prompt.

    Every call is recorded in ``calls`` as ``(prompt, options)``.
    """

    def __init__(self) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []

    async def invoke_model(
        self, prompt: str, options: Mapping[str, Any]
    ) -> BackendResponse:
        self.calls.append((prompt, dict(options)))

        modalities = options.get("response_modalities") or ()
        if any(str(m).upper() == "IMAGE" for m in modalities):
            return {
                "text": "mock image",
                "media": {"url": MOCK_PNG_DATA_URI, "content_type": "image/png"},
            }

        schema = options.get("response_schema")
        if schema is not None and hasattr(schema, "model_json_schema"):
            return {"text": json.dumps(_placeholder(schema.model_json_schema()))}

        return {"text": f"echo: {prompt}"}


def _placeholder(schema: Mapping[str, Any]) -> Any:
    """Smallest value satisfying a (flat) JSON schema."""
    if "anyOf" in schema:
        options = [s for s in schema["anyOf"] if s.get("type") != "null"]
        return _placeholder(options[0]) if options else None
    kind = schema.get("type")
    if kind == "object":
        props = schema.get("properties", {})
        return {name: _placeholder(sub) for name, sub in props.items()}
    if kind == "array":
        return []
    if kind == "string":
        return "mock"
    if kind == "integer":
        return max(int(schema.get("minimum", 0)), int(schema.get("exclusiveMinimum", -1)) + 1)
    if kind == "number":
        return 0
    if kind == "boolean":
        return False
    return None
