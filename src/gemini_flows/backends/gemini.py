"""Google Gemini backend built on the ``google-genai`` SDK.

Uses the SDK's async surface (``client.aio``) so concurrent generations share
the event loop instead of blocking it.
"""

from __future__ import annotations

from collections.abc import Mapping
import logging
from typing import Any

from google import genai
from google.genai import types

from gemini_flows.core.types import MediaRef
from gemini_flows.exceptions import BackendError

from .base import BackendResponse

log = logging.getLogger(__name__)


class GoogleGenAIBackend:
    """Model backend that calls the Gemini API."""

    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        image_model: str,
        client: genai.Client | None = None,
    ) -> None:
        if not api_key and client is None:
            raise BackendError("GoogleGenAIBackend requires an api_key")
        self.model = model
        self.image_model = image_model
        self._client = client or genai.Client(api_key=api_key)

    async def invoke_model(
        self, prompt: str, options: Mapping[str, Any]
    ) -> BackendResponse:
        model_name = self._select_model(options)
        config = self._build_config(options)
        contents = self._build_contents(prompt, options.get("attachments") or ())

        log.debug(
            "Calling Gemini model '%s' (modalities=%s, schema=%s)",
            model_name,
            config.response_modalities,
            getattr(config.response_schema, "__name__", None),
        )
        response = await self._client.aio.models.generate_content(
            model=model_name,
            contents=contents,
            config=config,
        )
        return self._to_backend_response(response)

    # --- Request mapping ---

    def _select_model(self, options: Mapping[str, Any]) -> str:
        explicit = options.get("model")
        if explicit:
            return str(explicit)
        modalities = options.get("response_modalities") or ()
        if any(str(m).upper() == "IMAGE" for m in modalities):
            return self.image_model
        return self.model

    def _build_config(self, options: Mapping[str, Any]) -> types.GenerateContentConfig:
        config = types.GenerateContentConfig()

        modalities = options.get("response_modalities")
        if modalities:
            config.response_modalities = [str(m).upper() for m in modalities]

        if options.get("temperature") is not None:
            config.temperature = float(options["temperature"])

        if options.get("system_instruction"):
            config.system_instruction = str(options["system_instruction"])

        safety = options.get("safety_settings")
        if safety:
            config.safety_settings = [
                types.SafetySetting(
                    category=s["category"],
                    threshold=s["threshold"],
                )
                for s in safety
            ]

        schema = options.get("response_schema")
        if schema is not None:
            config.response_mime_type = "application/json"
            config.response_schema = schema

        return config

    def _build_contents(
        self, prompt: str, attachments: tuple[MediaRef, ...]
    ) -> list[Any]:
        contents: list[Any] = []
        for media in attachments:
            if media.is_inline:
                contents.append(
                    types.Part.from_bytes(
                        data=media.inline_bytes(),
                        mime_type=media.mime_type or "application/octet-stream",
                    )
                )
            else:
                contents.append(
                    types.Part.from_uri(file_uri=media.uri, mime_type=media.mime_type)
                )
        contents.append(prompt)
        return contents

    # --- Response mapping ---

    def _to_backend_response(self, response: Any) -> BackendResponse:
        feedback = getattr(response, "prompt_feedback", None)
        block_reason = getattr(feedback, "block_reason", None)
        if block_reason:
            raise BackendError(f"Prompt blocked by SAFETY filters ({_enum_name(block_reason)})")

        candidates = getattr(response, "candidates", None) or []
        if not candidates:
            return BackendResponse()

        candidate = candidates[0]
        finish = _enum_name(getattr(candidate, "finish_reason", None))
        content = getattr(candidate, "content", None)
        parts = getattr(content, "parts", None) or []
        if finish == "SAFETY" and not parts:
            raise BackendError("Response blocked by SAFETY filters")

        result = BackendResponse()
        texts: list[str] = []
        for part in parts:
            inline = getattr(part, "inline_data", None)
            if inline is not None and getattr(inline, "data", None) and "media" not in result:
                mime = inline.mime_type or "application/octet-stream"
                ref = MediaRef.from_inline(inline.data, mime)
                result["media"] = {"url": ref.uri, "content_type": mime}
            text = getattr(part, "text", None)
            if text:
                texts.append(text)
        if texts:
            result["text"] = "".join(texts)
        return result


def _enum_name(value: Any) -> str | None:
    if value is None:
        return None
    return str(getattr(value, "name", value))
