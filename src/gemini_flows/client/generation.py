"""The generation client: one request in, one result out, never an exception.

Validation failures are returned before the backend is touched. Backend
errors are caught here and classified; nothing raised by a backend travels
past this boundary.
"""

from __future__ import annotations

import asyncio
from collections.abc import Mapping
import logging
from typing import TYPE_CHECKING, Any

from gemini_flows.constants import (
    EMPTY_PROMPT_MESSAGE,
    EMPTY_TEXT_MESSAGE,
    NO_IMAGE_URL_MESSAGE,
    NO_TEXT_RESPONSE_SUFFIX,
)
from gemini_flows.core.types import (
    ErrorKind,
    Failure,
    GenerationRequest,
    GenerationResult,
    MediaRef,
    Success,
)
from gemini_flows.telemetry import TelemetryContext

from .error_classifier import classify_backend_error

if TYPE_CHECKING:
    from gemini_flows.backends.base import BackendResponse, ModelBackend
    from gemini_flows.telemetry import TelemetryContextProtocol

log = logging.getLogger(__name__)


class GenerationClient:
    """Wraps a ``ModelBackend`` and normalizes every outcome to a result.

    Args:
        backend: The model backend to call.
        timeout_s: Optional per-call timeout. A timeout is reported as
            ``ErrorKind.BACKEND_UNAVAILABLE``.
        telemetry: Optional telemetry context.
    """

    def __init__(
        self,
        backend: ModelBackend,
        *,
        timeout_s: float | None = None,
        telemetry: TelemetryContextProtocol | None = None,
    ) -> None:
        if timeout_s is not None and timeout_s <= 0:
            raise ValueError("timeout_s must be > 0 when provided")
        self.backend = backend
        self.timeout_s = timeout_s
        self.tele = telemetry or TelemetryContext()

    async def generate(self, request: GenerationRequest) -> GenerationResult:
        """Run one generation.

        The backend is invoked at most once; there is no retry.
        """
        if not request.prompt.strip():
            return self._fail(ErrorKind.EMPTY_PROMPT, EMPTY_PROMPT_MESSAGE)

        options = self._options_for(request)
        with self.tele("client.generate", expects_media=request.expects_media):
            try:
                response = await self._invoke(request.prompt, options)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                kind, message = classify_backend_error(e)
                log.error(
                    "Backend call failed (%s): %s", kind.value, e, exc_info=True
                )
                return self._fail(kind, message)

        if not isinstance(response, Mapping):
            if response is not None:
                log.warning(
                    "Backend returned %s instead of a mapping", type(response).__name__
                )
            response = {}
        return self._interpret(request, response)

    # --- Internal helpers ---

    def _options_for(self, request: GenerationRequest) -> dict[str, Any]:
        options = dict(request.parameters)
        if request.attachments:
            options["attachments"] = request.attachments
        return options

    async def _invoke(self, prompt: str, options: dict[str, Any]) -> BackendResponse:
        call = self.backend.invoke_model(prompt, options)
        if self.timeout_s is None:
            return await call
        return await asyncio.wait_for(call, timeout=self.timeout_s)

    def _interpret(
        self, request: GenerationRequest, response: BackendResponse
    ) -> GenerationResult:
        text = response.get("text")
        if not isinstance(text, str):
            if text is not None:
                log.warning("Ignoring non-text 'text' field: %r", type(text).__name__)
            text = ""
        if request.expects_media:
            media = response.get("media")
            if not isinstance(media, Mapping):
                media = {}
            url = media.get("url")
            mime = media.get("content_type")
            if isinstance(url, str) and url.strip():
                return Success(
                    MediaRef(uri=url, mime_type=mime if isinstance(mime, str) else None)
                )
            # The model may legitimately answer with text only.
            log.warning(
                "Image generation returned no media URL. Text response: %r", text
            )
            return self._fail(
                ErrorKind.NO_PAYLOAD,
                NO_IMAGE_URL_MESSAGE + (text or NO_TEXT_RESPONSE_SUFFIX),
            )

        if text.strip():
            return Success(text)
        log.warning("Text generation returned an empty response")
        return self._fail(ErrorKind.NO_PAYLOAD, EMPTY_TEXT_MESSAGE)

    def _fail(self, kind: ErrorKind, message: str) -> Failure:
        self.tele.count("client.failure", reason=kind.value)
        return Failure(reason=kind, message=message)
