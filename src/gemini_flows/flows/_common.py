"""Helpers shared by the flows: parameter presets and structured calls."""

from __future__ import annotations

import dataclasses
import logging
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel

from gemini_flows.client.structured import parse_structured
from gemini_flows.constants import IMAGE_RESPONSE_MODALITIES, UNPARSEABLE_RESPONSE_MESSAGE
from gemini_flows.core.types import (
    ErrorKind,
    Failure,
    GenerationRequest,
    MediaRef,
    Success,
)

if TYPE_CHECKING:
    from gemini_flows.client.generation import GenerationClient

log = logging.getLogger(__name__)

IMAGE_PARAMETERS: dict[str, Any] = {"response_modalities": IMAGE_RESPONSE_MODALITIES}

_HARM_CATEGORIES = (
    "HARM_CATEGORY_HARASSMENT",
    "HARM_CATEGORY_HATE_SPEECH",
    "HARM_CATEGORY_SEXUALLY_EXPLICIT",
    "HARM_CATEGORY_DANGEROUS_CONTENT",
)


def safety_settings(
    threshold: str = "BLOCK_MEDIUM_AND_ABOVE", **per_category: str
) -> tuple[dict[str, str], ...]:
    """Safety settings for all harm categories, with per-category overrides.

    Override keys are the category name without the ``HARM_CATEGORY_``
    prefix, e.g. ``dangerous_content="BLOCK_NONE"``.
    """
    overrides = {
        f"HARM_CATEGORY_{name.upper()}": value for name, value in per_category.items()
    }
    return tuple(
        {"category": category, "threshold": overrides.get(category, threshold)}
        for category in _HARM_CATEGORIES
    )


@dataclasses.dataclass(frozen=True, slots=True)
class StructuredOutcome[M: BaseModel]:
    """A structured flow's answer: the parsed output or a display message."""

    output: M | None
    error_message: str | None = None

    @property
    def ok(self) -> bool:
        return self.output is not None


async def generate_structured[M: BaseModel](
    client: GenerationClient,
    prompt: str,
    model: type[M],
    *,
    parameters: dict[str, Any] | None = None,
    attachments: tuple[MediaRef, ...] = (),
) -> tuple[M, Success] | tuple[None, Failure]:
    """Ask for JSON matching ``model`` and parse it.

    Returns the parsed model (or None) and the underlying result. An answer
    that cannot be parsed is reported as a ``NO_PAYLOAD`` failure.
    """
    request = GenerationRequest(
        prompt=prompt,
        parameters={**(parameters or {}), "response_schema": model},
        attachments=attachments,
    )
    result = await client.generate(request)
    if isinstance(result, Failure):
        return None, result
    parsed = parse_structured(str(result.payload), model)
    if parsed is None:
        return None, Failure(ErrorKind.NO_PAYLOAD, UNPARSEABLE_RESPONSE_MESSAGE)
    return parsed, result
