"""Solve a question photographed in an image (multimodal prompt)."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gemini_flows.core.types import MediaRef
from gemini_flows.prompts import TemplateId, build_prompt
from gemini_flows.prompts.personas import DEFAULT_PHOTO_TONE

from ._common import StructuredOutcome, generate_structured, safety_settings
from .schemas import PhotoQuestionInput, PhotoQuestionOutput

if TYPE_CHECKING:
    from gemini_flows.client.generation import GenerationClient

log = logging.getLogger(__name__)

_PARAMETERS = {"temperature": 0.5, "safety_settings": safety_settings()}


def tone_instruction(user_instructions: str | None) -> str:
    if user_instructions and user_instructions.strip():
        return (
            "Follow these specific user instructions for the tone: "
            f'"{user_instructions.strip()}".'
        )
    return DEFAULT_PHOTO_TONE


async def solve_question_from_image(
    client: GenerationClient, data: PhotoQuestionInput
) -> StructuredOutcome[PhotoQuestionOutput]:
    prompt = build_prompt(
        TemplateId.PHOTO_QUESTION,
        {"tone_instruction": tone_instruction(data.user_instructions)},
    )
    output, result = await generate_structured(
        client,
        prompt,
        PhotoQuestionOutput,
        parameters=_PARAMETERS,
        attachments=(MediaRef(uri=data.image_data_uri),),
    )
    if output is None:
        log.error("Photo question solving failed: %s", result.message)
        return StructuredOutcome(output=None, error_message=result.message)
    return StructuredOutcome(output=output)
