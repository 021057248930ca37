"""Strong password generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gemini_flows.constants import (
    PASSWORD_FALLBACK,
    PASSWORD_MAX_LENGTH,
    PASSWORD_MIN_LENGTH,
)
from gemini_flows.prompts import TemplateId, build_prompt

from ._common import generate_structured, safety_settings
from .schemas import PasswordInput, PasswordOutput

if TYPE_CHECKING:
    from gemini_flows.client.generation import GenerationClient

log = logging.getLogger(__name__)

PASSWORD_FALLBACK_OUTPUT = PasswordOutput(
    generated_password=PASSWORD_FALLBACK,
    strength_notes="Could not generate a password at this time. Please try again.",
)

# Stricter filtering on dangerous content can reject symbol-heavy strings
_PARAMETERS = {
    "temperature": 0.7,
    "safety_settings": safety_settings(dangerous_content="BLOCK_NONE"),
}


def clamp_length(desired_length: int | None) -> int | None:
    """Clamp a requested length into the supported range; 0/None mean unspecified."""
    if not desired_length:
        return None
    return max(PASSWORD_MIN_LENGTH, min(PASSWORD_MAX_LENGTH, desired_length))


def password_prompt(data: PasswordInput) -> str:
    length = clamp_length(data.desired_length)
    if length is None:
        length_instruction = (
            "User has not specified a length. Generate a password that is at least "
            "16 characters long, up to a maximum of 24 characters if not otherwise "
            "implied by the description."
        )
    else:
        length_instruction = (
            f"User's desired length: {length} characters. Adhere to it strictly."
        )
    return build_prompt(
        TemplateId.PASSWORD,
        {
            "description": data.description,
            "length_instruction": length_instruction,
            "max_length": PASSWORD_MAX_LENGTH,
        },
    )


async def generate_strong_password(
    client: GenerationClient, data: PasswordInput
) -> PasswordOutput:
    output, result = await generate_structured(
        client, password_prompt(data), PasswordOutput, parameters=_PARAMETERS
    )
    if output is None or not output.generated_password:
        log.error("Password generation returned no usable output (%s)", result)
        return PASSWORD_FALLBACK_OUTPUT
    return output
