"""Code snippet generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gemini_flows.prompts import TemplateId, build_prompt

from ._common import generate_structured, safety_settings
from .schemas import CodeInput, CodeOutput

if TYPE_CHECKING:
    from gemini_flows.client.generation import GenerationClient

log = logging.getLogger(__name__)

CODE_FALLBACK = CodeOutput(
    code="// Sorry, an error occurred while generating code. Please try again.",
    language="plaintext",
    is_error_free=False,
)

# Snippets legitimately touch things like shell commands and crypto
_PARAMETERS = {"safety_settings": safety_settings(dangerous_content="BLOCK_NONE")}


async def generate_code(client: GenerationClient, data: CodeInput) -> CodeOutput:
    if not data.request.strip():
        return CODE_FALLBACK
    prompt = build_prompt(TemplateId.CODE, {"request": data.request})
    output, result = await generate_structured(
        client, prompt, CodeOutput, parameters=_PARAMETERS
    )
    if output is None:
        log.error("Code generation returned no usable output (%s)", result)
        return CODE_FALLBACK
    return output
