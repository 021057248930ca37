"""Test paper and solution key generation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gemini_flows.prompts import TemplateId, build_prompt

from ._common import StructuredOutcome, generate_structured
from .schemas import TestPaperInput, TestPaperOutput

if TYPE_CHECKING:
    from gemini_flows.client.generation import GenerationClient

log = logging.getLogger(__name__)


def build_test_paper_prompt(data: TestPaperInput) -> str:
    if data.number_of_questions:
        count = f"Desired Number of Questions: {data.number_of_questions}"
    else:
        count = (
            "Number of Questions: Please generate a suitable number, typically "
            "between 10 to 20 questions, depending on the topic complexity and "
            "class level."
        )
    if data.question_types:
        types = "Preferred Question Types: " + ", ".join(data.question_types)
    else:
        types = (
            "Question Types: Please include a variety of question types appropriate "
            "for the subject and grade level (e.g., MCQs, True/False, "
            "Fill-in-the-blanks, Short Answer, Long Answer, Problem-solving)."
        )
    return build_prompt(
        TemplateId.TEST_PAPER,
        {
            "chapter_name": data.chapter_name,
            "class_name": data.class_name,
            "question_count_instruction": count,
            "question_types_instruction": types,
        },
    )


async def generate_test_paper(
    client: GenerationClient, data: TestPaperInput
) -> StructuredOutcome[TestPaperOutput]:
    """Generate a test paper; on failure ``output`` is None and a message is set."""
    output, result = await generate_structured(
        client, build_test_paper_prompt(data), TestPaperOutput
    )
    if output is None:
        log.error("Test paper generation failed: %s", result.message)
        return StructuredOutcome(output=None, error_message=result.message)
    return StructuredOutcome(output=output)
