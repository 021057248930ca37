"""Logo fan-out: one image per style prefix, generated concurrently."""

from __future__ import annotations

from typing import TYPE_CHECKING

from gemini_flows.constants import EMPTY_PROMPT_MESSAGE, LOGO_STYLE_PREFIXES
from gemini_flows.core.types import BatchJob, Failure, MediaRef, Success
from gemini_flows.prompts import TemplateId, build_prompt

from ._common import IMAGE_PARAMETERS
from .schemas import LogoOption, LogosInput, LogosOutput

if TYPE_CHECKING:
    from gemini_flows.batch import BatchRunner


def logo_job(base_prompt: str) -> BatchJob:
    """Build the ordered variant prompts for ``base_prompt``."""
    return BatchJob(
        tuple(
            build_prompt(
                TemplateId.LOGO_VARIANT,
                {"style_prefix": prefix, "base_prompt": base_prompt},
            )
            for prefix in LOGO_STYLE_PREFIXES
        )
    )


async def generate_logos(runner: BatchRunner, data: LogosInput) -> LogosOutput:
    """Generate one logo per style. A failed variant only fails its own slot."""
    job = logo_job(data.base_prompt)
    if not data.base_prompt.strip():
        return LogosOutput(
            logos=[
                LogoOption(
                    image_data_uri=None,
                    prompt_used=prompt,
                    error_message=EMPTY_PROMPT_MESSAGE,
                )
                for prompt in job.variant_prompts
            ]
        )

    results = await runner.run_job(job, IMAGE_PARAMETERS)
    logos = []
    for prompt, result in zip(job.variant_prompts, results, strict=True):
        if isinstance(result, Success) and isinstance(result.payload, MediaRef):
            logos.append(LogoOption(image_data_uri=result.payload.uri, prompt_used=prompt))
        else:
            message = result.message if isinstance(result, Failure) else str(result.payload)
            logos.append(
                LogoOption(image_data_uri=None, prompt_used=prompt, error_message=message)
            )
    return LogosOutput(logos=logos)
