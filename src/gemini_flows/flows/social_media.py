"""Social media content suggestions for a platform, topic and keywords."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gemini_flows.prompts import TemplateId, build_prompt

from ._common import generate_structured
from .schemas import SocialMediaInput, SocialMediaOutput

if TYPE_CHECKING:
    from gemini_flows.client.generation import GenerationClient

log = logging.getLogger(__name__)

SOCIAL_MEDIA_FALLBACK = SocialMediaOutput(
    trending_topics=[],
    tags=[],
    hashtags=[],
    video_titles=[],
    seo_description="Sorry, could not generate suggestions at this time. Please try again.",
    thumbnail_prompt="Error: could not generate thumbnail prompt.",
)


async def suggest_social_media_content(
    client: GenerationClient, data: SocialMediaInput
) -> SocialMediaOutput:
    prompt = build_prompt(
        TemplateId.SOCIAL_MEDIA,
        {"platform": data.platform, "topic": data.topic, "keywords": data.keywords},
    )
    output, result = await generate_structured(client, prompt, SocialMediaOutput)
    if output is None:
        log.error("Social media suggestions returned no usable output (%s)", result)
        return SOCIAL_MEDIA_FALLBACK
    return output
