"""Single-image flows: free-form images, animation concepts and thumbnails."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gemini_flows.constants import EMPTY_PROMPT_MESSAGE
from gemini_flows.core.types import (
    ErrorKind,
    Failure,
    GenerationRequest,
    GenerationResult,
    MediaRef,
    Success,
)
from gemini_flows.prompts import TemplateId, build_prompt
from gemini_flows.prompts.personas import ANIMATION_STYLE_GUIDANCE, STUDIO_CHANNEL_CLAUSE

from ._common import IMAGE_PARAMETERS
from .schemas import (
    AnimationConceptInput,
    AnimationStyle,
    ImageInput,
    ImageOutput,
    MediaInput,
    MediaOutput,
    MediaStatus,
)

if TYPE_CHECKING:
    from gemini_flows.client.generation import GenerationClient

log = logging.getLogger(__name__)


async def _generate_image(client: GenerationClient, prompt: str) -> GenerationResult:
    return await client.generate(
        GenerationRequest(prompt=prompt, parameters=IMAGE_PARAMETERS)
    )


def _to_image_output(result: GenerationResult) -> ImageOutput:
    if isinstance(result, Success) and isinstance(result.payload, MediaRef):
        return ImageOutput(image_data_uri=result.payload.uri)
    if isinstance(result, Failure):
        return ImageOutput(image_data_uri=None, error_message=result.message)
    # A text payload for an image request; the client never produces this.
    return ImageOutput(image_data_uri=None, error_message=str(result.payload))


async def generate_image(client: GenerationClient, data: ImageInput) -> ImageOutput:
    """Generate one image from a free-form prompt."""
    if not data.prompt.strip():
        return ImageOutput(image_data_uri=None, error_message=EMPTY_PROMPT_MESSAGE)
    prompt = build_prompt(TemplateId.IMAGE, {"prompt": data.prompt})
    return _to_image_output(await _generate_image(client, prompt))


def animation_prompt(data: AnimationConceptInput) -> str:
    """Render the animation-concept prompt for a style.

    The channel name is only woven in for studio backgrounds.
    """
    channel_clause = ""
    if (
        data.animation_style is AnimationStyle.VIRTUAL_STUDIO_BACKGROUND
        and data.channel_name
        and data.channel_name.strip()
    ):
        channel_clause = STUDIO_CHANNEL_CLAUSE.format(channel_name=data.channel_name)
    return build_prompt(
        TemplateId.ANIMATION_CONCEPT,
        {
            "style_guidance": ANIMATION_STYLE_GUIDANCE[data.animation_style.value],
            "prompt": data.prompt,
            "channel_clause": channel_clause,
        },
    )


async def generate_animation_concept(
    client: GenerationClient, data: AnimationConceptInput
) -> ImageOutput:
    """Generate a still concept image in one of the animation styles."""
    if not data.prompt.strip():
        return ImageOutput(image_data_uri=None, error_message=EMPTY_PROMPT_MESSAGE)
    return _to_image_output(await _generate_image(client, animation_prompt(data)))


async def generate_media(client: GenerationClient, data: MediaInput) -> MediaOutput:
    """Generate thumbnail media. Only images are supported."""
    if data.media_type.lower() != "image":
        return MediaOutput(
            media_url=(
                f"Unsupported media type: {data.media_type}. "
                'Only "image" is currently supported.'
            ),
            status=MediaStatus.UNSUPPORTED_TYPE,
        )
    if not data.prompt.strip():
        return MediaOutput(
            media_url="Error: Prompt cannot be empty for image generation.",
            status=MediaStatus.ERROR_EMPTY_PROMPT,
        )

    prompt = build_prompt(TemplateId.IMAGE, {"prompt": data.prompt})
    result = await _generate_image(client, prompt)
    if isinstance(result, Success) and isinstance(result.payload, MediaRef):
        return MediaOutput(media_url=result.payload.uri, status=MediaStatus.SUCCESS)
    if isinstance(result, Failure) and result.reason is ErrorKind.NO_PAYLOAD:
        return MediaOutput(
            media_url=f"Error: {result.message}", status=MediaStatus.ERROR_NO_URL
        )
    message = result.message if isinstance(result, Failure) else str(result.payload)
    return MediaOutput(media_url=f"Error: {message}", status=MediaStatus.ERROR_EXCEPTION)
