import pytest

from gemini_flows.backends.mock import MOCK_PNG_DATA_URI
from gemini_flows.batch import BatchRunner
from gemini_flows.client.generation import GenerationClient
from gemini_flows.constants import LOGO_STYLE_PREFIXES, SAFETY_BLOCKED_MESSAGE
from gemini_flows.flows import (
    AnimationConceptInput,
    AnimationStyle,
    ImageInput,
    LogosInput,
    MediaInput,
    MediaStatus,
    generate_animation_concept,
    generate_image,
    generate_logos,
    generate_media,
)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_image_with_mock_backend(mock_client, mock_backend):
    out = await generate_image(mock_client, ImageInput(prompt="a red bicycle"))

    assert out.image_data_uri == MOCK_PNG_DATA_URI
    assert out.error_message is None
    prompt, options = mock_backend.calls[0]
    assert prompt == "a red bicycle"
    assert tuple(options["response_modalities"]) == ("TEXT", "IMAGE")


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_image_text_only_answer(stub_backend_factory):
    client = GenerationClient(stub_backend_factory(lambda _p, _o: {"text": "I cannot draw that"}))

    out = await generate_image(client, ImageInput(prompt="something"))

    assert out.image_data_uri is None
    assert out.error_message == (
        "Image generation succeeded but no image URL was returned. I cannot draw that"
    )


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_image_empty_prompt_skips_backend(mock_client, mock_backend):
    out = await generate_image(mock_client, ImageInput(prompt="  "))

    assert out.image_data_uri is None
    assert out.error_message
    assert mock_backend.calls == []


@pytest.mark.unit
@pytest.mark.asyncio
async def test_studio_background_includes_channel_name(mock_client, mock_backend):
    await generate_animation_concept(
        mock_client,
        AnimationConceptInput(
            prompt="news desk",
            animation_style=AnimationStyle.VIRTUAL_STUDIO_BACKGROUND,
            channel_name="OP News",
        ),
    )

    prompt, _ = mock_backend.calls[0]
    assert prompt.startswith("Design an impressive virtual studio background image.")
    assert '"OP News"' in prompt


@pytest.mark.unit
@pytest.mark.asyncio
async def test_channel_name_ignored_for_other_styles(mock_client, mock_backend):
    out = await generate_animation_concept(
        mock_client,
        AnimationConceptInput(
            prompt="a dragon",
            animation_style="2d_anime_scene",
            channel_name="OP News",
        ),
    )

    prompt, _ = mock_backend.calls[0]
    assert "OP News" not in prompt
    assert out.image_data_uri == MOCK_PNG_DATA_URI


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_media_statuses(stub_backend_factory, raising_responder):
    ok = GenerationClient(
        stub_backend_factory(lambda _p, _o: {"media": {"url": "data:image/png;base64,AAA"}})
    )
    no_url = GenerationClient(stub_backend_factory(lambda _p, _o: {"text": "nope"}))
    broken = GenerationClient(
        stub_backend_factory(raising_responder(RuntimeError("blocked by SAFETY")))
    )

    success = await generate_media(ok, MediaInput(prompt="thumb", media_type="Image"))
    unsupported = await generate_media(ok, MediaInput(prompt="thumb", media_type="video"))
    empty = await generate_media(ok, MediaInput(prompt=" ", media_type="image"))
    missing = await generate_media(no_url, MediaInput(prompt="thumb"))
    failed = await generate_media(broken, MediaInput(prompt="thumb"))

    assert success.status is MediaStatus.SUCCESS
    assert success.media_url == "data:image/png;base64,AAA"
    assert unsupported.status is MediaStatus.UNSUPPORTED_TYPE
    assert "video" in unsupported.media_url
    assert empty.status is MediaStatus.ERROR_EMPTY_PROMPT
    assert missing.status is MediaStatus.ERROR_NO_URL
    assert missing.media_url.startswith("Error: Image generation succeeded")
    assert failed.status is MediaStatus.ERROR_EXCEPTION
    assert failed.media_url == f"Error: {SAFETY_BLOCKED_MESSAGE}"


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_logos_one_per_style_in_order(stub_backend_factory):
    def responder(prompt, _opts):
        if prompt.startswith("Emblem"):
            raise RuntimeError("Response blocked by SAFETY filters")
        return {"media": {"url": f"data:image/png;base64,{len(prompt)}"}}

    runner = BatchRunner(GenerationClient(stub_backend_factory(responder)))

    out = await generate_logos(runner, LogosInput(base_prompt="a coffee shop"))

    assert len(out.logos) == len(LOGO_STYLE_PREFIXES) == 10
    assert [o.prompt_used for o in out.logos] == [
        f"{prefix}a coffee shop" for prefix in LOGO_STYLE_PREFIXES
    ]
    emblem = out.logos[2]
    assert emblem.image_data_uri is None
    assert emblem.error_message == SAFETY_BLOCKED_MESSAGE
    others = [o for i, o in enumerate(out.logos) if i != 2]
    assert all(o.image_data_uri and o.error_message is None for o in others)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_logos_empty_prompt(stub_backend_factory):
    backend = stub_backend_factory()
    runner = BatchRunner(GenerationClient(backend))

    out = await generate_logos(runner, LogosInput(base_prompt=""))

    assert len(out.logos) == 10
    assert all(o.image_data_uri is None and o.error_message for o in out.logos)
    assert backend.call_count == 0
