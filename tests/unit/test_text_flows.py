import json

import pydantic
import pytest

from gemini_flows.client.generation import GenerationClient
from gemini_flows.constants import (
    BACKEND_UNAVAILABLE_MESSAGE,
    PASSWORD_FALLBACK,
    UNPARSEABLE_RESPONSE_MESSAGE,
)
from gemini_flows.flows import (
    CodeInput,
    CodeOutput,
    PasswordInput,
    PasswordOutput,
    PhotoQuestionInput,
    PhotoQuestionOutput,
    SocialMediaInput,
    SocialMediaOutput,
    TestPaperInput,
    TestPaperOutput,
    generate_code,
    generate_strong_password,
    generate_test_paper,
    solve_question_from_image,
    suggest_social_media_content,
)
from gemini_flows.flows.password import clamp_length, password_prompt
from gemini_flows.flows.question_paper import build_test_paper_prompt

PHOTO = "data:image/png;base64,iVBORw0KGgo="


def _json_backend(stub_backend_factory, payload):
    return stub_backend_factory(lambda _p, _o: {"text": json.dumps(payload)})


# --- Code ---


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_code_parses_fenced_json(stub_backend_factory):
    payload = {"code": "print('hi')", "language": "python", "is_error_free": True}
    backend = stub_backend_factory(
        lambda _p, _o: {"text": f"```json\n{json.dumps(payload)}\n```"}
    )

    out = await generate_code(GenerationClient(backend), CodeInput(request="hello world"))

    assert out == CodeOutput(**payload)
    _, options = backend.calls[0]
    assert options["response_schema"] is CodeOutput
    dangerous = [
        s for s in options["safety_settings"]
        if s["category"] == "HARM_CATEGORY_DANGEROUS_CONTENT"
    ]
    assert dangerous == [
        {"category": "HARM_CATEGORY_DANGEROUS_CONTENT", "threshold": "BLOCK_NONE"}
    ]


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_code_fallback(stub_backend_factory):
    client = GenerationClient(stub_backend_factory(lambda _p, _o: {"text": "not json"}))

    out = await generate_code(client, CodeInput(request="hello world"))

    assert out.language == "plaintext"
    assert out.is_error_free is False
    assert out.code.startswith("//")


# --- Password ---


@pytest.mark.unit
@pytest.mark.parametrize(
    ("requested", "expected"),
    [(None, None), (0, None), (1, 4), (4, 4), (20, 20), (128, 128), (500, 128)],
)
def test_password_length_is_clamped(requested, expected):
    assert clamp_length(requested) == expected


@pytest.mark.unit
def test_password_prompt_mentions_clamped_length():
    prompt = password_prompt(PasswordInput(description="wifi", desired_length=999))

    assert "User's desired length: 128 characters." in prompt
    assert "has not specified a length" not in prompt


@pytest.mark.unit
@pytest.mark.asyncio
async def test_password_success(stub_backend_factory):
    payload = {"generated_password": "x7#Qa!9zP@2m", "strength_notes": "long and mixed"}
    backend = _json_backend(stub_backend_factory, payload)

    out = await generate_strong_password(
        GenerationClient(backend), PasswordInput(description="email")
    )

    assert out == PasswordOutput(**payload)
    _, options = backend.calls[0]
    assert options["temperature"] == 0.7
    assert options["response_schema"] is PasswordOutput


@pytest.mark.unit
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "responder_payload",
    [
        {"generated_password": "", "strength_notes": "empty"},
        {"strength_notes": "missing password"},
    ],
)
async def test_password_fallback(stub_backend_factory, responder_payload):
    client = GenerationClient(_json_backend(stub_backend_factory, responder_payload))

    out = await generate_strong_password(client, PasswordInput(description="email"))

    assert out.generated_password == PASSWORD_FALLBACK


# --- Test paper ---


@pytest.mark.unit
def test_test_paper_input_validation():
    with pytest.raises(pydantic.ValidationError):
        TestPaperInput(chapter_name="", class_name="Grade 5")
    with pytest.raises(pydantic.ValidationError):
        TestPaperInput(chapter_name="Cells", class_name="Grade 5", number_of_questions=0)


@pytest.mark.unit
def test_test_paper_prompt_optional_sections():
    default = build_test_paper_prompt(TestPaperInput(chapter_name="Cells", class_name="Grade 9"))
    custom = build_test_paper_prompt(
        TestPaperInput(
            chapter_name="Cells",
            class_name="Grade 9",
            number_of_questions=12,
            question_types=["MCQ", "Essay"],
        )
    )

    assert "typically between 10 to 20 questions" in default
    assert "Desired Number of Questions: 12" in custom
    assert "Preferred Question Types: MCQ, Essay" in custom


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_test_paper_success(stub_backend_factory):
    payload = {
        "test_paper_title": "Cells - Unit Test",
        "test_paper_markdown": "1. What is a cell?",
        "solution_key_markdown": "1. The basic unit of life.",
        "suggested_difficulty": "Easy",
        "estimated_time_minutes": 30,
    }
    client = GenerationClient(_json_backend(stub_backend_factory, payload))

    outcome = await generate_test_paper(
        client, TestPaperInput(chapter_name="Cells", class_name="Grade 9")
    )

    assert outcome.ok
    assert outcome.output == TestPaperOutput(**payload)
    assert outcome.error_message is None


@pytest.mark.unit
@pytest.mark.asyncio
async def test_generate_test_paper_failures(stub_backend_factory, raising_responder):
    down = GenerationClient(stub_backend_factory(raising_responder(RuntimeError("503"))))
    garbled = GenerationClient(stub_backend_factory(lambda _p, _o: {"text": "{oops"}))
    data = TestPaperInput(chapter_name="Cells", class_name="Grade 9")

    unavailable = await generate_test_paper(down, data)
    unparseable = await generate_test_paper(garbled, data)

    assert unavailable.output is None
    assert unavailable.error_message == BACKEND_UNAVAILABLE_MESSAGE
    assert unparseable.output is None
    assert unparseable.error_message == UNPARSEABLE_RESPONSE_MESSAGE


# --- Social media ---


@pytest.mark.unit
@pytest.mark.asyncio
async def test_social_media_with_mock_backend(mock_client, mock_backend):
    out = await suggest_social_media_content(
        mock_client,
        SocialMediaInput(platform="Instagram", topic="street food", keywords="chaat, spicy"),
    )

    assert isinstance(out, SocialMediaOutput)
    prompt, _ = mock_backend.calls[0]
    assert "Platform: Instagram" in prompt
    assert "Keywords: chaat, spicy" in prompt


@pytest.mark.unit
@pytest.mark.asyncio
async def test_social_media_fallback(stub_backend_factory, raising_responder):
    client = GenerationClient(stub_backend_factory(raising_responder(RuntimeError("boom"))))

    out = await suggest_social_media_content(
        client, SocialMediaInput(platform="X", topic="t", keywords="k")
    )

    assert out.hashtags == [] and out.trending_topics == []
    assert out.seo_description.startswith("Sorry")


# --- Photo question ---


@pytest.mark.unit
@pytest.mark.asyncio
async def test_photo_question_sends_image_attachment(stub_backend_factory):
    payload = {
        "identified_question": "What is 2+2?",
        "solved_solution": "4",
        "humorous_explanation": "Two cookies plus two cookies.",
    }
    backend = _json_backend(stub_backend_factory, payload)

    outcome = await solve_question_from_image(
        GenerationClient(backend),
        PhotoQuestionInput(image_data_uri=PHOTO, user_instructions="be pirate-like"),
    )

    assert outcome.output == PhotoQuestionOutput(**payload, similar_questions=[])
    prompt, options = backend.calls[0]
    (attachment,) = options["attachments"]
    assert attachment.uri == PHOTO
    assert attachment.mime_type == "image/png"
    assert options["temperature"] == 0.5
    assert '"be pirate-like"' in prompt


@pytest.mark.unit
@pytest.mark.asyncio
async def test_photo_question_failure_is_returned(stub_backend_factory):
    client = GenerationClient(stub_backend_factory(lambda _p, _o: {"text": ""}))

    outcome = await solve_question_from_image(client, PhotoQuestionInput(image_data_uri=PHOTO))

    assert not outcome.ok
    assert outcome.error_message


@pytest.mark.unit
def test_photo_question_requires_data_uri():
    with pytest.raises(pydantic.ValidationError):
        PhotoQuestionInput(image_data_uri="https://example.com/cat.png")
