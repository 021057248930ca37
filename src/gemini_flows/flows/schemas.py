"""Input and output models for every flow.

Inputs validate the shape the presentation layer sends; outputs are what it
renders. Structured outputs double as the ``response_schema`` sent to the
model, so their field names are the JSON keys the model is asked for.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, PositiveInt


class _FlowModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


# --- Images ---


class ImageInput(_FlowModel):
    prompt: str


class ImageOutput(_FlowModel):
    image_data_uri: str | None
    error_message: str | None = None


class AnimationStyle(str, Enum):
    CARTOON_CHARACTER_3D = "3d_cartoon_character"
    ANIME_SCENE_2D = "2d_anime_scene"
    AVATAR_PORTRAIT_3D = "3d_avatar_portrait"
    VIRTUAL_STUDIO_BACKGROUND = "virtual_studio_background"
    GENERAL_ANIMATION_SCENE = "general_animation_scene"
    ANIMATED_STORYBOARD_FRAME = "animated_storyboard_frame"


class AnimationConceptInput(_FlowModel):
    prompt: str
    animation_style: AnimationStyle
    channel_name: str | None = None


class MediaStatus(str, Enum):
    SUCCESS = "success"
    UNSUPPORTED_TYPE = "unsupported_type"
    ERROR_EMPTY_PROMPT = "error_empty_prompt"
    ERROR_NO_URL = "error_no_url"
    ERROR_EXCEPTION = "error_exception"


class MediaInput(_FlowModel):
    prompt: str
    media_type: str = "image"


class MediaOutput(_FlowModel):
    """``media_url`` holds the data URI on success, otherwise a display message."""

    media_url: str | None
    status: MediaStatus


class LogosInput(_FlowModel):
    base_prompt: str


class LogoOption(_FlowModel):
    image_data_uri: str | None
    prompt_used: str
    error_message: str | None = None


class LogosOutput(_FlowModel):
    logos: list[LogoOption]


# --- Chat ---


class SmartChatInput(_FlowModel):
    user_input: str
    chat_history: str = ""


class SmartChatOutput(_FlowModel):
    chatbot_response: str
    updated_chat_history: str


class PersistentMemoryChatInput(_FlowModel):
    user_input: str
    chat_history: str = ""


class PersistentMemoryChatOutput(_FlowModel):
    chatbot_response: str
    updated_chat_history: str


class HumorousChatInput(_FlowModel):
    message: str


class HumorousChatOutput(_FlowModel):
    response: str


# --- Text tools ---


class CodeInput(_FlowModel):
    request: str


class CodeOutput(_FlowModel):
    code: str = Field(description="The generated code snippet.")
    language: str = Field(description="The programming language of the code.")
    is_error_free: bool = Field(
        description="Whether the code is error-free after self-review."
    )


class PasswordInput(_FlowModel):
    description: str
    desired_length: int | None = None


class PasswordOutput(_FlowModel):
    generated_password: str = Field(description="The generated strong password.")
    strength_notes: str = Field(
        description="Why the password is strong, optionally with a usage tip."
    )


class TestPaperInput(_FlowModel):
    __test__ = False

    chapter_name: str = Field(min_length=1)
    class_name: str = Field(min_length=1)
    number_of_questions: PositiveInt | None = None
    question_types: list[str] | None = None


class TestPaperOutput(_FlowModel):
    __test__ = False

    test_paper_title: str
    test_paper_markdown: str
    solution_key_markdown: str
    suggested_difficulty: str
    estimated_time_minutes: int = Field(ge=0)


class SocialMediaInput(_FlowModel):
    platform: str
    topic: str
    keywords: str


class SocialMediaOutput(_FlowModel):
    trending_topics: list[str]
    tags: list[str]
    hashtags: list[str]
    video_titles: list[str]
    seo_description: str
    thumbnail_prompt: str


class PhotoQuestionInput(_FlowModel):
    image_data_uri: str = Field(pattern=r"^data:[^,]*;base64,")
    user_instructions: str | None = None


class PhotoQuestionOutput(_FlowModel):
    identified_question: str
    solved_solution: str
    similar_questions: list[str] = Field(default_factory=list)
    humorous_explanation: str


# --- URL shortener ---


class ShortUrlInput(_FlowModel):
    long_url: HttpUrl


class ShortUrlOutput(_FlowModel):
    short_url_string: str
    disclaimer: str
