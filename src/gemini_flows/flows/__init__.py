"""Request/response flows the presentation layer calls.

Every flow takes a ``GenerationClient`` (the logo flow a ``BatchRunner``)
plus a pydantic input model and returns a pydantic output model. Flows do
not raise on model failures; they return their documented fallback.
"""

from ._common import StructuredOutcome
from .chat import humorous_chat, persistent_memory_chat, smart_chat
from .code import generate_code
from .image import generate_animation_concept, generate_image, generate_media
from .logos import generate_logos
from .password import generate_strong_password
from .photo_question import solve_question_from_image
from .schemas import (
    AnimationConceptInput,
    AnimationStyle,
    CodeInput,
    CodeOutput,
    HumorousChatInput,
    HumorousChatOutput,
    ImageInput,
    ImageOutput,
    LogoOption,
    LogosInput,
    LogosOutput,
    MediaInput,
    MediaOutput,
    MediaStatus,
    PasswordInput,
    PasswordOutput,
    PersistentMemoryChatInput,
    PersistentMemoryChatOutput,
    PhotoQuestionInput,
    PhotoQuestionOutput,
    ShortUrlInput,
    ShortUrlOutput,
    SmartChatInput,
    SmartChatOutput,
    SocialMediaInput,
    SocialMediaOutput,
    TestPaperInput,
    TestPaperOutput,
)
from .social_media import suggest_social_media_content
from .question_paper import generate_test_paper
from .url_shortener import generate_short_url

__all__ = [  # noqa: RUF022
    # Flows
    "generate_animation_concept",
    "generate_code",
    "generate_image",
    "generate_logos",
    "generate_media",
    "generate_short_url",
    "generate_strong_password",
    "generate_test_paper",
    "humorous_chat",
    "persistent_memory_chat",
    "smart_chat",
    "solve_question_from_image",
    "suggest_social_media_content",
    # Models
    "AnimationConceptInput",
    "AnimationStyle",
    "CodeInput",
    "CodeOutput",
    "HumorousChatInput",
    "HumorousChatOutput",
    "ImageInput",
    "ImageOutput",
    "LogoOption",
    "LogosInput",
    "LogosOutput",
    "MediaInput",
    "MediaOutput",
    "MediaStatus",
    "PasswordInput",
    "PasswordOutput",
    "PersistentMemoryChatInput",
    "PersistentMemoryChatOutput",
    "PhotoQuestionInput",
    "PhotoQuestionOutput",
    "ShortUrlInput",
    "ShortUrlOutput",
    "SmartChatInput",
    "SmartChatOutput",
    "SocialMediaInput",
    "SocialMediaOutput",
    "StructuredOutcome",
    "TestPaperInput",
    "TestPaperOutput",
]
