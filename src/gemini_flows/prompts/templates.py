"""Prompt construction from registered templates.

``build_prompt`` is pure: the same template and fields always produce the same
string. A required field that is absent (or None) raises
``MissingFieldError`` naming it; optional fields render as empty strings.
"""

from __future__ import annotations

from collections.abc import Mapping
import dataclasses
from enum import Enum
from string import Formatter

from gemini_flows.exceptions import MissingFieldError

from . import personas


class TemplateId(str, Enum):
    """Identifiers of the registered prompt templates."""

    SMART_CHAT = "smart_chat"
    PERSISTENT_MEMORY_CHAT = "persistent_memory_chat"
    HUMOROUS_CHAT = "humorous_chat"
    IMAGE = "image"
    ANIMATION_CONCEPT = "animation_concept"
    LOGO_VARIANT = "logo_variant"
    CODE = "code"
    PASSWORD = "password"
    TEST_PAPER = "test_paper"
    SOCIAL_MEDIA = "social_media"
    PHOTO_QUESTION = "photo_question"


def _placeholders(body: str) -> frozenset[str]:
    return frozenset(
        name for _, name, _, _ in Formatter().parse(body) if name is not None
    )


@dataclasses.dataclass(frozen=True, slots=True)
class PromptTemplate:
    """A prompt body plus the fields it needs."""

    template_id: TemplateId
    body: str
    required: tuple[str, ...]
    optional: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        """Every placeholder must be declared, and only once."""
        declared = set(self.required) | set(self.optional)
        undeclared = _placeholders(self.body) - declared
        if undeclared:
            raise ValueError(
                f"Template '{self.template_id.value}' uses undeclared fields: "
                f"{sorted(undeclared)}"
            )
        overlap = set(self.required) & set(self.optional)
        if overlap:
            raise ValueError(
                f"Template '{self.template_id.value}' declares {sorted(overlap)} "
                "as both required and optional"
            )

    def render(self, fields: Mapping[str, object]) -> str:
        values: dict[str, object] = {}
        for name in self.required:
            value = fields.get(name)
            if value is None:
                raise MissingFieldError(name, self.template_id.value)
            values[name] = value
        for name in self.optional:
            value = fields.get(name)
            values[name] = "" if value is None else value
        return self.body.format(**values)


_REGISTRY: dict[TemplateId, PromptTemplate] = {
    t.template_id: t
    for t in (
        PromptTemplate(
            TemplateId.SMART_CHAT,
            personas.SMART_CHAT,
            required=("transcript", "user_input"),
        ),
        PromptTemplate(
            TemplateId.PERSISTENT_MEMORY_CHAT,
            personas.PERSISTENT_MEMORY_CHAT,
            required=("transcript", "user_input"),
        ),
        PromptTemplate(
            TemplateId.HUMOROUS_CHAT,
            personas.HUMOROUS_CHAT,
            required=("message",),
        ),
        PromptTemplate(TemplateId.IMAGE, personas.IMAGE, required=("prompt",)),
        PromptTemplate(
            TemplateId.ANIMATION_CONCEPT,
            personas.ANIMATION_CONCEPT,
            required=("style_guidance", "prompt"),
            optional=("channel_clause",),
        ),
        PromptTemplate(
            TemplateId.LOGO_VARIANT,
            personas.LOGO_VARIANT,
            required=("style_prefix", "base_prompt"),
        ),
        PromptTemplate(TemplateId.CODE, personas.CODE, required=("request",)),
        PromptTemplate(
            TemplateId.PASSWORD,
            personas.PASSWORD,
            required=("description", "length_instruction", "max_length"),
        ),
        PromptTemplate(
            TemplateId.TEST_PAPER,
            personas.TEST_PAPER,
            required=("chapter_name", "class_name"),
            optional=("question_count_instruction", "question_types_instruction"),
        ),
        PromptTemplate(
            TemplateId.SOCIAL_MEDIA,
            personas.SOCIAL_MEDIA,
            required=("platform", "topic", "keywords"),
        ),
        PromptTemplate(
            TemplateId.PHOTO_QUESTION,
            personas.PHOTO_QUESTION,
            required=("tone_instruction",),
        ),
    )
}


def get_template(template: TemplateId) -> PromptTemplate:
    """Look up a registered template; raises KeyError for unknown ids."""
    try:
        return _REGISTRY[TemplateId(template)]
    except ValueError:
        raise KeyError(template) from None


def build_prompt(template: TemplateId, fields: Mapping[str, object]) -> str:
    """Render ``template`` with ``fields``.

    Raises:
        MissingFieldError: A required field is absent or None.
    """
    return get_template(template).render(fields)
