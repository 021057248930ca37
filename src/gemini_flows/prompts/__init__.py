"""Prompt templates and the pure prompt builder."""

from .templates import PromptTemplate, TemplateId, build_prompt, get_template

__all__ = [
    "PromptTemplate",
    "TemplateId",
    "build_prompt",
    "get_template",
]
