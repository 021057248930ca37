"""Configuration schema and validation using Pydantic.

This module defines the settings schema that validates and coerces configuration
values from the environment and programmatic overrides into the correct types
with proper defaults.
"""

from typing import Any

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gemini_flows.constants import DEFAULT_IMAGE_MODEL, DEFAULT_TEXT_MODEL


class FlowSettings(BaseSettings):
    """Pydantic settings schema for gemini-flows.

    Reads ``GEMINI_*`` environment variables (``GEMINI_API_KEY``,
    ``GEMINI_MODEL``, ``GEMINI_IMAGE_MODEL``, ``GEMINI_USE_REAL_API``,
    ``GEMINI_REQUEST_TIMEOUT_S``, ``GEMINI_MAX_CONCURRENCY``).
    """

    model_config = SettingsConfigDict(
        env_prefix="GEMINI_",
        env_file=None,
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str | None = Field(
        default=None,
        description="Google Gemini API key",
    )

    model: str = Field(
        default=DEFAULT_TEXT_MODEL,
        description="Model used for text and structured flows",
        min_length=1,
    )

    image_model: str = Field(
        default=DEFAULT_IMAGE_MODEL,
        description="Model used when an image response is requested",
        min_length=1,
    )

    use_real_api: bool = Field(
        default=False,
        description="Call the real Gemini API instead of the offline mock",
    )

    request_timeout_s: float | None = Field(
        default=None,
        description="Per-call timeout in seconds; None waits indefinitely",
        gt=0,
    )

    max_concurrency: int | None = Field(
        default=None,
        description="Upper bound on in-flight calls during batch fan-out",
        ge=1,
    )

    @model_validator(mode="after")
    def validate_api_key_requirement(self) -> "FlowSettings":
        """Ensure api_key is provided when use_real_api is True."""
        if self.use_real_api and not self.api_key:
            raise ValueError(
                "api_key is required when use_real_api=True. "
                "Set GEMINI_API_KEY or pass it programmatically."
            )
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary keyed by field name."""
        return {name: getattr(self, name) for name in type(self).model_fields}
