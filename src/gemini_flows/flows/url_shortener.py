"""Simulated URL shortener; no model call and no redirect service."""

from __future__ import annotations

import secrets

from gemini_flows.constants import (
    SHORT_URL_ALPHABET,
    SHORT_URL_BASE,
    SHORT_URL_DISCLAIMER,
    SHORT_URL_PATH_LENGTH,
)

from .schemas import ShortUrlInput, ShortUrlOutput


def random_path(length: int = SHORT_URL_PATH_LENGTH) -> str:
    return "".join(secrets.choice(SHORT_URL_ALPHABET) for _ in range(length))


async def generate_short_url(data: ShortUrlInput) -> ShortUrlOutput:
    """Return a random, non-resolving short URL for ``data.long_url``.

    Async only to match the other flows' calling convention.
    """
    return ShortUrlOutput(
        short_url_string=f"{SHORT_URL_BASE}{random_path()}",
        disclaimer=SHORT_URL_DISCLAIMER,
    )
