"""Best-effort triage of backend errors into user-facing failures.

This is a heuristic over the provider's error text (and HTTP-style ``code``
attribute when present). Providers change their wording; anything not
recognized falls through to ``ErrorKind.UNKNOWN``. Keep all string matching
here so callers only ever see an ``ErrorKind`` and a fixed message.
"""

from __future__ import annotations

import asyncio

from gemini_flows.constants import (
    BACKEND_UNAVAILABLE_MESSAGE,
    MODALITY_UNSUPPORTED_MESSAGE,
    SAFETY_BLOCKED_MESSAGE,
    UNKNOWN_FAILURE_MESSAGE,
)
from gemini_flows.core.types import ErrorKind

_UNAVAILABLE_CODES = frozenset({429, 500, 503})
_UNAVAILABLE_TERMS = (
    "timeout",
    "timed out",
    "unavailable",
    "overloaded",
    "503",
    "429",
    "rate limit",
    "resource exhausted",
    "resource_exhausted",
)
_SAFETY_TERMS = ("safety", "blocked")
_MODALITY_TERMS = ("response modalities", "modality")

_MESSAGES: dict[ErrorKind, str] = {
    ErrorKind.BACKEND_UNAVAILABLE: BACKEND_UNAVAILABLE_MESSAGE,
    ErrorKind.SAFETY_BLOCKED: SAFETY_BLOCKED_MESSAGE,
    ErrorKind.MODALITY_UNSUPPORTED: MODALITY_UNSUPPORTED_MESSAGE,
    ErrorKind.UNKNOWN: UNKNOWN_FAILURE_MESSAGE,
}


def message_for(kind: ErrorKind) -> str:
    """Fixed display message for a backend failure kind."""
    return _MESSAGES.get(kind, UNKNOWN_FAILURE_MESSAGE)


def classify_backend_error(error: BaseException) -> tuple[ErrorKind, str]:
    """Map a raised backend error to ``(ErrorKind, display message)``.

    Rules are checked in order: availability, safety, modality, unknown.
    """
    kind = _classify(error)
    return kind, message_for(kind)


def _classify(error: BaseException) -> ErrorKind:
    if isinstance(error, TimeoutError | asyncio.TimeoutError):
        return ErrorKind.BACKEND_UNAVAILABLE

    code = getattr(error, "code", None)
    if isinstance(code, int) and code in _UNAVAILABLE_CODES:
        return ErrorKind.BACKEND_UNAVAILABLE

    text = str(error).lower()
    if any(term in text for term in _UNAVAILABLE_TERMS):
        return ErrorKind.BACKEND_UNAVAILABLE
    if any(term in text for term in _SAFETY_TERMS):
        return ErrorKind.SAFETY_BLOCKED
    if any(term in text for term in _MODALITY_TERMS):
        return ErrorKind.MODALITY_UNSUPPORTED
    return ErrorKind.UNKNOWN
