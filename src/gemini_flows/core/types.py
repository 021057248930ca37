"""Core data types that flow between the flows, the client and the backend.

Every value here is created per request and discarded once the response is
handed to the caller. The dataclasses are frozen so a result can be shared
with the presentation layer without defensive copies.
"""

from __future__ import annotations

import base64
import dataclasses
from enum import Enum
import typing

from ._validation import _freeze_mapping, _is_tuple_of, _require

# --- Failure taxonomy ---


class ErrorKind(str, Enum):
    """Reasons a generation can fail; values are stable and user-facing."""

    EMPTY_PROMPT = "EmptyPrompt"
    MISSING_FIELD = "MissingField"
    NO_PAYLOAD = "NoPayload"
    SAFETY_BLOCKED = "SafetyBlocked"
    MODALITY_UNSUPPORTED = "ModalityUnsupported"
    BACKEND_UNAVAILABLE = "BackendUnavailable"
    UNKNOWN = "Unknown"


# --- Payloads ---


@dataclasses.dataclass(frozen=True, slots=True)
class MediaRef:
    """Opaque reference to generated (or supplied) non-text content.

    ``uri`` is either a remote URI or an inline ``data:`` URI carrying a
    base64 payload.
    """

    uri: str
    mime_type: str | None = None

    def __post_init__(self) -> None:
        """Validate MediaRef invariants."""
        _require(
            condition=isinstance(self.uri, str) and self.uri.strip() != "",
            message="must be a non-empty str",
            field_name="uri",
            exc=TypeError,
        )
        _require(
            condition=self.mime_type is None or isinstance(self.mime_type, str),
            message="must be a str or None",
            field_name="mime_type",
            exc=TypeError,
        )
        if self.mime_type is None and self.is_inline:
            object.__setattr__(self, "mime_type", _mime_from_data_uri(self.uri))

    @property
    def is_inline(self) -> bool:
        """True when the content is embedded as a ``data:`` URI."""
        return self.uri.startswith("data:")

    def inline_bytes(self) -> bytes:
        """Decode the base64 payload of an inline reference."""
        _require(
            condition=self.is_inline and ";base64," in self.uri,
            message="is not a base64 data URI",
            field_name="uri",
        )
        return base64.b64decode(self.uri.split(";base64,", 1)[1])

    @classmethod
    def from_inline(cls, data: bytes, mime_type: str) -> MediaRef:
        """Build a data-URI reference from raw bytes."""
        encoded = base64.b64encode(data).decode("ascii")
        return cls(uri=f"data:{mime_type};base64,{encoded}", mime_type=mime_type)


def _mime_from_data_uri(uri: str) -> str | None:
    header = uri[len("data:") :].split(",", 1)[0]
    mime = header.split(";", 1)[0]
    return mime or None


# --- Requests and results ---


@dataclasses.dataclass(frozen=True, slots=True)
class GenerationRequest:
    """A single call to the model: prompt text plus backend parameters.

    ``attachments`` carries media that accompanies the prompt (for example a
    photo the model is asked about).
    """

    prompt: str
    parameters: typing.Mapping[str, typing.Any] = dataclasses.field(
        default_factory=dict
    )
    attachments: tuple[MediaRef, ...] = ()

    def __post_init__(self) -> None:
        """Validate and freeze request components."""
        _require(
            condition=isinstance(self.prompt, str),
            message="must be str",
            field_name="prompt",
            exc=TypeError,
        )
        _require(
            condition=_is_tuple_of(self.attachments, MediaRef),
            message="must be a tuple[MediaRef, ...]",
            field_name="attachments",
            exc=TypeError,
        )
        frozen = _freeze_mapping(self.parameters)
        if frozen is not None:
            object.__setattr__(self, "parameters", frozen)

    @property
    def expects_media(self) -> bool:
        """True when the request asks the model for an image."""
        modalities = self.parameters.get("response_modalities") or ()
        return any(str(m).upper() == "IMAGE" for m in modalities)


@dataclasses.dataclass(frozen=True, slots=True)
class Success:
    """A generation that produced a usable payload."""

    payload: MediaRef | str

    @property
    def kind(self) -> typing.Literal["success"]:
        return "success"


@dataclasses.dataclass(frozen=True, slots=True)
class Failure:
    """A generation that did not produce a payload, with a displayable reason."""

    reason: ErrorKind
    message: str

    def __post_init__(self) -> None:
        """Validate Failure invariants."""
        _require(
            condition=isinstance(self.reason, ErrorKind),
            message="must be an ErrorKind",
            field_name="reason",
            exc=TypeError,
        )
        _require(
            condition=isinstance(self.message, str) and self.message.strip() != "",
            message="must be a non-empty str",
            field_name="message",
        )

    @property
    def kind(self) -> typing.Literal["failure"]:
        return "failure"


type GenerationResult = Success | Failure


# --- Conversation ---

Speaker = typing.Literal["user", "agent"]


@dataclasses.dataclass(frozen=True, slots=True)
class ConversationTurn:
    """A single turn in a conversation history."""

    speaker: Speaker
    text: str

    def __post_init__(self) -> None:
        """Validate invariants for type safety."""
        _require(
            condition=self.speaker in ("user", "agent"),
            message=f"must be 'user' or 'agent', got {self.speaker!r}",
            field_name="speaker",
        )
        _require(
            condition=isinstance(self.text, str),
            message="must be str",
            field_name="text",
            exc=TypeError,
        )


# Append-only; consecutive turns from the same speaker are allowed.
type ConversationLog = tuple[ConversationTurn, ...]


# --- Batch ---


@dataclasses.dataclass(frozen=True, slots=True)
class BatchJob:
    """Ordered variant prompts; results come back index-aligned."""

    variant_prompts: tuple[str, ...]

    def __post_init__(self) -> None:
        """Validate BatchJob invariants."""
        _require(
            condition=_is_tuple_of(self.variant_prompts, str),
            message="must be a tuple[str, ...]",
            field_name="variant_prompts",
            exc=TypeError,
        )

    def __len__(self) -> int:
        return len(self.variant_prompts)
