"""Async generative-AI flows on top of Google Gemini."""

import importlib.metadata
import logging

from gemini_flows.backends import BackendResponse, MockBackend, ModelBackend
from gemini_flows.batch import BatchRunner
from gemini_flows.client import GenerationClient, classify_backend_error, parse_structured
from gemini_flows.config import FrozenConfig, resolve_config
from gemini_flows.conversation import (
    ConversationAdvance,
    ConversationThreader,
    append_exchange,
    parse_transcript,
    render_transcript,
)
from gemini_flows.core.types import (
    BatchJob,
    ConversationLog,
    ConversationTurn,
    ErrorKind,
    Failure,
    GenerationRequest,
    GenerationResult,
    MediaRef,
    Success,
)
from gemini_flows.exceptions import (
    BackendError,
    ConfigurationError,
    GeminiFlowsError,
    MissingFieldError,
    ValidationError,
)
from gemini_flows.frontdoor import create_backend, create_batch_runner, create_client
from gemini_flows.prompts import TemplateId, build_prompt
from gemini_flows.telemetry import InMemoryReporter, TelemetryContext, TelemetryReporter

try:
    __version__ = importlib.metadata.version("gemini-flows")
except importlib.metadata.PackageNotFoundError:
    __version__ = "development"

# Library code never configures handlers; the application does.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [  # noqa: RUF022
    # Entry points
    "create_backend",
    "create_batch_runner",
    "create_client",
    "resolve_config",
    "FrozenConfig",
    # Core components
    "GenerationClient",
    "BatchRunner",
    "ConversationThreader",
    "ConversationAdvance",
    "append_exchange",
    "parse_transcript",
    "render_transcript",
    "build_prompt",
    "TemplateId",
    "classify_backend_error",
    "parse_structured",
    # Backends
    "BackendResponse",
    "MockBackend",
    "ModelBackend",
    # Types
    "BatchJob",
    "ConversationLog",
    "ConversationTurn",
    "ErrorKind",
    "Failure",
    "GenerationRequest",
    "GenerationResult",
    "MediaRef",
    "Success",
    # Exceptions
    "BackendError",
    "ConfigurationError",
    "GeminiFlowsError",
    "MissingFieldError",
    "ValidationError",
    # Telemetry
    "InMemoryReporter",
    "TelemetryContext",
    "TelemetryReporter",
]
