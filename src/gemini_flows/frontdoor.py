"""Convenience constructors wiring config, backend, client and runner.

Resolve configuration once, then build the pieces from the frozen result.
The real Gemini backend is imported only when ``use_real_api`` is set, so
the mock path needs no network and no SDK import.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from gemini_flows.backends.mock import MockBackend
from gemini_flows.batch import BatchRunner
from gemini_flows.client.generation import GenerationClient
from gemini_flows.config import FrozenConfig, resolve_config
from gemini_flows.exceptions import ConfigurationError

if TYPE_CHECKING:
    from gemini_flows.backends.base import ModelBackend
    from gemini_flows.telemetry import TelemetryContextProtocol

log = logging.getLogger(__name__)


def create_backend(cfg: FrozenConfig) -> ModelBackend:
    """Build the backend selected by ``cfg.use_real_api``."""
    if not cfg.use_real_api:
        log.debug("Using mock backend (use_real_api=False)")
        return MockBackend()
    if not cfg.api_key:
        raise ConfigurationError("use_real_api=True requires an api_key")

    from gemini_flows.backends.gemini import GoogleGenAIBackend  # defer SDK import

    return GoogleGenAIBackend(
        cfg.api_key, model=cfg.model, image_model=cfg.image_model
    )


def create_client(
    cfg: FrozenConfig | None = None,
    *,
    backend: ModelBackend | None = None,
    telemetry: TelemetryContextProtocol | None = None,
) -> GenerationClient:
    """Build a ``GenerationClient``; resolves config when ``cfg`` is omitted."""
    final_cfg = cfg or resolve_config().to_frozen()
    return GenerationClient(
        backend or create_backend(final_cfg),
        timeout_s=final_cfg.request_timeout_s,
        telemetry=telemetry,
    )


def create_batch_runner(
    cfg: FrozenConfig | None = None,
    *,
    client: GenerationClient | None = None,
    telemetry: TelemetryContextProtocol | None = None,
) -> BatchRunner:
    """Build a ``BatchRunner`` honoring ``cfg.max_concurrency``."""
    final_cfg = cfg or resolve_config().to_frozen()
    return BatchRunner(
        client or create_client(final_cfg, telemetry=telemetry),
        max_concurrency=final_cfg.max_concurrency,
        telemetry=telemetry,
    )
