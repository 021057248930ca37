"""Ambient configuration scoping for entry-time overrides.

A scope only affects ``resolve_config()`` calls made inside it. Clients that
were already built keep the ``FrozenConfig`` they were given.
"""

from collections.abc import Generator
from contextlib import contextmanager
import contextvars
from typing import Any

from .types import ResolvedConfig

_ambient_resolved_config: contextvars.ContextVar[ResolvedConfig] = (
    contextvars.ContextVar("gemini_flows_resolved_config")
)


def get_ambient_resolved_config() -> ResolvedConfig | None:
    """Return the config set by an enclosing scope, or None."""
    try:
        return _ambient_resolved_config.get()
    except LookupError:
        return None


@contextmanager
def config_scope(config: ResolvedConfig) -> Generator[None]:
    """Temporarily use a different resolved configuration.

    Example:
        base = resolve_config()
        with config_scope(base.with_overrides(max_concurrency=2)):
            client = create_client()
    """
    token = _ambient_resolved_config.set(config)
    try:
        yield
    finally:
        _ambient_resolved_config.reset(token)


@contextmanager
def config_override(**overrides: Any) -> Generator[None]:
    """Scope that applies programmatic overrides on top of the current config."""
    from .api import resolve_config  # deferred to avoid an import cycle

    with config_scope(resolve_config(overrides)):
        yield
