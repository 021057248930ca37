"""Configuration management for gemini-flows.

Resolve once, freeze, then hand the ``FrozenConfig`` to backends and clients.

- ``FlowSettings``: pydantic-settings schema (``GEMINI_*`` environment)
- ``ResolvedConfig``: merged values with per-field origin
- ``FrozenConfig``: immutable runtime configuration
"""

from .api import resolve_config, resolve_frozen
from .schema import FlowSettings
from .scope import config_override, config_scope, get_ambient_resolved_config
from .types import ConfigOrigin, FrozenConfig, ResolvedConfig, SourceMap

__all__ = [
    "ConfigOrigin",
    "FlowSettings",
    "FrozenConfig",
    "ResolvedConfig",
    "SourceMap",
    "config_override",
    "config_scope",
    "get_ambient_resolved_config",
    "resolve_config",
    "resolve_frozen",
]
