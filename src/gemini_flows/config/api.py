"""Public API for configuration resolution.

Precedence: Programmatic > Environment (``GEMINI_*``, optionally seeded from
a ``.env`` file) > Defaults.
"""

import logging
import os
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from pydantic import ValidationError as PydanticValidationError

from gemini_flows.exceptions import ConfigurationError

from .schema import FlowSettings
from .scope import get_ambient_resolved_config
from .types import FIELDS, ConfigOrigin, FrozenConfig, ResolvedConfig

log = logging.getLogger(__name__)

ENV_PREFIX = "GEMINI_"


def _env_var(field: str) -> str:
    return f"{ENV_PREFIX}{field.upper()}"


def resolve_config(
    programmatic: dict[str, Any] | None = None,
    *,
    use_env_file: str | Path | None = None,
) -> ResolvedConfig:
    """Resolve configuration from all sources with proper precedence.

    Inside a ``config_scope`` the ambient config is the base and only the
    programmatic overrides are applied on top of it.

    Args:
        programmatic: Overrides with the highest precedence. Unknown keys are
            ignored.
        use_env_file: Optional ``.env`` file loaded before reading the
            environment. Variables already set in the process win.

    Returns:
        ResolvedConfig with merged values and per-field origin.

    Raises:
        ConfigurationError: If the env file is missing or the merged values
            fail validation.
    """
    ambient = get_ambient_resolved_config()
    if ambient is not None:
        if not programmatic:
            return ambient
        scoped = ambient.with_overrides(**programmatic)
        return _validated(
            {f: getattr(scoped, f) for f in FIELDS}, dict(scoped.origin)
        )

    if use_env_file is not None:
        env_path = Path(use_env_file)
        if not env_path.exists():
            raise ConfigurationError(f"Environment file not found: {env_path}")
        load_dotenv(env_path, override=False)

    merged: dict[str, Any] = {}
    origin: dict[str, ConfigOrigin] = {}

    defaults = FlowSettings.model_construct().to_dict()
    for field in FIELDS:
        merged[field] = defaults[field]
        origin[field] = "default"

    for field in FIELDS:
        raw = os.environ.get(_env_var(field))
        if raw is not None and raw != "":
            merged[field] = raw
            origin[field] = "env"

    for field, value in (programmatic or {}).items():
        if field in merged:
            merged[field] = value
            origin[field] = "programmatic"

    return _validated(merged, origin)


def _validated(merged: dict[str, Any], origin: dict[str, ConfigOrigin]) -> ResolvedConfig:
    try:
        settings = FlowSettings(**merged)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e

    values = settings.to_dict()
    resolved = ResolvedConfig(**{f: values[f] for f in FIELDS}, origin=origin)
    log.debug("Resolved configuration: %s", resolved)
    return resolved


def resolve_frozen(programmatic: dict[str, Any] | None = None) -> FrozenConfig:
    """Shorthand for ``resolve_config(programmatic).to_frozen()``."""
    return resolve_config(programmatic).to_frozen()
