"""Unit tests for configuration resolution.

- Precedence: programmatic > environment > defaults, with per-field origin
- ``.env`` loading through python-dotenv
- Ambient scopes via ``config_scope`` / ``config_override``
"""

import os
from unittest.mock import patch

import pytest

from gemini_flows.config import (
    FlowSettings,
    FrozenConfig,
    config_override,
    config_scope,
    get_ambient_resolved_config,
    resolve_config,
    resolve_frozen,
)
from gemini_flows.exceptions import ConfigurationError


class TestConfigurationResolution:
    """Resolution logic and source tracking."""

    @pytest.mark.unit
    def test_defaults_when_nothing_is_set(self):
        resolved = resolve_config()

        assert resolved.api_key is None
        assert resolved.model == "gemini-2.0-flash"
        assert resolved.image_model == "gemini-2.0-flash-exp"
        assert resolved.use_real_api is False
        assert resolved.request_timeout_s is None
        assert resolved.max_concurrency is None
        assert set(resolved.origin.values()) == {"default"}

    @pytest.mark.unit
    def test_environment_overrides_defaults(self):
        """Environment values are coerced to the schema types."""
        with patch.dict(
            os.environ,
            {
                "GEMINI_API_KEY": "env-key",
                "GEMINI_MODEL": "env-model",
                "GEMINI_USE_REAL_API": "true",
                "GEMINI_MAX_CONCURRENCY": "3",
                "GEMINI_REQUEST_TIMEOUT_S": "2.5",
            },
        ):
            resolved = resolve_config()

        assert resolved.model == "env-model"
        assert resolved.use_real_api is True
        assert resolved.max_concurrency == 3
        assert resolved.request_timeout_s == 2.5
        assert resolved.origin["model"] == "env"
        assert resolved.origin["image_model"] == "default"

    @pytest.mark.unit
    def test_programmatic_overrides_environment(self):
        with patch.dict(os.environ, {"GEMINI_MODEL": "env-model"}):
            resolved = resolve_config({"model": "explicit-model", "unknown": 1})

        assert resolved.model == "explicit-model"
        assert resolved.origin["model"] == "programmatic"
        assert "unknown" not in resolved.origin

    @pytest.mark.unit
    def test_real_api_requires_key(self):
        with pytest.raises(ConfigurationError, match="api_key is required"):
            resolve_config({"use_real_api": True})

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "overrides",
        [{"max_concurrency": 0}, {"request_timeout_s": 0}, {"request_timeout_s": -1}],
    )
    def test_invalid_values_raise_configuration_error(self, overrides):
        with pytest.raises(ConfigurationError):
            resolve_config(overrides)

    @pytest.mark.unit
    def test_to_frozen_drops_origin(self):
        frozen = resolve_config({"max_concurrency": 4}).to_frozen()

        assert isinstance(frozen, FrozenConfig)
        assert frozen.max_concurrency == 4
        assert not hasattr(frozen, "origin")
        assert resolve_frozen({"max_concurrency": 4}) == frozen

    @pytest.mark.unit
    def test_defaults_match_schema(self):
        settings = FlowSettings.model_construct()
        assert resolve_config().model == settings.model


class TestEnvFile:
    """``.env`` handling."""

    @pytest.mark.unit
    def test_missing_env_file_raises(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            resolve_config(use_env_file=tmp_path / "missing.env")

    @pytest.mark.unit
    @pytest.mark.allow_dotenv
    def test_env_file_values_are_loaded(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_IMAGE_MODEL=from-dotenv\n", encoding="utf-8")

        # load_dotenv writes into os.environ; patch.dict restores it afterwards
        with patch.dict(os.environ, {}):
            resolved = resolve_config(use_env_file=env_file)

        assert resolved.image_model == "from-dotenv"
        assert resolved.origin["image_model"] == "env"

    @pytest.mark.unit
    @pytest.mark.allow_dotenv
    def test_process_environment_wins_over_env_file(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("GEMINI_MODEL=from-dotenv\n", encoding="utf-8")
        monkeypatch.setenv("GEMINI_MODEL", "from-process")

        assert resolve_config(use_env_file=env_file).model == "from-process"


class TestConfigScope:
    """Ambient scoping."""

    @pytest.mark.unit
    def test_scope_sets_and_restores(self):
        base = resolve_config()
        scoped = base.with_overrides(model="scoped-model")

        with config_scope(scoped):
            assert get_ambient_resolved_config() is scoped
            assert resolve_config().model == "scoped-model"

        assert get_ambient_resolved_config() is None
        assert resolve_config().model == "gemini-2.0-flash"

    @pytest.mark.unit
    def test_override_layers_on_scope(self):
        with config_override(max_concurrency=2):
            resolved = resolve_config({"model": "inner"})

        assert resolved.max_concurrency == 2
        assert resolved.model == "inner"
        assert resolved.origin["max_concurrency"] == "programmatic"

    @pytest.mark.unit
    @pytest.mark.parametrize(
        "overrides",
        [{"max_concurrency": 0}, {"request_timeout_s": "abc"}, {"use_real_api": True}],
    )
    def test_scoped_overrides_are_validated(self, overrides):
        with config_scope(resolve_config()):
            with pytest.raises(ConfigurationError):
                resolve_config(overrides)

    @pytest.mark.unit
    def test_scoped_overrides_are_coerced(self):
        with config_scope(resolve_config()):
            resolved = resolve_config({"request_timeout_s": "2.5"})

        assert resolved.request_timeout_s == 2.5
        assert resolved.origin["request_timeout_s"] == "programmatic"
        assert resolved.origin["model"] == "default"

    @pytest.mark.unit
    def test_invalid_config_override_raises_on_entry(self):
        with pytest.raises(ConfigurationError):
            with config_override(max_concurrency=0):
                pass
