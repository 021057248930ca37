"""
Global test configuration: environment isolation and stub backends.
"""

import asyncio
from collections.abc import Callable, Mapping
from contextlib import suppress
import os
from typing import Any

import pytest

from gemini_flows.backends.mock import MockBackend
from gemini_flows.client.generation import GenerationClient


def pytest_configure(config):
    for marker in (
        "unit: fast, isolated tests",
        "contract: behavioral guarantees of a public component",
        "security: secrets handling",
        "allow_dotenv: permit python-dotenv to read .env files",
        "allow_env_pollution: keep the caller's GEMINI_* environment",
    ):
        config.addinivalue_line("markers", marker)


# --- Environment Isolation (Autouse) ---
@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-in escape hatch: mark a test with @pytest.mark.allow_dotenv.
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "gemini_flows.config.api.load_dotenv",
            lambda *_args, **_kwargs: False,
        )


@pytest.fixture(autouse=True)
def isolate_gemini_env(request, monkeypatch):
    """Ensure a clean GEMINI_* environment (and no DEBUG) for each test."""
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("GEMINI_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.delenv("DEBUG", raising=False)


# --- Stub backends ---


class StubBackend:
    """Backend with scripted behavior.

    ``responder`` maps ``(prompt, options)`` to a response dict, or raises.
    Tracks the number of calls and the peak number of concurrent calls.
    """

    def __init__(
        self,
        responder: Callable[[str, Mapping[str, Any]], Any] | None = None,
        *,
        delay: float | Callable[[str], float] = 0.0,
    ):
        self.responder = responder or (lambda prompt, _opts: {"text": f"reply to {prompt}"})
        self.delay = delay
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.in_flight = 0
        self.max_in_flight = 0

    @property
    def call_count(self) -> int:
        return len(self.calls)

    async def invoke_model(self, prompt: str, options: Mapping[str, Any]) -> Any:
        self.calls.append((prompt, dict(options)))
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            delay = self.delay(prompt) if callable(self.delay) else self.delay
            if delay:
                await asyncio.sleep(delay)
            else:
                await asyncio.sleep(0)
            return self.responder(prompt, options)
        finally:
            self.in_flight -= 1


def raising(error: BaseException) -> Callable[[str, Mapping[str, Any]], Any]:
    def _raise(_prompt, _options):
        raise error

    return _raise


@pytest.fixture
def stub_backend_factory() -> Callable[..., StubBackend]:
    return StubBackend


@pytest.fixture
def raising_responder() -> Callable[[BaseException], Any]:
    return raising


@pytest.fixture
def mock_backend() -> MockBackend:
    return MockBackend()


@pytest.fixture
def mock_client(mock_backend) -> GenerationClient:
    return GenerationClient(mock_backend)
