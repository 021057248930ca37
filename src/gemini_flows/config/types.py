"""Configuration data types, following the resolve-once, freeze-then-flow pattern."""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Literal, NamedTuple

ConfigOrigin = Literal["programmatic", "env", "default"]
SourceMap = Mapping[str, ConfigOrigin]

FIELDS = (
    "api_key",
    "model",
    "image_model",
    "use_real_api",
    "request_timeout_s",
    "max_concurrency",
)


class ResolvedConfig(NamedTuple):
    """Configuration after resolution from all sources, before freezing.

    Carries an ``origin`` map recording where every value came from.
    """

    api_key: str | None
    model: str
    image_model: str
    use_real_api: bool
    request_timeout_s: float | None
    max_concurrency: int | None

    origin: SourceMap

    def __str__(self) -> str:
        """String representation with redacted API key for safe logging."""
        api_key_display = "[REDACTED]" if self.api_key else None
        return (
            f"ResolvedConfig(api_key={api_key_display!r}, model={self.model!r}, "
            f"image_model={self.image_model!r}, use_real_api={self.use_real_api!r}, "
            f"request_timeout_s={self.request_timeout_s!r}, "
            f"max_concurrency={self.max_concurrency!r}, "
            f"origin={dict(self.origin)!r})"
        )

    def __repr__(self) -> str:
        """Repr with redacted API key for safe debugging."""
        return self.__str__()

    def to_frozen(self) -> "FrozenConfig":
        """Drop audit metadata and return the immutable runtime config."""
        return FrozenConfig(**{name: getattr(self, name) for name in FIELDS})

    def with_overrides(self, **overrides: object) -> "ResolvedConfig":
        """Return a copy with known fields replaced and marked programmatic."""
        known = {k: v for k, v in overrides.items() if k in FIELDS}
        origin = dict(self.origin)
        origin.update(dict.fromkeys(known, "programmatic"))
        return self._replace(**known, origin=origin)

    def redacted(self) -> dict[str, object]:
        """Field values with the API key masked, for display."""
        values: dict[str, object] = {name: getattr(self, name) for name in FIELDS}
        if values["api_key"]:
            values["api_key"] = "[REDACTED]"
        return values


@dataclass(frozen=True, slots=True)
class FrozenConfig:
    """Immutable configuration handed to backends and clients."""

    api_key: str | None
    model: str
    image_model: str
    use_real_api: bool
    request_timeout_s: float | None = None
    max_concurrency: int | None = None

    def __repr__(self) -> str:
        api_key_display = "[REDACTED]" if self.api_key else None
        return (
            f"FrozenConfig(api_key={api_key_display!r}, model={self.model!r}, "
            f"image_model={self.image_model!r}, use_real_api={self.use_real_api!r}, "
            f"request_timeout_s={self.request_timeout_s!r}, "
            f"max_concurrency={self.max_concurrency!r})"
        )
