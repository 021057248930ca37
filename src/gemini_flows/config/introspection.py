"""Configuration introspection helpers and the ``python -m`` entry point."""

import json
import sys

from gemini_flows.exceptions import ConfigurationError

from .api import resolve_config
from .types import ResolvedConfig

# ruff: noqa: T201


def config_warnings(resolved: ResolvedConfig) -> list[str]:
    """Non-fatal observations about a resolved configuration."""
    warnings: list[str] = []
    if resolved.api_key and not resolved.use_real_api:
        warnings.append("api_key is set but use_real_api is False; the mock backend is used")
    if resolved.use_real_api and resolved.request_timeout_s is None:
        warnings.append("no request_timeout_s set; calls to the real API may wait indefinitely")
    return warnings


def print_effective_config(resolved: ResolvedConfig) -> None:
    """Print redacted values, their origins and any warnings."""
    print("=== Effective Configuration ===")
    for field, value in resolved.redacted().items():
        print(f"  {field}: {value}  ({resolved.origin.get(field, 'default')})")
    warnings = config_warnings(resolved)
    if warnings:
        print("\nWarnings:")
        for warning in warnings:
            print(f"  - {warning}")


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for configuration introspection."""
    import argparse

    parser = argparse.ArgumentParser(
        prog="python -m gemini_flows.config",
        description="Show the effective gemini-flows configuration.",
    )
    parser.add_argument("--json", action="store_true", help="emit JSON")
    parser.add_argument(
        "--check", action="store_true", help="only validate; exit 1 when invalid"
    )
    parser.add_argument("--env-file", default=None, help="load a .env file first")
    args = parser.parse_args(argv)

    try:
        resolved = resolve_config(use_env_file=args.env_file)
    except ConfigurationError as e:
        print(f"Configuration Error: {e}", file=sys.stderr)
        sys.exit(1)

    if args.check:
        print("Configuration is valid")
        sys.exit(0)

    if args.json:
        payload = {
            "config": resolved.redacted(),
            "origin": dict(resolved.origin),
            "warnings": config_warnings(resolved),
        }
        print(json.dumps(payload, indent=2))
        return

    print_effective_config(resolved)
