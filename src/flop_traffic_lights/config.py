"""Application configuration helpers.

Environment-driven overrides for the HTTP entry point and the presentation
surfaces. This module intentionally avoids third-party dependencies so it can
be imported before the main dependency graph is installed.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from flop_traffic_lights.data.bundles import DEFAULT_MAX_EXAMPLES

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Resolved runtime settings."""

    host: str
    port: int
    max_examples: int
    log_level: str


def _positive_int(value: Optional[str], default: int) -> int:
    if not value:
        return default
    try:
        parsed = int(value)
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def resolve_max_examples() -> int:
    """Return how many examples per entry to display.

    Overridden with `FLOP_LIGHTS_MAX_EXAMPLES`; invalid or non-positive values
    fall back to the default of six.
    """

    return _positive_int(os.getenv("FLOP_LIGHTS_MAX_EXAMPLES"), DEFAULT_MAX_EXAMPLES)


def resolve_log_level() -> str:
    return (os.getenv("FLOP_LIGHTS_LOG_LEVEL") or DEFAULT_LOG_LEVEL).upper()


def build_settings() -> Settings:
    """Construct a `Settings` instance using resolution helpers."""

    return Settings(
        host=os.getenv("FLOP_LIGHTS_HOST") or DEFAULT_HOST,
        port=_positive_int(os.getenv("FLOP_LIGHTS_PORT"), DEFAULT_PORT),
        max_examples=resolve_max_examples(),
        log_level=resolve_log_level(),
    )


__all__ = [
    "DEFAULT_HOST",
    "DEFAULT_LOG_LEVEL",
    "DEFAULT_PORT",
    "Settings",
    "build_settings",
    "resolve_log_level",
    "resolve_max_examples",
]
