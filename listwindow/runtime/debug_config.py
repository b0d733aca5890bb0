"""List window debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass


def _flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _text(name: str) -> str | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    value = raw.strip()
    return value or None


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable runtime debug configuration."""

    trace_enabled: bool
    log_level: str
    log_format: str
    log_file: str | None


def resolve_log_level_name(default: str = "INFO") -> str:
    """Resolve log level with package-prefixed override."""
    value = os.getenv("LISTWINDOW_LOG_LEVEL")
    if value is None:
        value = os.getenv("LOG_LEVEL", default)
    return value.strip().upper()


def resolve_log_format(default: str = "text") -> str:
    value = (_text("LISTWINDOW_LOG_FORMAT") or default).lower()
    return value if value in {"text", "json"} else default


def load_debug_config() -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    return DebugConfig(
        trace_enabled=_flag("LISTWINDOW_DEBUG_TRACE", False),
        log_level=resolve_log_level_name(),
        log_format=resolve_log_format(),
        log_file=_text("LISTWINDOW_LOG_FILE"),
    )


def enabled_trace() -> bool:
    return load_debug_config().trace_enabled
