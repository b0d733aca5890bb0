"""JSON codec helpers for diagnostics and structured log output."""

from __future__ import annotations

from typing import Any

import orjson


def dumps_bytes(
    payload: Any,
    *,
    pretty: bool = False,
    sort_keys: bool = False,
) -> bytes:
    """Serialize payload to UTF-8 JSON bytes."""
    options = orjson.OPT_SERIALIZE_NUMPY | orjson.OPT_NON_STR_KEYS
    if pretty:
        options |= orjson.OPT_INDENT_2
    if sort_keys:
        options |= orjson.OPT_SORT_KEYS
    return orjson.dumps(payload, default=_fallback, option=options)


def dumps_text(
    payload: Any,
    *,
    pretty: bool = False,
    sort_keys: bool = False,
) -> str:
    return dumps_bytes(payload, pretty=pretty, sort_keys=sort_keys).decode("utf-8")


def _fallback(value: Any) -> str:
    # Log ``extra=`` fields may carry arbitrary objects.
    return repr(value)


__all__ = ["dumps_bytes", "dumps_text"]
