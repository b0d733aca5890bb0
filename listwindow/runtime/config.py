"""List configuration validation and layout strategy selection."""

from __future__ import annotations

from numbers import Real

from listwindow.api.config import ListConfig
from listwindow.api.layout import DIRECTIONS, ItemLayout, LayoutKind
from listwindow.core.fixed_layout import FixedSizeLayout
from listwindow.core.variable_layout import VariableSizeLayout
from listwindow.runtime.errors import ListConfigError


def resolve_layout_kind(config: ListConfig, kind: LayoutKind | None = None) -> LayoutKind:
    """Return explicit kind, or infer it from the size provider."""
    if kind is None:
        return "variable" if callable(config.item_size) else "fixed"
    normalized = kind.strip().lower()
    if normalized == "fixed":
        return "fixed"
    if normalized == "variable":
        return "variable"
    raise ListConfigError(f"unknown layout kind: {kind!r}")


def validate_list_config(config: ListConfig, kind: LayoutKind) -> None:
    """Reject configurations the layout strategies cannot work with."""
    if kind == "variable":
        if not callable(config.item_size):
            raise ListConfigError(
                f"invalid item_size: expected a callable, got {_type_name(config.item_size)!r}"
            )
    elif not _is_positive_number(config.item_size):
        raise ListConfigError(
            f"invalid item_size: expected a positive number, got {config.item_size!r}"
        )
    if isinstance(config.item_count, bool) or not isinstance(config.item_count, int):
        raise ListConfigError(
            f"invalid item_count: expected an int, got {_type_name(config.item_count)!r}"
        )
    if config.item_count < 0:
        raise ListConfigError(f"invalid item_count: {config.item_count} is negative")
    if config.direction not in DIRECTIONS:
        raise ListConfigError(f"unknown direction: {config.direction!r}")
    axis = "width" if config.is_horizontal else "height"
    viewport = config.viewport_size
    if not _is_number(viewport) or viewport < 0:
        raise ListConfigError(f"invalid {axis}: expected a non-negative number, got {viewport!r}")
    if not _is_positive_number(config.estimated_item_size):
        raise ListConfigError(
            f"invalid estimated_item_size: expected a positive number, got {config.estimated_item_size!r}"
        )
    if isinstance(config.overscan_count, bool) or not isinstance(config.overscan_count, int):
        raise ListConfigError(
            f"invalid overscan_count: expected an int, got {_type_name(config.overscan_count)!r}"
        )
    if config.overscan_count < 0:
        raise ListConfigError(f"invalid overscan_count: {config.overscan_count} is negative")
    if not _is_number(config.initial_scroll_offset):
        raise ListConfigError(
            "invalid initial_scroll_offset: expected a number, "
            f"got {_type_name(config.initial_scroll_offset)!r}"
        )


def create_layout(config: ListConfig, kind: LayoutKind | None = None) -> ItemLayout:
    """Validate ``config`` and build the matching layout strategy."""
    resolved = resolve_layout_kind(config, kind)
    validate_list_config(config, resolved)
    if resolved == "variable":
        return VariableSizeLayout(config)
    return FixedSizeLayout(config)


def _is_number(value: object) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool)


def _is_positive_number(value: object) -> bool:
    return _is_number(value) and value > 0  # type: ignore[operator]


def _type_name(value: object) -> str:
    if value is None:
        return "None"
    return type(value).__name__
