"""Public list window contracts."""

from listwindow.api.config import ListConfig
from listwindow.api.layout import (
    DEFAULT_ESTIMATED_ITEM_SIZE,
    DEFAULT_OVERSCAN_COUNT,
    DIRECTIONS,
    SCROLL_ALIGNS,
    Direction,
    ItemLayout,
    ItemMetadata,
    LayoutKind,
    RenderRange,
    ScrollAlign,
    ScrollDirection,
    ScrollEvent,
    SizeGetter,
)
from listwindow.api.logging import JsonFormatter, LoggingConfig

__all__ = [
    "DEFAULT_ESTIMATED_ITEM_SIZE",
    "DEFAULT_OVERSCAN_COUNT",
    "DIRECTIONS",
    "SCROLL_ALIGNS",
    "Direction",
    "ItemLayout",
    "ItemMetadata",
    "JsonFormatter",
    "LayoutKind",
    "ListConfig",
    "LoggingConfig",
    "RenderRange",
    "ScrollAlign",
    "ScrollDirection",
    "ScrollEvent",
    "SizeGetter",
]
