"""Windowed rendering support for very large ordered collections."""

from listwindow.api import (
    ItemLayout,
    ItemMetadata,
    ListConfig,
    LoggingConfig,
    RenderRange,
    ScrollAlign,
    ScrollEvent,
)
from listwindow.core import FixedSizeLayout, MetadataStore, VariableSizeLayout
from listwindow.runtime import (
    ListConfigError,
    ListWindow,
    ListWindowError,
    configure_logging,
    create_layout,
    setup_logging,
)

__all__ = [
    "FixedSizeLayout",
    "ItemLayout",
    "ItemMetadata",
    "ListConfig",
    "ListConfigError",
    "ListWindow",
    "ListWindowError",
    "LoggingConfig",
    "MetadataStore",
    "RenderRange",
    "ScrollAlign",
    "ScrollEvent",
    "VariableSizeLayout",
    "configure_logging",
    "create_layout",
    "setup_logging",
]
