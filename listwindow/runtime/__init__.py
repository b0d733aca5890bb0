"""List window runtime: configuration, logging and the window controller."""

from listwindow.runtime.config import create_layout, resolve_layout_kind, validate_list_config
from listwindow.runtime.debug_config import DebugConfig, load_debug_config
from listwindow.runtime.errors import ListConfigError, ListWindowError
from listwindow.runtime.logging import configure_logging, setup_logging
from listwindow.runtime.window import ListWindow

__all__ = [
    "DebugConfig",
    "ListConfigError",
    "ListWindow",
    "ListWindowError",
    "configure_logging",
    "create_layout",
    "load_debug_config",
    "resolve_layout_kind",
    "setup_logging",
    "validate_list_config",
]
