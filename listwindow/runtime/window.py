"""Headless list window controller for rendering collaborators."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeAlias

from listwindow.api.config import ListConfig
from listwindow.api.layout import (
    ItemLayout,
    ItemMetadata,
    LayoutKind,
    RenderRange,
    ScrollAlign,
    ScrollDirection,
    ScrollEvent,
)
from listwindow.core.variable_layout import VariableSizeLayout
from listwindow.diagnostics.json_codec import dumps_text
from listwindow.runtime.config import create_layout, resolve_layout_kind, validate_list_config
from listwindow.runtime.debug_config import enabled_trace

_LOG = logging.getLogger("listwindow.runtime")

_EMPTY_RANGE = RenderRange(overscan_start=0, overscan_stop=0, visible_start=0, visible_stop=0)

ItemsRenderedCallback: TypeAlias = Callable[[RenderRange], None]
ScrollCallback: TypeAlias = Callable[[ScrollEvent], None]


class ListWindow:
    """Scroll state, overscan and change notification over a layout strategy.

    The controller decides which indices a renderer should materialize and
    where each one sits along the scroll axis. Painting, input plumbing and
    the "scrolling stopped" debounce belong to the caller, which reports
    back through ``handle_user_scroll`` and ``settle``.
    """

    def __init__(
        self,
        config: ListConfig,
        *,
        kind: LayoutKind | None = None,
        on_items_rendered: ItemsRenderedCallback | None = None,
        on_scroll: ScrollCallback | None = None,
    ) -> None:
        self._kind = resolve_layout_kind(config, kind)
        self._layout = create_layout(config, self._kind)
        self._config = config
        self._scroll_offset = float(config.initial_scroll_offset)
        self._scroll_direction: ScrollDirection = "forward"
        self._scroll_requested = False
        self._is_scrolling = False
        self._on_items_rendered = on_items_rendered
        self._on_scroll = on_scroll
        self._last_rendered: RenderRange | None = None
        self._last_scroll_event: ScrollEvent | None = None
        self._trace = enabled_trace()

    @property
    def config(self) -> ListConfig:
        return self._config

    @property
    def kind(self) -> LayoutKind:
        return self._kind

    @property
    def layout(self) -> ItemLayout:
        return self._layout

    @property
    def scroll_offset(self) -> float:
        return self._scroll_offset

    @property
    def scroll_direction(self) -> ScrollDirection:
        return self._scroll_direction

    @property
    def is_scrolling(self) -> bool:
        return self._is_scrolling

    def estimated_total_size(self) -> float:
        return self._layout.estimated_total_size()

    def scroll_to(self, scroll_offset: float) -> None:
        """Scroll to an absolute offset, never before the list start."""
        self._apply_scroll(max(0.0, float(scroll_offset)), requested=True)

    def scroll_to_item(self, index: int, align: ScrollAlign = "auto") -> None:
        """Scroll so ``index`` satisfies ``align``."""
        item_count = self._layout.item_count
        if item_count <= 0:
            return
        index = max(0, min(index, item_count - 1))
        target = self._layout.offset_for_alignment(index, align, self._scroll_offset)
        if self._trace:
            _LOG.debug(
                "scroll_to_item index=%d align=%s current=%.1f target=%.1f",
                index,
                align,
                self._scroll_offset,
                target,
            )
        self.scroll_to(target)

    def handle_user_scroll(self, scroll_offset: float) -> None:
        """Apply a scroll position reported by the host, clamped to content."""
        max_offset = max(0.0, self._layout.estimated_total_size() - self._layout.viewport_size)
        self._apply_scroll(max(0.0, min(float(scroll_offset), max_offset)), requested=False)

    def settle(self) -> None:
        """Mark scrolling as finished."""
        self._is_scrolling = False

    def range_to_render(self) -> RenderRange:
        """Return visible indices widened by direction-aware overscan."""
        item_count = self._layout.item_count
        if item_count <= 0:
            return _EMPTY_RANGE
        start = self._layout.start_index_for_offset(self._scroll_offset)
        stop = self._layout.stop_index_for_start_index(
            start, self._scroll_offset, self._layout.viewport_size
        )
        overscan = max(1, self._config.overscan_count)
        idle = not self._is_scrolling
        backward = overscan if idle or self._scroll_direction == "backward" else 1
        forward = overscan if idle or self._scroll_direction == "forward" else 1
        return RenderRange(
            overscan_start=max(0, start - backward),
            overscan_stop=max(0, min(item_count - 1, stop + forward)),
            visible_start=start,
            visible_stop=stop,
        )

    def render(self) -> list[tuple[int, ItemMetadata]]:
        """Return placement for every index to materialize, notifying on change."""
        if self._layout.item_count <= 0:
            return []
        window = self.range_to_render()
        if window != self._last_rendered:
            self._last_rendered = window
            if self._on_items_rendered is not None:
                self._on_items_rendered(window)
        return [(index, self._layout.metadata_at(index)) for index in window.indices()]

    def reset_after_index(self, index: int) -> None:
        """Drop cached measurements from ``index`` onward."""
        self._layout.invalidate_after(index)
        self._last_rendered = None
        _LOG.debug("list_window_reset index=%d", index)

    def reconfigure(self, config: ListConfig) -> None:
        """Apply new inputs to the existing layout, keeping its cache."""
        validate_list_config(config, self._kind)
        self._layout.configure(config)
        self._config = config

    def snapshot(self) -> dict[str, object]:
        """Return a diagnostics view of controller and cache state."""
        payload: dict[str, object] = {
            "kind": self._kind,
            "direction": self._config.direction,
            "item_count": self._layout.item_count,
            "viewport_size": self._layout.viewport_size,
            "scroll_offset": self._scroll_offset,
            "scroll_direction": self._scroll_direction,
            "scroll_requested": self._scroll_requested,
            "is_scrolling": self._is_scrolling,
            "estimated_total_size": self._layout.estimated_total_size(),
        }
        if isinstance(self._layout, VariableSizeLayout):
            payload["last_measured_index"] = self._layout.store.last_measured_index
            payload["estimated_item_size"] = self._layout.store.estimated_item_size
        window = self._last_rendered
        if window is not None:
            payload["rendered"] = {
                "overscan_start": window.overscan_start,
                "overscan_stop": window.overscan_stop,
                "visible_start": window.visible_start,
                "visible_stop": window.visible_stop,
            }
        return payload

    def snapshot_json(self, *, pretty: bool = False) -> str:
        return dumps_text(self.snapshot(), pretty=pretty, sort_keys=True)

    def _apply_scroll(self, scroll_offset: float, *, requested: bool) -> None:
        if scroll_offset == self._scroll_offset:
            return
        self._scroll_direction = "forward" if self._scroll_offset < scroll_offset else "backward"
        self._scroll_offset = scroll_offset
        self._scroll_requested = requested
        self._is_scrolling = True
        self._notify_scroll()

    def _notify_scroll(self) -> None:
        if self._on_scroll is None:
            return
        event = ScrollEvent(
            scroll_offset=self._scroll_offset,
            scroll_direction=self._scroll_direction,
            requested=self._scroll_requested,
        )
        if event == self._last_scroll_event:
            return
        self._last_scroll_event = event
        self._on_scroll(event)
