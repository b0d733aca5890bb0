"""Closed-form layout strategy for uniformly sized items."""

from __future__ import annotations

import math

from listwindow.api.config import ListConfig
from listwindow.api.layout import ItemMetadata, ScrollAlign
from listwindow.core.alignment import normalize_align, resolve_alignment


class FixedSizeLayout:
    """Uniform-size strategy: ``offset = index * item_size``."""

    def __init__(self, config: ListConfig) -> None:
        self._item_size = 0.0
        self._item_count = 0
        self._viewport_size = 0.0
        self.configure(config)

    @property
    def item_size(self) -> float:
        return self._item_size

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def viewport_size(self) -> float:
        return self._viewport_size

    def configure(self, config: ListConfig) -> None:
        self._item_size = float(config.item_size)  # type: ignore[arg-type]
        self._item_count = config.item_count
        self._viewport_size = float(config.viewport_size)

    def metadata_at(self, index: int) -> ItemMetadata:
        return ItemMetadata(offset=index * self._item_size, size=self._item_size)

    def estimated_total_size(self) -> float:
        return self._item_count * self._item_size

    def start_index_for_offset(self, offset: float) -> int:
        index = math.floor(offset / self._item_size)
        return max(0, min(self._item_count - 1, index))

    def stop_index_for_start_index(
        self, start_index: int, scroll_offset: float, viewport_size: float
    ) -> int:
        offset = start_index * self._item_size
        visible_count = math.ceil((viewport_size + scroll_offset - offset) / self._item_size)
        return max(0, min(self._item_count - 1, start_index + visible_count - 1))

    def offset_for_alignment(
        self, index: int, align: ScrollAlign = "auto", current_scroll_offset: float = 0.0
    ) -> float:
        item_offset = index * self._item_size
        last_item_offset = max(0.0, self.estimated_total_size() - self._viewport_size)
        max_offset = min(last_item_offset, item_offset)
        min_offset = max(0.0, item_offset - self._viewport_size + self._item_size)
        return resolve_alignment(normalize_align(align), current_scroll_offset, min_offset, max_offset)

    def invalidate_after(self, index: int) -> None:
        # Sizes are closed-form; nothing is cached.
        return None
