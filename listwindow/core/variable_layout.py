"""Layout strategy for items of non-uniform, lazily measured size."""

from __future__ import annotations

from typing import cast

from listwindow.api.config import ListConfig
from listwindow.api.layout import ItemMetadata, ScrollAlign, SizeGetter
from listwindow.core.alignment import normalize_align, resolve_alignment
from listwindow.core.metadata_store import MetadataStore
from listwindow.core.search import find_index_for_offset


class VariableSizeLayout:
    """Variable-size strategy backed by a watermarked metadata store."""

    def __init__(self, config: ListConfig) -> None:
        self._store = MetadataStore(
            cast(SizeGetter, config.item_size),
            estimated_item_size=config.estimated_item_size,
        )
        self._item_count = config.item_count
        self._viewport_size = float(config.viewport_size)

    @property
    def store(self) -> MetadataStore:
        return self._store

    @property
    def item_count(self) -> int:
        return self._item_count

    @property
    def viewport_size(self) -> float:
        return self._viewport_size

    def configure(self, config: ListConfig) -> None:
        """Swap size provider and geometry, keeping cached measurements."""
        self._store.size_of = cast(SizeGetter, config.item_size)
        self._item_count = config.item_count
        self._viewport_size = float(config.viewport_size)

    def metadata_at(self, index: int) -> ItemMetadata:
        return self._store.metadata_at(index)

    def estimated_total_size(self) -> float:
        return self._store.estimated_total_size(self._item_count)

    def start_index_for_offset(self, offset: float) -> int:
        return find_index_for_offset(self._store, self._item_count, offset)

    def stop_index_for_start_index(
        self, start_index: int, scroll_offset: float, viewport_size: float
    ) -> int:
        """Walk forward from ``start_index`` until the viewport is filled."""
        max_offset = scroll_offset + viewport_size
        offset = self._store.metadata_at(start_index).end
        stop_index = start_index
        while stop_index < self._item_count - 1 and offset < max_offset:
            stop_index += 1
            offset += self._store.metadata_at(stop_index).size
        return stop_index

    def offset_for_alignment(
        self, index: int, align: ScrollAlign = "auto", current_scroll_offset: float = 0.0
    ) -> float:
        item = self._store.metadata_at(index)
        # Read after measuring ``index`` so the total reflects real sizes up to it.
        total_size = self.estimated_total_size()
        max_offset = min(total_size - self._viewport_size, item.offset)
        min_offset = max(0.0, item.offset - self._viewport_size + item.size)
        return resolve_alignment(normalize_align(align), current_scroll_offset, min_offset, max_offset)

    def invalidate_after(self, index: int) -> None:
        self._store.invalidate_after(index)
