"""Offset-to-index search over lazily measured items."""

from __future__ import annotations

from listwindow.core.metadata_store import MetadataStore


def find_index_for_offset(store: MetadataStore, item_count: int, offset: float) -> int:
    """Return the last index whose offset does not exceed ``offset``.

    Searches the measured prefix with a binary search when it already
    covers ``offset``. Otherwise probes forward exponentially, measuring
    only the probed items, and binary searches the final bracket. Both
    paths stay O(log n) in measurement calls.
    """
    if item_count <= 0 or offset <= 0:
        return 0
    last = store.last_measured_index
    last_offset = store.metadata_at(last).offset if last > 0 else 0.0
    if last_offset >= offset:
        return binary_search_offset(store, 0, min(last, item_count - 1), offset)
    # The watermark may sit past a shrunken item_count.
    return min(exponential_search_offset(store, item_count, max(0, last), offset), item_count - 1)


def binary_search_offset(store: MetadataStore, low: int, high: int, offset: float) -> int:
    """Binary search ``[low, high]`` for the item containing ``offset``."""
    while low <= high:
        middle = low + (high - low) // 2
        current = store.metadata_at(middle).offset
        if current == offset:
            return middle
        if current < offset:
            low = middle + 1
        else:
            high = middle - 1
    return low - 1 if low > 0 else 0


def exponential_search_offset(
    store: MetadataStore, item_count: int, index: int, offset: float
) -> int:
    """Probe forward from ``index`` with doubling steps, then binary search."""
    interval = 1
    while index < item_count and store.metadata_at(index).offset < offset:
        index += interval
        interval *= 2
    return binary_search_offset(store, index // 2, min(index, item_count - 1), offset)
