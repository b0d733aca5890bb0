"""Watermarked offset/size cache for variable-size items."""

from __future__ import annotations

import numpy as np

from listwindow.api.layout import DEFAULT_ESTIMATED_ITEM_SIZE, ItemMetadata, SizeGetter

_INITIAL_CAPACITY = 64


class MetadataStore:
    """Numpy-backed item metadata, filled forward on demand.

    Entries ``[0, last_measured_index]`` hold exact cumulative offsets.
    Entries past the watermark may hold stale values from before an
    invalidation; they are rewritten by the next forward fill and never
    read before that.
    """

    def __init__(
        self,
        size_of: SizeGetter,
        *,
        estimated_item_size: float = DEFAULT_ESTIMATED_ITEM_SIZE,
        capacity: int = _INITIAL_CAPACITY,
    ) -> None:
        self._size_of = size_of
        self._estimated_item_size = float(estimated_item_size)
        self._offsets = np.zeros(max(1, capacity), dtype=np.float64)
        self._sizes = np.zeros(max(1, capacity), dtype=np.float64)
        self._last_measured_index = -1

    @property
    def last_measured_index(self) -> int:
        return self._last_measured_index

    @property
    def estimated_item_size(self) -> float:
        return self._estimated_item_size

    @property
    def capacity(self) -> int:
        return int(self._offsets.shape[0])

    @property
    def size_of(self) -> SizeGetter:
        return self._size_of

    @size_of.setter
    def size_of(self, size_of: SizeGetter) -> None:
        # Measured entries stay as they are until invalidate_after().
        self._size_of = size_of

    def metadata_at(self, index: int) -> ItemMetadata:
        """Return cached metadata, measuring forward up to ``index`` if needed."""
        if index > self._last_measured_index:
            self._measure_through(index)
        return ItemMetadata(offset=float(self._offsets[index]), size=float(self._sizes[index]))

    def measured_total_size(self) -> float:
        """Return the exact extent of the measured prefix."""
        last = self._last_measured_index
        if last < 0:
            return 0.0
        return float(self._offsets[last] + self._sizes[last])

    def estimated_total_size(self, item_count: int) -> float:
        """Return measured extent plus an estimate for every unmeasured item."""
        unmeasured = item_count - self._last_measured_index - 1
        return self.measured_total_size() + unmeasured * self._estimated_item_size

    def invalidate_after(self, index: int) -> None:
        """Lower the watermark so ``index`` onward is measured again."""
        # Never below -1; a negative index resets the whole cache.
        self._last_measured_index = max(-1, min(self._last_measured_index, index - 1))

    def _measure_through(self, index: int) -> None:
        self._ensure_capacity(index + 1)
        offset = self.measured_total_size()
        for i in range(self._last_measured_index + 1, index + 1):
            size = float(self._size_of(i))
            self._offsets[i] = offset
            self._sizes[i] = size
            offset += size
        self._last_measured_index = index

    def _ensure_capacity(self, required: int) -> None:
        current = self.capacity
        if required <= current:
            return
        grown = current
        while grown < required:
            grown *= 2
        offsets = np.zeros(grown, dtype=np.float64)
        sizes = np.zeros(grown, dtype=np.float64)
        offsets[:current] = self._offsets
        sizes[:current] = self._sizes
        self._offsets = offsets
        self._sizes = sizes
