"""Public list window configuration."""

from __future__ import annotations

from dataclasses import dataclass

from listwindow.api.layout import (
    DEFAULT_ESTIMATED_ITEM_SIZE,
    DEFAULT_OVERSCAN_COUNT,
    Direction,
    SizeGetter,
)


@dataclass(frozen=True, slots=True)
class ListConfig:
    """Per-instance list geometry and sizing inputs.

    ``item_size`` is a callable ``index -> size`` for variable lists or a
    positive number for fixed lists. Replacing it through re-configuration
    keeps every measurement already cached; call ``reset_after_index`` to
    pick up new sizes for measured items.
    """

    item_count: int
    item_size: SizeGetter | float
    height: float
    width: float
    direction: Direction = "vertical"
    estimated_item_size: float = DEFAULT_ESTIMATED_ITEM_SIZE
    overscan_count: int = DEFAULT_OVERSCAN_COUNT
    initial_scroll_offset: float = 0.0

    @property
    def is_horizontal(self) -> bool:
        return self.direction == "horizontal"

    @property
    def viewport_size(self) -> float:
        """Return viewport extent along the scroll axis."""
        return self.width if self.is_horizontal else self.height
