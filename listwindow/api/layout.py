"""Public layout contracts shared by list window strategies."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal, Protocol, TypeAlias

if TYPE_CHECKING:
    from listwindow.api.config import ListConfig

ScrollAlign: TypeAlias = Literal["auto", "start", "center", "end"]
Direction: TypeAlias = Literal["vertical", "horizontal"]
ScrollDirection: TypeAlias = Literal["forward", "backward"]
LayoutKind: TypeAlias = Literal["fixed", "variable"]
SizeGetter: TypeAlias = Callable[[int], float]

SCROLL_ALIGNS: tuple[ScrollAlign, ...] = ("auto", "start", "center", "end")
DIRECTIONS: tuple[Direction, ...] = ("vertical", "horizontal")
DEFAULT_ESTIMATED_ITEM_SIZE = 50.0
DEFAULT_OVERSCAN_COUNT = 1


@dataclass(frozen=True, slots=True)
class ItemMetadata:
    """Position and size of one item along the scroll axis."""

    offset: float
    size: float

    @property
    def end(self) -> float:
        return self.offset + self.size


@dataclass(frozen=True, slots=True)
class RenderRange:
    """Indices a rendering layer should materialize."""

    overscan_start: int
    overscan_stop: int
    visible_start: int
    visible_stop: int

    def indices(self) -> range:
        """Return the overscan index range, stop inclusive."""
        return range(self.overscan_start, self.overscan_stop + 1)


@dataclass(frozen=True, slots=True)
class ScrollEvent:
    """Scroll notification payload."""

    scroll_offset: float
    scroll_direction: ScrollDirection
    requested: bool


class ItemLayout(Protocol):
    """Layout strategy contract consumed by the list window controller."""

    @property
    def item_count(self) -> int: ...

    @property
    def viewport_size(self) -> float: ...

    def configure(self, config: ListConfig) -> None:
        """Apply a new configuration without dropping cached measurements."""

    def metadata_at(self, index: int) -> ItemMetadata:
        """Return offset and size for an index in ``[0, item_count)``."""

    def estimated_total_size(self) -> float:
        """Return the scrollable extent, estimating unmeasured items."""

    def start_index_for_offset(self, offset: float) -> int:
        """Return the index of the item containing ``offset``."""

    def stop_index_for_start_index(
        self, start_index: int, scroll_offset: float, viewport_size: float
    ) -> int:
        """Return the last index needed to fill the viewport."""

    def offset_for_alignment(
        self, index: int, align: ScrollAlign = "auto", current_scroll_offset: float = 0.0
    ) -> float:
        """Return the scroll offset that aligns ``index`` as requested."""

    def invalidate_after(self, index: int) -> None:
        """Drop cached measurements from ``index`` onward."""
