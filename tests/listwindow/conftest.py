from __future__ import annotations

from collections.abc import Callable

from listwindow.api.config import ListConfig


class RecordingSizes:
    """Size provider that records every index it measured."""

    def __init__(self, size_for: Callable[[int], float]) -> None:
        self._size_for = size_for
        self.calls: list[int] = []

    def __call__(self, index: int) -> float:
        self.calls.append(index)
        return self._size_for(index)

    @property
    def call_count(self) -> int:
        return len(self.calls)


def growing_size(index: int) -> float:
    return 25 + index


def make_config(
    *,
    item_count: int = 20,
    item_size: Callable[[int], float] | float = growing_size,
    height: float = 100,
    width: float = 50,
    **overrides: object,
) -> ListConfig:
    return ListConfig(
        item_count=item_count,
        item_size=item_size,
        height=height,
        width=width,
        **overrides,  # type: ignore[arg-type]
    )
