"""Scroll alignment policy shared by layout strategies."""

from __future__ import annotations

import math

from listwindow.api.layout import SCROLL_ALIGNS, ScrollAlign


def normalize_align(value: str) -> ScrollAlign:
    """Return a canonical alignment name."""
    normalized = value.strip().lower()
    for align in SCROLL_ALIGNS:
        if normalized == align:
            return align
    raise ValueError(f"unknown scroll alignment: {value!r}")


def round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def resolve_alignment(
    align: ScrollAlign,
    current_scroll_offset: float,
    min_offset: float,
    max_offset: float,
) -> float:
    """Pick a scroll offset between the item's reveal bounds.

    ``max_offset`` pins the item start to the viewport start and
    ``min_offset`` pins the item end to the viewport end. ``auto`` keeps the
    current offset when the item is already fully visible and otherwise
    moves to the nearer bound.
    """
    if align == "start":
        return max_offset
    if align == "end":
        return min_offset
    if align == "center":
        return round_half_up(min_offset + (max_offset - min_offset) / 2)
    if min_offset <= current_scroll_offset <= max_offset:
        return current_scroll_offset
    if current_scroll_offset - min_offset < max_offset - current_scroll_offset:
        return min_offset
    return max_offset
