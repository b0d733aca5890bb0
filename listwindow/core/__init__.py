"""Windowing engine: lazy measurement, offset search and alignment."""

from listwindow.core.alignment import normalize_align, resolve_alignment, round_half_up
from listwindow.core.fixed_layout import FixedSizeLayout
from listwindow.core.metadata_store import MetadataStore
from listwindow.core.search import (
    binary_search_offset,
    exponential_search_offset,
    find_index_for_offset,
)
from listwindow.core.variable_layout import VariableSizeLayout

__all__ = [
    "FixedSizeLayout",
    "MetadataStore",
    "VariableSizeLayout",
    "binary_search_offset",
    "exponential_search_offset",
    "find_index_for_offset",
    "normalize_align",
    "resolve_alignment",
    "round_half_up",
]
