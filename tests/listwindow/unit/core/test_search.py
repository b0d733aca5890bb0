from __future__ import annotations

from listwindow.core.metadata_store import MetadataStore
from listwindow.core.search import (
    binary_search_offset,
    exponential_search_offset,
    find_index_for_offset,
)
from tests.listwindow.conftest import RecordingSizes, growing_size


def _varied_size(index: int) -> float:
    return 10 + (index * 7) % 23


def _brute_force_index(item_count: int, offset: float) -> int:
    start = 0.0
    for index in range(item_count):
        size = _varied_size(index)
        if start <= offset < start + size:
            return index
        start += size
    return item_count - 1


def test_zero_or_negative_offset_returns_first_index() -> None:
    store = MetadataStore(growing_size)
    assert find_index_for_offset(store, 20, 0) == 0
    assert find_index_for_offset(store, 20, -15) == 0
    assert find_index_for_offset(store, 0, 100) == 0


def test_search_matches_brute_force_on_fresh_stores() -> None:
    item_count = 200
    total = sum(_varied_size(i) for i in range(item_count))
    for offset in range(0, int(total), 13):
        store = MetadataStore(_varied_size)
        assert find_index_for_offset(store, item_count, offset) == _brute_force_index(
            item_count, offset
        )


def test_search_matches_brute_force_on_shared_store() -> None:
    item_count = 200
    total = sum(_varied_size(i) for i in range(item_count))
    store = MetadataStore(_varied_size)
    for offset in range(int(total) - 1, -1, -11):
        assert find_index_for_offset(store, item_count, offset) == _brute_force_index(
            item_count, offset
        )
    for offset in (0.5, 10.0, 10.5, 333.25):
        assert find_index_for_offset(store, item_count, offset) == _brute_force_index(
            item_count, offset
        )


def test_offset_past_content_clamps_to_last_index() -> None:
    store = MetadataStore(lambda index: 10)
    assert find_index_for_offset(store, 50, 10_000) == 49
    assert find_index_for_offset(store, 50, 10_000) == 49


def test_exponential_probe_measures_only_a_prefix() -> None:
    sizes = RecordingSizes(lambda index: 10)
    store = MetadataStore(sizes)
    assert find_index_for_offset(store, 1_000_000, 505) == 50
    assert sizes.call_count < 200


def test_binary_search_returns_exact_match() -> None:
    store = MetadataStore(lambda index: 10)
    store.metadata_at(9)
    assert binary_search_offset(store, 0, 9, 40) == 4
    assert binary_search_offset(store, 0, 9, 45) == 4
    assert binary_search_offset(store, 0, 9, 5) == 0


def test_exponential_search_from_watermark() -> None:
    store = MetadataStore(lambda index: 10)
    store.metadata_at(3)
    assert exponential_search_offset(store, 100, 3, 255) == 25


def test_shrunken_item_count_clamps_result() -> None:
    store = MetadataStore(lambda index: 10)
    store.metadata_at(30)
    assert find_index_for_offset(store, 10, 250) == 9
    assert find_index_for_offset(store, 10, 5000) == 9
