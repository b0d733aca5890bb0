from __future__ import annotations

import numpy as np

from listwindow.diagnostics.json_codec import dumps_bytes, dumps_text


def test_dumps_text_compact() -> None:
    payload = {"k": "v", "n": 1, "arr": [1, 2, 3]}
    raw = dumps_text(payload)
    assert isinstance(raw, str)
    assert "\"k\":\"v\"" in raw


def test_dumps_bytes_pretty_mode() -> None:
    payload = {"a": 1, "b": {"c": 2}}
    text = dumps_bytes(payload, pretty=True).decode("utf-8")
    assert "\n" in text
    assert "  " in text


def test_dumps_text_sorts_keys_and_handles_numpy() -> None:
    raw = dumps_text({"b": np.float64(2.5), "a": np.arange(3)}, sort_keys=True)
    assert raw == '{"a":[0,1,2],"b":2.5}'


def test_unserializable_values_fall_back_to_repr() -> None:
    marker = object()
    assert repr(marker) in dumps_text({"obj": marker})
