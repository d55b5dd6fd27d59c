from __future__ import annotations

import pytest

from musemind.poem.errors import UnexpectedUpstreamShape
from musemind.poem.extract import extract_text


def gemini_body(text: str) -> dict:
    return {"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]}


def test_extracts_first_candidate_text() -> None:
    data = gemini_body("first")
    data["candidates"].append({"content": {"parts": [{"text": "second"}]}})
    assert extract_text(data) == "first"


@pytest.mark.parametrize(
    "data",
    [
        None,
        [],
        {},
        {"candidates": None},
        {"candidates": []},
        {"candidates": [{}]},
        {"candidates": [{"content": None}]},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"content": {"parts": [{}]}}]},
        {"candidates": [{"content": {"parts": [{"text": 5}]}}]},
        {"candidates": "oops"},
    ],
)
def test_bad_shapes_raise_typed_error(data: object) -> None:
    with pytest.raises(UnexpectedUpstreamShape):
        extract_text(data)
