"""Extraction of generated text from a generateContent response."""
from __future__ import annotations
from typing import Any

from musemind.poem.errors import UnexpectedUpstreamShape


def _first(items: Any, what: str) -> Any:
    if not isinstance(items, list) or not items:
        raise UnexpectedUpstreamShape(f"Missing {what} in upstream response")
    return items[0]


def _field(obj: Any, key: str) -> Any:
    if not isinstance(obj, dict) or obj.get(key) is None:
        raise UnexpectedUpstreamShape(f"Missing {key!r} in upstream response")
    return obj[key]


def extract_text(data: Any) -> str:
    """
    Return candidates[0].content.parts[0].text from a parsed response.

    Raises:
        UnexpectedUpstreamShape: if any level is missing or has the wrong type.
    """
    candidate = _first(_field(data, "candidates"), "candidates")
    part = _first(_field(_field(candidate, "content"), "parts"), "parts")
    text = _field(part, "text")
    if not isinstance(text, str):
        raise UnexpectedUpstreamShape("Generated text is not a string")
    return text
