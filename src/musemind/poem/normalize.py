"""Post-processing of generated text into the 5-line poem format."""
from __future__ import annotations
import re

MAX_LINES = 5
# Output is only clamped once it runs past this many lines; exactly six are kept.
CLAMP_ABOVE = 6

_EMPHASIS = re.compile(r"\*\*|\*")
_LEAD_IN = re.compile(r"^(Here['’]s|Here is)( a)?.*?:\s*", re.IGNORECASE)
_LABEL_LINE = re.compile(r"^\s*(title|poem):", re.IGNORECASE)


def clean_poem(text: str | None) -> str:
    """
    Normalize raw model output into the caller-facing poem.

    Strips markdown emphasis, a leading "Here's a poem:" style lead-in and any
    "Title:"/"Poem:" lines, drops blank lines and clamps long output to the
    first five lines.

    Args:
        text: Raw generated text; None is treated as empty.

    Returns:
        The normalized poem, possibly empty.
    """
    text = (text or "").strip()
    text = _EMPHASIS.sub("", text)
    text = _LEAD_IN.sub("", text, count=1)
    lines = [
        line
        for line in text.splitlines()
        if line.strip() and not _LABEL_LINE.match(line)
    ]
    if len(lines) > CLAMP_ABOVE:
        lines = lines[:MAX_LINES]
    return "\n".join(lines).strip()
