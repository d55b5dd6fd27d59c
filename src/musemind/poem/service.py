"""The poem generation pipeline: validate, prompt, call upstream, extract, normalize."""
from __future__ import annotations
import logging
from datetime import datetime, timezone
from typing import Any, Protocol

from musemind.common.schema import GenerationRequest, GenerationResult
from musemind.common.templates import Theme, build_prompt
from musemind.poem.errors import InvalidInput
from musemind.poem.extract import extract_text
from musemind.poem.normalize import clean_poem

LOGGER = logging.getLogger("musemind.service")


class PoemClient(Protocol):
    async def generate_content(self, prompt: str) -> Any: ...


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a Z suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def validate_request(user_input: object, theme: object = None) -> GenerationRequest:
    """
    Check the raw request fields and resolve the theme.

    Args:
        user_input: Raw ``userInput`` value; must be a string with
            non-whitespace content.
        theme: Raw ``theme`` value; unknown values resolve to moodverse.

    Raises:
        InvalidInput: if the input is missing, not a string or blank.
    """
    if not isinstance(user_input, str) or not user_input.strip():
        raise InvalidInput("userInput is missing or blank")
    return GenerationRequest(user_input=user_input, theme=Theme.parse(theme))


async def generate_poem(user_input: object, theme: object, client: PoemClient) -> GenerationResult:
    """Run one request through the pipeline, raising the first failure."""
    request = validate_request(user_input, theme)
    prompt = build_prompt(request.user_input, request.theme)
    data = await client.generate_content(prompt)
    poem = clean_poem(extract_text(data))
    LOGGER.info("Generated %s poem with %d lines", request.theme.value, len(poem.splitlines()))
    return GenerationResult(poem=poem, theme=theme, timestamp=utc_timestamp())
