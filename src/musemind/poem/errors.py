"""Failure taxonomy for poem generation and its mapping to HTTP responses."""
from __future__ import annotations

GENERIC_FAILURE = "Failed to generate poem. Please try again."
UNEXPECTED_FAILURE = "An unexpected error occurred. Please try again."


class PoemGenerationError(Exception):
    """Base class for every failure the request pipeline can raise."""


class InvalidInput(PoemGenerationError):
    pass


class ConfigurationError(PoemGenerationError):
    pass


class UpstreamError(PoemGenerationError):
    """The generation API answered with a non-2xx status."""

    def __init__(self, status: int) -> None:
        super().__init__(f"Upstream returned HTTP {status}")
        self.status = status


class UpstreamTimeout(PoemGenerationError):
    pass


class UpstreamUnreachable(PoemGenerationError):
    pass


class UnexpectedUpstreamShape(PoemGenerationError):
    pass


class RouteNotFound(PoemGenerationError):
    pass


_UPSTREAM_STATUS: dict[int, tuple[int, str]] = {
    400: (400, "Invalid request to AI service. Please try a different prompt."),
    401: (500, "Authentication failed. Please check server configuration."),
    403: (500, "Authentication failed. Please check server configuration."),
    429: (429, "Too many requests. Please wait and try again."),
    503: (503, "AI service temporarily unavailable. Try again later."),
}


def classify_error(exc: BaseException) -> tuple[int, str]:
    """
    Map a failure to the (HTTP status, caller-facing message) pair.

    Messages never include upstream payloads, keys or tracebacks.

    Args:
        exc: Exception raised while serving a request.

    Returns:
        Status code and message for the JSON error body.
    """
    if isinstance(exc, InvalidInput):
        return 400, "Please provide your feelings or thoughts to generate a poem."
    if isinstance(exc, ConfigurationError):
        return 500, "Server configuration error. Please contact support."
    if isinstance(exc, UpstreamError):
        return _UPSTREAM_STATUS.get(exc.status, (500, GENERIC_FAILURE))
    if isinstance(exc, UpstreamTimeout):
        return 504, "Request timed out. Please try again with a shorter prompt."
    if isinstance(exc, UnexpectedUpstreamShape):
        return 500, GENERIC_FAILURE
    if isinstance(exc, RouteNotFound):
        return 404, "Endpoint not found. Use POST /api/generate-poem to generate poems."
    return 500, UNEXPECTED_FAILURE
