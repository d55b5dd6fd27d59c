"""Pydantic models and dataclasses for request/response types."""
from __future__ import annotations
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, ConfigDict

from musemind.common.templates import Theme

@dataclass(frozen=True)
class GenerationRequest:
    """A validated poem request."""
    user_input: str
    theme: Theme

@dataclass(frozen=True)
class GenerationResult:
    """A normalized poem ready to be returned to the caller.

    ``theme`` is the value the caller sent, echoed back unchanged.
    """
    poem: str
    theme: Any
    timestamp: str

class GeneratePoemIn(BaseModel):
    model_config = ConfigDict(extra="ignore")

    userInput: str | None = None
    # Resolved by Theme.parse; any value is accepted and unknown ones fall back.
    theme: Any = None

class GeneratePoemOut(BaseModel):
    success: bool = True
    poem: str
    theme: Any = None
    timestamp: str

class HealthOut(BaseModel):
    status: str
    message: str
    timestamp: str

class ErrorOut(BaseModel):
    error: str
