"""Request and response bodies for the HTTP API."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Body of every 400 and 500 answer from the API."""

    error: str


class ChatRequest(BaseModel):
    """Chat question from the UI; prior turns are sent but not forwarded."""

    question: str | None = None
    history: list[dict[str, Any]] = Field(default_factory=list)


class ChatResponse(BaseModel):
    answer: str


class HealthResponse(BaseModel):
    status: str
    service: str
    version: str
