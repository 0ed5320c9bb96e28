"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error response body."""

    message: str
    error: Any | None = None


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str
