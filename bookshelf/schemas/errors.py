"""Error response schemas for the API."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail."""

    model_config = ConfigDict(strict=True, extra="forbid")

    code: str
    message: str
    field: str | None = None
    context: dict[str, Any] | None = None


class ErrorResponse(BaseModel):
    """Standard error response format."""

    model_config = ConfigDict(strict=True, extra="forbid")

    error: ErrorDetail
