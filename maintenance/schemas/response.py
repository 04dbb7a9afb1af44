"""The uniform JSON envelope and health payload."""

from typing import Any, Literal

from pydantic import BaseModel, Field


class JsonResponse(BaseModel):
    """Envelope written for every response: {code, content}."""

    code: int = Field(..., description="HTTP status code, repeated in the body")
    content: Any = Field(
        default=None,
        description="A message string, a single record or a list of records",
    )


class HealthStatus(BaseModel):
    """Content of the health check envelope."""

    status: Literal["ok"] = "ok"
    environment: str
    database: Literal["connected", "disconnected"]
