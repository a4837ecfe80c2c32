from typing import Any

from pydantic import BaseModel, Field


class ResourceRequestDTO(BaseModel):
    """Orchestrator message: recorded ID, declared config and recorded state."""

    id: str | None = None
    config: dict[str, Any] = Field(default_factory=dict)
    state: dict[str, Any] = Field(default_factory=dict)


class ResourceResponseDTO(BaseModel):
    id: str | None = None
    attributes: dict[str, Any] = Field(default_factory=dict)


class ErrorResponseDTO(BaseModel):
    error: str
    detail: str
