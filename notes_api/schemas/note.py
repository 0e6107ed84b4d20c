"""
Notes API: Pydantic Request/Response Schemas
=============================================

What:  Pydantic models defining the JSON contract of the Notes API.
How:   FastAPI uses these models to parse request bodies, serialize responses
       and generate the OpenAPI document served at /docs.

Naming:
    Python attributes are snake_case; the JSON wire format is camelCase
    (createdAt, updatedAt, deletedId). FastAPI serializes response models
    by alias, so routes can return these models directly.

Request bodies:
    Field types on the request models are deliberately loose (Any). The
    title/content rules (string, non-empty after trimming) belong to
    NoteService so that every violation is reported as a 400 with the
    service's message, not as FastAPI's generic 422.
"""

from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class CreateNoteRequest(BaseModel):
    """Body of POST /api/notes. Both fields are required."""

    title: Any = Field(
        default=None,
        description="Note title (required, non-empty)",
        json_schema_extra={"type": "string", "example": "Groceries"},
    )
    content: Any = Field(
        default=None,
        description="Note body (required, non-empty)",
        json_schema_extra={"type": "string", "example": "Milk, eggs, coffee"},
    )

    model_config = ConfigDict(
        json_schema_extra={"required": ["title", "content"]},
    )


class UpdateNoteRequest(BaseModel):
    """
    Body of PUT /api/notes/{id}.

    Only the fields present in the JSON body are applied; an explicit null
    counts as present (and is rejected by the service).
    """

    title: Any = Field(
        default=None,
        description="New title (optional, non-empty if provided)",
        json_schema_extra={"type": "string"},
    )
    content: Any = Field(
        default=None,
        description="New content (optional, non-empty if provided)",
        json_schema_extra={"type": "string"},
    )

    def provided_fields(self) -> dict:
        """Fields the client actually sent, including explicit nulls."""
        return self.model_dump(include={"title", "content"}, exclude_unset=True)


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(_CamelModel):
    """Full representation of a note, as returned by every note endpoint."""

    id: str = Field(description="Unique note identifier (UUID v4)")
    title: str = Field(description="Note title (trimmed)")
    content: str = Field(description="Note content (trimmed)")
    created_at: datetime = Field(description="When the note was created (UTC ISO 8601)")
    updated_at: datetime = Field(description="When the note was last modified (UTC ISO 8601)")


class NoteListResponse(BaseModel):
    """Response of GET /api/notes."""

    items: List[NoteResponse] = Field(description="Matching notes in insertion order")
    count: int = Field(description="Number of items returned")


class DeleteNoteResponse(_CamelModel):
    """Confirmation returned by DELETE /api/notes/{id}."""

    success: bool = Field(default=True)
    deleted_id: str = Field(description="Id of the note that was removed")


class ErrorResponse(BaseModel):
    """
    Error body shared by every failing endpoint.

    Example:
        {"error": "Note not found"}
    """

    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Response of GET /, used by container health checks."""

    status: str = Field(description="Service status", examples=["ok"])
    message: str = Field(description="Human-readable status", examples=["Service is healthy"])
    timestamp: datetime = Field(description="Server time of the check (UTC)")
    environment: str = Field(description="Deployment environment", examples=["development"])
