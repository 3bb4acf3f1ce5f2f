"""
QuickNotes Backend - Pydantic Request/Response Schemas
=======================================================

What:  Pydantic models defining the JSON contract of the notes API.
How:   FastAPI uses these models to parse request bodies, serialize
       responses, and generate the OpenAPI documentation.

Request bodies deliberately declare `title` and `content` as optional:
presence is checked by the route so that a missing field yields the
400 "Title and content are required" body instead of FastAPI's 422.
"""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class NoteCreate(BaseModel):
    """Body of POST /notes. Both fields must be present."""
    title: Optional[str] = Field(default=None, description="Note title")
    content: Optional[str] = Field(default=None, description="Note body")

    def missing_fields(self) -> List[str]:
        return [name for name in ("title", "content") if getattr(self, name) is None]


class NoteUpdate(BaseModel):
    """Body of PUT /notes/{id}. An omitted field keeps its current value."""
    title: Optional[str] = Field(default=None, description="New note title")
    content: Optional[str] = Field(default=None, description="New note body")


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class NoteResponse(BaseModel):
    """
    What:  Full representation of a note.
    Who:   Returned by every notes endpoint that yields a single note, and
           as the items of GET /notes.
    """
    id: int = Field(description="Note identifier assigned by the store")
    title: str = Field(description="Note title")
    content: str = Field(description="Note body")

    model_config = ConfigDict(from_attributes=True)


class NoteDeletedResponse(BaseModel):
    """
    What:  Confirmation returned by DELETE /notes/{id}.

    Example:
        {"message": "Note deleted", "deletedNote": {"id": 1, "title": "T1", "content": "C1"}}
    """
    message: str = Field(default="Note deleted", description="Human-readable confirmation")
    deleted_note: NoteResponse = Field(
        alias="deletedNote",
        description="The removed note with its last-known values",
    )

    model_config = ConfigDict(populate_by_name=True)


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Error body shared by every failing endpoint.

    Example:
        {"error": "Note not found"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health."""
    status: str = Field(description="Overall service status")
    version: str = Field(description="Application version")
    notes: int = Field(description="Number of notes currently held in memory")
    uptime_seconds: float = Field(description="Seconds since service started")
