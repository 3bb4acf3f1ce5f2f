"""
QuickNotes Backend - Notes Route Handlers
===========================================

What:  CRUD endpoints for notes under /notes.
How:   Checks presence of required fields, delegates to the NoteStore,
       and turns a None result into NotFoundError (→ 404 via the global
       exception handler).

Route Inventory:
    GET    /notes        list all notes                     200
    POST   /notes        create a note                      201 / 400
    GET    /notes/{id}   fetch one note                     200 / 404
    PUT    /notes/{id}   replace title and/or content       200 / 404
    DELETE /notes/{id}   remove a note                      200 / 404
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from quicknotes.exceptions import NotFoundError, ValidationError
from quicknotes.schemas.note import (
    ErrorResponse,
    NoteCreate,
    NoteDeletedResponse,
    NoteResponse,
    NoteUpdate,
)
from quicknotes.services.note_store import NoteStore
from quicknotes.storage import get_note_store

MISSING_FIELDS_MESSAGE = "Title and content are required"

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(tags=["Notes"])


def parse_note_id(raw_id: str) -> int:
    """
    Parse the `{id}` path segment.

    Only plain ASCII digit strings name a note; `int()` alone would also
    accept forms like "1_0", "+1", " 1" or non-ASCII digits. Anything else
    is reported as not found rather than as a malformed request.
    """
    if not (raw_id.isascii() and raw_id.isdigit()):
        raise NotFoundError(resource_id=raw_id)
    return int(raw_id)


@router.get(
    "/notes",
    response_model=List[NoteResponse],
    summary="List all notes",
    description="Returns every note in creation order.",
)
async def list_notes(store: NoteStore = Depends(get_note_store)) -> List[NoteResponse]:
    return [NoteResponse.model_validate(note) for note in store.get_all_notes()]


@router.post(
    "/notes",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        201: {"description": "Note created", "model": NoteResponse},
        400: {"description": "Title or content missing", "model": ErrorResponse},
    },
    summary="Create a note",
    description="Creates a note from `title` and `content`; both keys must be present.",
)
async def create_note(
    payload: Optional[NoteCreate] = None,
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    """
    Create a note.

    An absent or null `title`/`content` is rejected; empty strings are
    accepted as given.
    """
    if payload is None:
        raise ValidationError(message=MISSING_FIELDS_MESSAGE)

    missing = payload.missing_fields()
    if missing:
        raise ValidationError(
            message=MISSING_FIELDS_MESSAGE,
            field=missing[0],
            context={"missing": missing},
        )

    note = store.add_note(payload.title, payload.content)
    return NoteResponse.model_validate(note)


@router.get(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        200: {"description": "The note", "model": NoteResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    note = store.get_note_by_id(parse_note_id(note_id))
    if note is None:
        raise NotFoundError(resource_id=note_id)
    return NoteResponse.model_validate(note)


@router.put(
    "/notes/{note_id}",
    response_model=NoteResponse,
    responses={
        200: {"description": "The updated note", "model": NoteResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Update a note",
    description=(
        "Replaces the note's title and content. The id never changes; "
        "a field left out of the body keeps its current value."
    ),
)
async def update_note(
    note_id: str,
    payload: Optional[NoteUpdate] = None,
    store: NoteStore = Depends(get_note_store),
) -> NoteResponse:
    changes = payload or NoteUpdate()
    note = store.update_note(
        parse_note_id(note_id),
        title=changes.title,
        content=changes.content,
    )
    if note is None:
        raise NotFoundError(resource_id=note_id)
    return NoteResponse.model_validate(note)


@router.delete(
    "/notes/{note_id}",
    response_model=NoteDeletedResponse,
    responses={
        200: {"description": "Note deleted", "model": NoteDeletedResponse},
        404: {"description": "Note not found", "model": ErrorResponse},
    },
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    store: NoteStore = Depends(get_note_store),
) -> NoteDeletedResponse:
    """Delete a note and echo back its last-known values."""
    note = store.delete_note(parse_note_id(note_id))
    if note is None:
        raise NotFoundError(resource_id=note_id)
    return NoteDeletedResponse(
        message="Note deleted",
        deleted_note=NoteResponse.model_validate(note),
    )
