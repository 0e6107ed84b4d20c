"""
Notes API: Notes Route Handlers
================================

What:  CRUD endpoints under /api/notes.
How:   Each handler extracts path/query/body values, delegates to NoteService
       and returns its response schema. Errors raised by the service are
       turned into JSON responses by the global handlers in main.py.

Route Inventory:
    GET    /api/notes          list notes (optional ?q= search)
    GET    /api/notes/{id}     get one note
    POST   /api/notes          create a note (201)
    PUT    /api/notes/{id}     partially update a note
    DELETE /api/notes/{id}     delete a note
"""

import logging
from typing import Annotated, Optional

from fastapi import APIRouter, Body, Depends, Path, Query, status

from notes_api.schemas.note import (
    CreateNoteRequest,
    DeleteNoteResponse,
    ErrorResponse,
    NoteListResponse,
    NoteResponse,
    UpdateNoteRequest,
)
from notes_api.services.note_service import NoteService, get_note_service

logger = logging.getLogger(__name__)

# ── Router Configuration ──────────────────────────────────────────────────
router = APIRouter(prefix="/api/notes", tags=["Notes"])

_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}
_INVALID = {400: {"description": "Validation error", "model": ErrorResponse}}

# Ids are opaque strings: a malformed id is just an unknown one (404, not 422)
NoteId = Annotated[str, Path(description="Note ID")]


@router.get(
    "",
    response_model=NoteListResponse,
    summary="List notes",
    description="Returns all notes, optionally filtered by a search term in title or content.",
)
async def list_notes(
    q: Optional[str] = Query(
        default=None,
        description="Optional search term to filter notes by title or content",
    ),
    service: NoteService = Depends(get_note_service),
) -> NoteListResponse:
    return service.list_notes(q=q)


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses=_NOT_FOUND,
    summary="Get a note by id",
)
async def get_note(
    note_id: NoteId,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return service.get_note(note_id)


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
    summary="Create a new note",
)
async def create_note(
    payload: Optional[CreateNoteRequest] = Body(default=None),
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """
    Create a note from `{title, content}`.

    A missing body is treated like an empty object, so the client gets the
    title error rather than a schema error.
    """
    payload = payload or CreateNoteRequest()
    return service.create_note(title=payload.title, content=payload.content)


@router.put(
    "/{note_id}",
    response_model=NoteResponse,
    responses={**_INVALID, **_NOT_FOUND},
    summary="Update an existing note",
)
async def update_note(
    note_id: NoteId,
    payload: Optional[UpdateNoteRequest] = Body(default=None),
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """Apply whichever of `title` / `content` the body carries."""
    fields = payload.provided_fields() if payload is not None else {}
    return service.update_note(note_id, fields)


@router.delete(
    "/{note_id}",
    response_model=DeleteNoteResponse,
    responses=_NOT_FOUND,
    summary="Delete a note by id",
)
async def delete_note(
    note_id: NoteId,
    service: NoteService = Depends(get_note_service),
) -> DeleteNoteResponse:
    return service.delete_note(note_id)
