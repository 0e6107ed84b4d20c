"""
Notes API: Note Service (Business Logic)
=========================================

What:  Validation and CRUD logic for notes, independent of HTTP concerns.
How:   NoteService owns a NoteStore and exposes list/get/create/update/delete.
       Rule violations raise ValidationError (→ 400); unknown ids raise
       NotFoundError (→ 404). Routes never inspect the store directly.
Who:   Called by the route handlers in routes/notes.py through the
       get_note_service dependency.

Field Rules:
    create: title and content must both be strings that are non-empty after
            trimming; title is checked first
    update: the id is resolved first; then each provided field must satisfy
            the same rule (title before content); at least one field must be
            provided
    Stored values are always the trimmed strings (see TRIM_CHARS).
"""

import logging
from datetime import datetime, timezone
from typing import Any, Callable, Dict, Optional

from notes_api.exceptions import NotFoundError, ValidationError
from notes_api.models.note import Note
from notes_api.schemas.note import (
    DeleteNoteResponse,
    NoteListResponse,
    NoteResponse,
)
from notes_api.store import NoteStore

logger = logging.getLogger(__name__)

NOTE_FIELDS = ("title", "content")

# Whitespace removed around titles and content: ASCII whitespace, the line and
# paragraph separators, the BOM and the Unicode space separators (Zs).
# Not str.strip()'s set, which keeps U+FEFF and also removes U+001C-U+001F
# and U+0085.
TRIM_CHARS = (
    "\t\n\v\f\r \u00a0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def trim(value: str) -> str:
    return value.strip(TRIM_CHARS)


def _is_blank(value: Any) -> bool:
    """True unless value is a string with non-whitespace content."""
    return not isinstance(value, str) or not trim(value)


def to_response(note: Note) -> NoteResponse:
    return NoteResponse(
        id=note.id,
        title=note.title,
        content=note.content,
        created_at=note.created_at,
        updated_at=note.updated_at,
    )


class NoteService:
    """
    Business logic layer for note operations.

    Responsibilities:
        - list_notes(): all notes, optionally filtered by a search term
        - get_note(): single note retrieval with not-found handling
        - create_note(): validate, stamp and append a new note
        - update_note(): validate and merge a partial update
        - delete_note(): remove a note by id

    Args:
        store: The collection to operate on (a fresh NoteStore by default)
        clock: Callable returning the current aware UTC datetime
    """

    def __init__(
        self,
        store: Optional[NoteStore] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.store = store if store is not None else NoteStore()
        self._clock = clock

    def list_notes(self, q: Optional[str] = None) -> NoteListResponse:
        """
        Return every note, or only those whose title or content contains `q`.

        Matching is a case-insensitive substring test. An empty or missing
        `q` returns the whole collection.
        """
        notes = self.store.all()
        if q:
            notes = [note for note in notes if note.matches(q)]
        logger.debug("Listed %d notes (q=%r)", len(notes), q)
        return NoteListResponse(
            items=[to_response(note) for note in notes],
            count=len(notes),
        )

    def _require(self, note_id: str) -> Note:
        note = self.store.find(note_id)
        if note is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        return note

    def get_note(self, note_id: str) -> NoteResponse:
        """
        Raises:
            NotFoundError: No note with this id exists (→ 404)
        """
        return to_response(self._require(note_id))

    def create_note(self, title: Any, content: Any) -> NoteResponse:
        """
        Validate and append a new note.

        The id is a UUID4 never issued before by this store, and created_at
        equals updated_at.

        Raises:
            ValidationError: title or content missing, not a string, or
                             whitespace-only (→ 400)
        """
        if _is_blank(title):
            raise ValidationError(
                message="Title is required and must be a non-empty string",
                field="title",
            )
        if _is_blank(content):
            raise ValidationError(
                message="Content is required and must be a non-empty string",
                field="content",
            )

        now = self._clock()
        note = self.store.add(
            Note(
                id=self.store.new_id(),
                title=trim(title),
                content=trim(content),
                created_at=now,
                updated_at=now,
            )
        )
        logger.info("Note created: %s", note.id)
        return to_response(note)

    def update_note(self, note_id: str, fields: Dict[str, Any]) -> NoteResponse:
        """
        Apply a partial update to an existing note.

        Args:
            note_id: Id of the note to update
            fields:  The subset of {"title", "content"} the client sent.
                     A key mapped to None counts as provided.

        Raises:
            NotFoundError:   Unknown id (checked before the body)
            ValidationError: A provided field is invalid, or none provided
        """
        current = self._require(note_id)

        for name in NOTE_FIELDS:
            if name in fields and _is_blank(fields[name]):
                raise ValidationError(
                    message=f"If provided, {name} must be a non-empty string",
                    field=name,
                )
        if not any(name in fields for name in NOTE_FIELDS):
            raise ValidationError(
                message="Provide at least one of title or content to update",
            )

        # updated_at never moves backwards, even if the clock does
        now = max(self._clock(), current.updated_at)
        updated = Note(
            id=current.id,
            title=trim(fields["title"]) if "title" in fields else current.title,
            content=trim(fields["content"]) if "content" in fields else current.content,
            created_at=current.created_at,
            updated_at=now,
        )
        self.store.replace(updated)
        logger.info("Note updated: %s (%s)", note_id, ", ".join(sorted(fields)))
        return to_response(updated)

    def delete_note(self, note_id: str) -> DeleteNoteResponse:
        """
        Raises:
            NotFoundError: No note with this id exists (→ 404)
        """
        removed = self.store.remove(note_id)
        if removed is None:
            raise NotFoundError(resource="Note", resource_id=note_id)
        logger.info("Note deleted: %s", removed.id)
        return DeleteNoteResponse(success=True, deleted_id=removed.id)


# ── Singleton Instance ────────────────────────────────────────────────────
# The process-wide collection lives here for the lifetime of the process
note_service = NoteService()


def get_note_service() -> NoteService:
    """FastAPI dependency returning the process-wide NoteService."""
    return note_service
