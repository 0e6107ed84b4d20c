"""
Notes API: In-Memory Note Store
================================

What:  Process-lifetime ordered collection of Note records.
How:   A Python list in insertion order, searched by linear scan on `id`.
       No indexing, no capacity limits, no eviction. The collection starts
       empty on every process start and is never persisted.
Who:   Owned by NoteService; nothing else mutates it.

Id Invariant:
    Every id handed out by new_id() is remembered for the lifetime of the
    store, including ids of deleted notes, so an id is never reused.
"""

import logging
import uuid
from typing import List, Optional, Set

from notes_api.models.note import Note

logger = logging.getLogger(__name__)


class NoteStore:
    """Ordered, in-memory sequence of notes."""

    def __init__(self) -> None:
        self._notes: List[Note] = []
        self._issued_ids: Set[str] = set()

    def __len__(self) -> int:
        return len(self._notes)

    def new_id(self) -> str:
        """Return a UUID4 string that this store has never issued before."""
        while True:
            note_id = str(uuid.uuid4())
            if note_id not in self._issued_ids:
                self._issued_ids.add(note_id)
                return note_id
            logger.warning("UUID collision on %s, regenerating", note_id)

    def all(self) -> List[Note]:
        """Snapshot of every note in insertion order."""
        return list(self._notes)

    def _index_of(self, note_id: str) -> int:
        for idx, note in enumerate(self._notes):
            if note.id == note_id:
                return idx
        return -1

    def find(self, note_id: str) -> Optional[Note]:
        idx = self._index_of(note_id)
        return self._notes[idx] if idx != -1 else None

    def add(self, note: Note) -> Note:
        self._issued_ids.add(note.id)
        self._notes.append(note)
        return note

    def replace(self, note: Note) -> bool:
        """Swap the stored record with the same id, keeping its position."""
        idx = self._index_of(note.id)
        if idx == -1:
            return False
        self._notes[idx] = note
        return True

    def remove(self, note_id: str) -> Optional[Note]:
        idx = self._index_of(note_id)
        if idx == -1:
            return None
        return self._notes.pop(idx)

    def clear(self) -> int:
        """Drop every note and return how many were discarded."""
        count = len(self._notes)
        self._notes.clear()
        return count
