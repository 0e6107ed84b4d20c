"""
Notes API: Note Domain Record
==============================

What:  The in-memory representation of a single note.
How:   A plain dataclass held by NoteStore. API serialization is handled
       separately by the Pydantic schemas in schemas/note.py.

Lifecycle:
    1. Created by NoteService.create() with a fresh UUID4 id and
       created_at == updated_at
    2. Replaced in place by NoteService.update() (title/content merged,
       updated_at refreshed)
    3. Removed by NoteService.delete(); its id is never issued again
"""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class Note:
    """A titled text record with lifecycle timestamps (UTC, timezone-aware)."""

    id: str
    title: str
    content: str
    created_at: datetime
    updated_at: datetime

    def matches(self, term: str) -> bool:
        """Case-insensitive substring match against title or content."""
        needle = term.lower()
        return needle in self.title.lower() or needle in self.content.lower()
