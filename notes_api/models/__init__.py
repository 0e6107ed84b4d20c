# Models package init
from notes_api.models.note import Note

__all__ = ["Note"]
