"""
Notes API: Custom Exception Hierarchy
======================================

What:  Application-specific exceptions for the two failure modes of the notes
       service: bad client input and unknown note ids.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) turn them into
       `{"error": message}` JSON responses with the matching status code.
Who:   Raised by NoteService; caught by the handlers in main.py.

Exception Hierarchy:
    NotesAPIError (base)
    ├── ValidationError   → 400 Bad Request
    └── NotFoundError     → 404 Not Found
"""

from typing import Any, Dict, Optional


class NotesAPIError(Exception):
    """
    Base exception for all Notes API errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        context:  Additional debug info (logged, never returned to the client)
    """

    status_code = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(NotesAPIError):
    """
    Raised when a request body fails the note field rules.

    When:    Missing, non-string or whitespace-only title/content, or an update
             that names no field at all.
    HTTP:    400 Bad Request
    """

    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class NotFoundError(NotesAPIError):
    """
    Raised when a note id is not present in the store.

    HTTP:    404 Not Found

    The message never echoes the id back; the id is kept in `context`
    for the server log.
    """

    status_code = 404

    def __init__(
        self,
        resource: str = "Note",
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=f"{resource} not found", context=ctx)
        self.resource_id = resource_id
