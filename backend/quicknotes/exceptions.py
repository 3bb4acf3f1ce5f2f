"""
QuickNotes Backend - Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the two expected error outcomes.
How:   Each exception carries a message and an optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return `{"error": <message>}` JSON bodies with the matching status.
Who:   Raised by route handlers; caught by global handlers.

Exception Hierarchy:
    QuickNotesError (base)
    ├── ValidationError   → 400 Bad Request (missing required field)
    └── NotFoundError     → 404 Not Found (unknown note id)

The note store itself never raises: it signals "not found" with None and
the routes translate that into NotFoundError.
"""

from typing import Any, Dict, Optional


class QuickNotesError(Exception):
    """
    Base exception for all QuickNotes application errors.

    Attributes:
        message:  User-facing error description (returned in the API response)
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(QuickNotesError):
    """
    Raised when client input fails a presence check.

    When:    POST /notes without `title` or `content`.
    HTTP:    400 Bad Request

    Example response:
        {"error": "Title and content are required"}
    """

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


class NotFoundError(QuickNotesError):
    """
    Raised when a requested note does not exist.

    When:    GET/PUT/DELETE /notes/{id} with an id the store does not hold,
             including ids that were deleted and ids that are not integers.
    HTTP:    404 Not Found

    The response message is fixed ("Note not found"); the raw id is kept
    in the context for logging.
    """

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
