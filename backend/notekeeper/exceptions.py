"""
NoteKeeper Backend — Custom Exception Hierarchy
=================================================

What:  Application-specific exceptions for the three failure classes of the API.
How:   Each exception carries a client-safe message and an optional context
       dict. Global exception handlers (registered in main.py) translate them
       into JSON error responses with the matching HTTP status code.
Who:   Raised by services and routes; caught by the global handlers.

Exception Hierarchy:
    NoteKeeperError (base)
    ├── ValidationError     → 400 Bad Request (malformed or mis-shaped body)
    ├── UnauthorizedError   → 401 Unauthorized (bad token, bad login, user gone)
    └── DatabaseError       → 500 Internal Server Error (storage failure)

Shape errors detected by FastAPI itself (RequestValidationError) are mapped
onto the same 400 response as ValidationError.
"""

from typing import Any, Dict, Optional


class NoteKeeperError(Exception):
    """
    Base exception for all NoteKeeper application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
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


class ValidationError(NoteKeeperError):
    """
    Raised when a request body cannot be decoded or has the wrong shape.

    HTTP: 400 Bad Request
    """

    def __init__(
        self,
        message: str = "Invalid request format",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class UnauthorizedError(NoteKeeperError):
    """
    Raised when the caller cannot be authenticated.

    When:
        - login credentials match no user
        - the session token is unknown to the registry
        - the session's email no longer resolves to a user
    HTTP: 401 Unauthorized

    The message is deliberately generic so that clients cannot tell which of
    the three cases occurred; `reason` goes to the logs only.
    """

    def __init__(
        self,
        reason: str = "invalid_session",
        message: str = "Unauthorized",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["reason"] = reason
        super().__init__(message=message, context=ctx)
        self.reason = reason


class DatabaseError(NoteKeeperError):
    """
    Raised when a store operation fails (insert, query, delete, commit).

    HTTP: 500 Internal Server Error

    The message returned to the client is always generic; the original
    exception type and operation name are kept in `context` for the logs.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
