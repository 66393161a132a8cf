"""
Application exceptions.

Each class carries the HTTP status it maps to. The handler registered in
main.py turns them into `{"detail": message}` responses. `context` is logged
server-side and never returned to the client.
"""
from typing import Any, Dict, Optional


class NotesAppError(Exception):
    """Base class for all application errors."""

    status_code = 500
    default_message = "internal error"

    def __init__(self, message: Optional[str] = None, context: Optional[Dict[str, Any]] = None):
        self.message = message or self.default_message
        self.context = context or {}
        super().__init__(self.message)


class BadRequestError(NotesAppError):
    """Malformed body, blank required field or invalid id."""

    status_code = 400
    default_message = "bad request"


class UnauthorizedError(NotesAppError):
    status_code = 401
    default_message = "unauthorized"


class InvalidCredentials(UnauthorizedError):
    """Unknown username or wrong password. The two are never distinguished."""

    default_message = "invalid credentials"


class InvalidSession(UnauthorizedError):
    default_message = "invalid session"


class NotFoundError(NotesAppError):
    """
    Row absent, or owned by someone else. Both produce the same response so
    that callers cannot probe for other users' ids.
    """

    status_code = 404
    default_message = "not found"


class ConflictError(NotesAppError):
    status_code = 409
    default_message = "conflict"


class StorageError(NotesAppError):
    """A database call failed. The message stays generic."""

    status_code = 500
    default_message = "db error"
