"""
Request-scoped dependencies: database session, stores and the auth gate.
"""
from typing import Optional

from fastapi import Cookie, Depends, Request

from notes_backend.api.config import SESSION_COOKIE_NAME
from notes_backend.api.credentials import CredentialStore
from notes_backend.api.errors import InvalidSession, UnauthorizedError
from notes_backend.api.notes import NoteStore
from notes_backend.api.sessions import SessionIssuer
from notes_backend.api.todos import TodoStore


# DATABASE Dependency
def get_db(request: Request):
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


def get_credential_store(db=Depends(get_db)) -> CredentialStore:
    return CredentialStore(db)


def get_note_store(db=Depends(get_db)) -> NoteStore:
    return NoteStore(db)


def get_session_issuer(request: Request) -> SessionIssuer:
    return request.app.state.sessions


def get_todo_store(request: Request) -> TodoStore:
    return request.app.state.todos


# PUBLIC_INTERFACE
def require_user(
    session_token: Optional[str] = Cookie(None, alias=SESSION_COOKIE_NAME),
    sessions: SessionIssuer = Depends(get_session_issuer),
    credentials: CredentialStore = Depends(get_credential_store),
) -> int:
    """
    Auth gate. Resolves the session cookie to a user id or rejects with 401.
    Protected handlers take the returned id as a required argument.
    A token whose user no longer exists is rejected like a forged one.
    """
    if not session_token:
        raise UnauthorizedError()
    user_id = sessions.resolve(session_token)
    if not credentials.exists(user_id):
        raise InvalidSession()
    return user_id
