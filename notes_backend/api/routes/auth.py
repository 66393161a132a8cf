from fastapi import APIRouter, Depends, Response, status

from notes_backend.api.credentials import CredentialStore
from notes_backend.api.deps import get_credential_store, get_session_issuer, require_user
from notes_backend.api.schemas import Credentials, Message, UserOut
from notes_backend.api.sessions import SessionIssuer

router = APIRouter(tags=["Authentication"])


# PUBLIC_INTERFACE
@router.post("/register", response_model=UserOut, status_code=status.HTTP_201_CREATED,
             summary="Register a new user")
def register(body: Credentials, store: CredentialStore = Depends(get_credential_store)):
    """
    Register a new user.
    Returns the newly created user record (excluding password). 409 if the username is taken.
    """
    return store.register(body.username, body.password)


# PUBLIC_INTERFACE
@router.post("/login", response_model=UserOut, summary="Login and receive a session cookie")
def login(
    body: Credentials,
    response: Response,
    store: CredentialStore = Depends(get_credential_store),
    sessions: SessionIssuer = Depends(get_session_issuer),
):
    """
    User login. Sets the `session_token` cookie on success; 401 otherwise.
    """
    user_id = store.verify(body.username, body.password)
    sessions.issue(response, user_id)
    return UserOut(id=user_id, username=body.username)


# PUBLIC_INTERFACE
@router.post("/logout", response_model=Message, summary="Clear the session cookie")
def logout(response: Response, sessions: SessionIssuer = Depends(get_session_issuer)):
    sessions.revoke(response)
    return {"message": "logged out"}


# PUBLIC_INTERFACE
@router.get("/check-auth", response_model=Message, summary="Check the session cookie")
def check_auth(user_id: int = Depends(require_user)):
    return {"message": "authenticated"}
