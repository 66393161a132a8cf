"""
Session issuer.

The session token is a JWT whose subject is the user id, signed with the
application's secret key and valid for 24 hours. It travels in the
`session_token` cookie. There is no server-side session table, so logging
out only tells the client to drop the cookie.

A cookie holding a bare user id is not accepted: it would let any client
claim any account.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt

from notes_backend.api.config import SESSION_COOKIE_NAME, SESSION_LIFETIME_HOURS
from notes_backend.api.errors import InvalidSession

ALGORITHM = "HS256"


# PUBLIC_INTERFACE
class SessionIssuer:
    def __init__(self, secret_key: str, lifetime: timedelta = timedelta(hours=SESSION_LIFETIME_HOURS),
                 secure: bool = False, cookie_name: str = SESSION_COOKIE_NAME):
        self.secret_key = secret_key
        self.lifetime = lifetime
        self.secure = secure
        self.cookie_name = cookie_name

    def create_token(self, user_id: int, now: Optional[datetime] = None) -> str:
        now = now or datetime.now(timezone.utc)
        claims = {"sub": str(user_id), "iat": now, "exp": now + self.lifetime}
        return jwt.encode(claims, self.secret_key, algorithm=ALGORITHM)

    def issue(self, response, user_id: int) -> str:
        """Mints a token for user_id and sets it as an HttpOnly cookie on the response."""
        token = self.create_token(user_id)
        max_age = int(self.lifetime.total_seconds())
        response.set_cookie(
            key=self.cookie_name,
            value=token,
            max_age=max_age,
            expires=max_age,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )
        return token

    def revoke(self, response) -> None:
        """Tells the client to discard the session cookie immediately."""
        response.delete_cookie(
            key=self.cookie_name,
            path="/",
            httponly=True,
            secure=self.secure,
            samesite="lax",
        )

    def resolve(self, token: str) -> int:
        """Decodes a token back to a user id. Raises InvalidSession on any defect."""
        try:
            payload = jwt.decode(token, self.secret_key, algorithms=[ALGORITHM])
        except JWTError:
            raise InvalidSession()
        subject = payload.get("sub")
        if not isinstance(subject, str) or not subject.isdigit():
            raise InvalidSession()
        user_id = int(subject)
        if user_id <= 0:
            raise InvalidSession()
        return user_id
