"""
Credential store: registers users and verifies login attempts.

Passwords are hashed with bcrypt through passlib; plaintext is never stored.
"""
import logging

from passlib.context import CryptContext
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from notes_backend.api.errors import BadRequestError, ConflictError, InvalidCredentials, StorageError
from notes_database.models import User

logger = logging.getLogger("notes_backend.credentials")

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def verify_password(plain_password, hashed_password):
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password):
    return pwd_context.hash(password)


# PUBLIC_INTERFACE
class CredentialStore:
    """Reads and writes the users table through one SQLAlchemy session."""

    def __init__(self, db):
        self.db = db

    def register(self, username: str, password: str) -> User:
        """
        Creates a user. Username uniqueness is enforced by the table's
        unique constraint; a violation becomes ConflictError.
        """
        try:
            password_hash = get_password_hash(password)
        except ValueError:
            raise BadRequestError("invalid password")
        user = User(username=username, password_hash=password_hash)
        self.db.add(user)
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise ConflictError("username already taken", context={"username": username})
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.error("register insert: %s", exc)
            raise StorageError(context={"operation": "register"}) from exc
        self.db.refresh(user)
        return user

    def verify(self, username: str, password: str) -> int:
        """
        Returns the user id for a valid username/password pair.

        Unknown usernames and wrong passwords raise the same InvalidCredentials.
        An unknown username still costs one hash comparison.
        """
        try:
            user = self.db.execute(
                select(User).where(User.username == username)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            logger.error("login query: %s", exc)
            raise StorageError(context={"operation": "login"}) from exc
        if user is None:
            pwd_context.dummy_verify()
            raise InvalidCredentials()
        try:
            valid = verify_password(password, user.password_hash)
        except ValueError:
            valid = False
        if not valid:
            raise InvalidCredentials()
        return user.id

    def exists(self, user_id: int) -> bool:
        try:
            found = self.db.execute(select(User.id).where(User.id == user_id)).first()
        except SQLAlchemyError as exc:
            logger.error("session user lookup: %s", exc)
            raise StorageError(context={"operation": "session user lookup"}) from exc
        return found is not None
