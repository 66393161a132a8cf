"""
Note store.

Every method takes the owner's user id as its first argument and filters on
it in the SQL WHERE clause. A note owned by someone else is
indistinguishable from a note that does not exist.
"""
import logging
from typing import List, Optional

from sqlalchemy import delete, or_, select, update
from sqlalchemy.exc import SQLAlchemyError

from notes_backend.api.errors import NotFoundError, StorageError
from notes_database.models import Note

logger = logging.getLogger("notes_backend.notes")


# PUBLIC_INTERFACE
class NoteStore:
    def __init__(self, db):
        self.db = db

    def _fail(self, operation: str, exc: Exception):
        self.db.rollback()
        logger.error("%s: %s", operation, exc)
        return StorageError(context={"operation": operation})

    def list(self, owner_id: int, q: Optional[str] = None) -> List[Note]:
        """Owner's notes, newest first. Optional q matches title or content."""
        query = select(Note).where(Note.user_id == owner_id)
        if q:
            query = query.where(or_(
                Note.title.icontains(q, autoescape=True),
                Note.content.icontains(q, autoescape=True),
            ))
        try:
            return list(self.db.execute(query.order_by(Note.id.desc())).scalars())
        except SQLAlchemyError as exc:
            raise self._fail("getNotes query", exc) from exc

    def get(self, owner_id: int, note_id: int) -> Note:
        try:
            note = self.db.execute(
                select(Note).where(Note.id == note_id, Note.user_id == owner_id)
            ).scalar_one_or_none()
        except SQLAlchemyError as exc:
            raise self._fail("getNote query", exc) from exc
        if note is None:
            raise NotFoundError("note not found")
        return note

    def create(self, owner_id: int, title: str, content: Optional[str]) -> Note:
        note = Note(user_id=owner_id, title=title, content=content)
        self.db.add(note)
        try:
            self.db.commit()
            self.db.refresh(note)
        except SQLAlchemyError as exc:
            raise self._fail("createNote insert", exc) from exc
        return note

    def update(self, owner_id: int, note_id: int, title: str, content: Optional[str]) -> Note:
        """Single UPDATE filtered by id and owner. Zero rows affected is NotFoundError."""
        try:
            result = self.db.execute(
                update(Note)
                .where(Note.id == note_id, Note.user_id == owner_id)
                .values(title=title, content=content)
                .execution_options(synchronize_session=False)
            )
            affected = result.rowcount
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("updateNote update", exc) from exc
        if affected == 0:
            raise NotFoundError("note not found")
        return Note(id=note_id, user_id=owner_id, title=title, content=content)

    def delete(self, owner_id: int, note_id: int) -> None:
        """Single DELETE filtered by id and owner. Zero rows affected is NotFoundError."""
        try:
            result = self.db.execute(
                delete(Note)
                .where(Note.id == note_id, Note.user_id == owner_id)
                .execution_options(synchronize_session=False)
            )
            affected = result.rowcount
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._fail("deleteNote delete", exc) from exc
        if affected == 0:
            raise NotFoundError("note not found")
