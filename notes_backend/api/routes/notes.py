from typing import List, Optional

from fastapi import APIRouter, Depends, Path, Query, Response, status

from notes_backend.api.deps import get_note_store, require_user
from notes_backend.api.notes import NoteStore
from notes_backend.api.schemas import NoteIn, NoteOut, clean_title

router = APIRouter(prefix="/notes", tags=["Notes"])



# PUBLIC_INTERFACE
@router.get("", response_model=List[NoteOut], summary="List all user notes")
def list_notes(
    q: Optional[str] = Query(None, description="Search term for note title or content"),
    user_id: int = Depends(require_user),
    store: NoteStore = Depends(get_note_store),
):
    """
    Get all notes for the authenticated user, newest first.
    """
    return store.list(user_id, q)


# PUBLIC_INTERFACE
@router.post("", response_model=NoteOut, status_code=status.HTTP_201_CREATED, summary="Create a new note")
def create_note(
    note: NoteIn,
    user_id: int = Depends(require_user),
    store: NoteStore = Depends(get_note_store),
):
    """
    Create a new note for the authenticated user.
    """
    return store.create(user_id, clean_title(note.title), note.content)


# PUBLIC_INTERFACE
@router.get("/{note_id}", response_model=NoteOut, summary="Get a single note")
def get_note(
    note_id: int = Path(..., gt=0),
    user_id: int = Depends(require_user),
    store: NoteStore = Depends(get_note_store),
):
    return store.get(user_id, note_id)


# PUBLIC_INTERFACE
@router.put("/{note_id}", response_model=NoteOut, summary="Update a note")
def update_note(
    note: NoteIn,
    note_id: int = Path(..., gt=0),
    user_id: int = Depends(require_user),
    store: NoteStore = Depends(get_note_store),
):
    """
    Replace title and content of a note belonging to the authenticated user.
    """
    return store.update(user_id, note_id, clean_title(note.title), note.content)


# PUBLIC_INTERFACE
@router.delete("/{note_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a note")
def delete_note(
    note_id: int = Path(..., gt=0),
    user_id: int = Depends(require_user),
    store: NoteStore = Depends(get_note_store),
):
    store.delete(user_id, note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
