from typing import List

from fastapi import APIRouter, Depends, Path, Response, status

from notes_backend.api.deps import get_todo_store
from notes_backend.api.schemas import TodoIn, TodoOut, clean_title
from notes_backend.api.todos import TodoStore

router = APIRouter(prefix="/todos", tags=["Todos"])



@router.get("", response_model=List[TodoOut], summary="List todos")
def list_todos(store: TodoStore = Depends(get_todo_store)):
    return store.list()


@router.post("", response_model=TodoOut, status_code=status.HTTP_201_CREATED, summary="Create a todo")
def create_todo(todo: TodoIn, store: TodoStore = Depends(get_todo_store)):
    return store.create(clean_title(todo.title), todo.done)


@router.put("/{todo_id}", response_model=TodoOut, summary="Update a todo")
def update_todo(todo: TodoIn, todo_id: int = Path(..., gt=0), store: TodoStore = Depends(get_todo_store)):
    return store.update(todo_id, clean_title(todo.title), todo.done)


@router.delete("/{todo_id}", status_code=status.HTTP_204_NO_CONTENT, summary="Delete a todo")
def delete_todo(todo_id: int = Path(..., gt=0), store: TodoStore = Depends(get_todo_store)):
    store.delete(todo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
