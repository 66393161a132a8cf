"""
In-memory todo store.

One lock guards both the list and the id counter. It is held for each whole
read-modify-write and released before the caller builds a response.
"""
import threading
from dataclasses import dataclass, replace
from typing import List

from notes_backend.api.errors import NotFoundError


@dataclass(frozen=True)
class Todo:
    id: int
    title: str
    done: bool = False


# PUBLIC_INTERFACE
class TodoStore:
    def __init__(self):
        self._lock = threading.Lock()
        self._todos: List[Todo] = []
        self._next_id = 1

    def list(self) -> List[Todo]:
        with self._lock:
            return list(self._todos)

    def create(self, title: str, done: bool = False) -> Todo:
        with self._lock:
            todo = Todo(id=self._next_id, title=title, done=done)
            self._next_id += 1
            self._todos.append(todo)
        return todo

    def update(self, todo_id: int, title: str, done: bool) -> Todo:
        with self._lock:
            for i, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    updated = replace(todo, title=title, done=done)
                    self._todos[i] = updated
                    break
            else:
                raise NotFoundError("todo not found")
        return updated

    def delete(self, todo_id: int) -> None:
        with self._lock:
            for i, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    del self._todos[i]
                    return
        raise NotFoundError("todo not found")
