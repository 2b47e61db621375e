"""Todo store - file-backed data access layer."""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import List, Optional

from pydantic import TypeAdapter, ValidationError

from ..models.todo import Todo

logger = logging.getLogger(__name__)

_todo_list_adapter = TypeAdapter(List[Todo])


class StoreLoadError(RuntimeError):
    """The backing file is missing, unreadable or malformed."""


class TodoStore:
    """Ordered in-memory todos, written through to a JSON file on every change.

    The whole file is rewritten on each mutation. A single lock guards every
    read-modify-persist sequence because FastAPI serves sync endpoints from a
    thread pool.
    """

    def __init__(self, path: Path, todos: Optional[List[Todo]] = None) -> None:
        self.path = Path(path)
        self._todos: List[Todo] = list(todos or [])
        self._lock = threading.RLock()

    @classmethod
    def load(cls, path: Path) -> "TodoStore":
        """Read the backing file. There is no fallback to an empty store."""
        path = Path(path)
        try:
            raw = path.read_bytes()
        except OSError as exc:
            raise StoreLoadError(f"Cannot read todo data file {path}: {exc}") from exc
        try:
            todos = _todo_list_adapter.validate_json(raw)
        except ValidationError as exc:
            raise StoreLoadError(f"Malformed todo data file {path}: {exc}") from exc

        seen: set[str] = set()
        for todo in todos:
            if todo.id in seen:
                raise StoreLoadError(f"Duplicate todo id {todo.id!r} in {path}")
            seen.add(todo.id)

        logger.info("Loaded %d todos from %s", len(todos), path)
        return cls(path, todos)

    def __len__(self) -> int:
        with self._lock:
            return len(self._todos)

    def list_all(self) -> List[Todo]:
        with self._lock:
            return list(self._todos)

    def find_by_id(self, todo_id: str) -> Optional[Todo]:
        with self._lock:
            return self._find(todo_id)

    def insert(self, todo: Todo) -> Todo:
        with self._lock:
            self._todos.append(todo)
            self.persist()
            return todo

    def update_completed(self, todo_id: str, completed: bool) -> Optional[Todo]:
        with self._lock:
            todo = self._find(todo_id)
            if todo is None:
                return None
            todo.completed = completed
            self.persist()
            return todo

    def remove(self, todo_id: str) -> Optional[Todo]:
        with self._lock:
            for index, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    removed = self._todos.pop(index)
                    self.persist()
                    return removed
            return None

    def persist(self) -> None:
        """Overwrite the backing file with the full sequence.

        Write errors propagate; the in-memory change is not rolled back.
        """
        with self._lock:
            payload = [todo.model_dump(by_alias=True) for todo in self._todos]
            self.path.write_text(
                json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8"
            )
            logger.debug("Persisted %d todos to %s", len(payload), self.path)

    def _find(self, todo_id: str) -> Optional[Todo]:
        for todo in self._todos:
            if todo.id == todo_id:
                return todo
        return None
