"""Todo service - business logic layer."""

from __future__ import annotations

import logging
from typing import List, Optional

from ..models.todo import Todo, TodoCreate, TodoUpdate
from ..repositories.todo_store import TodoStore

logger = logging.getLogger(__name__)

TEXT_REQUIRED = "Text is required"


class TodoService:
    """Validates requests and drives the store."""

    def __init__(self, store: TodoStore) -> None:
        self.store = store

    def list_todos(self) -> List[Todo]:
        """Get all todos in insertion order."""
        return self.store.list_all()

    def get_todo(self, todo_id: str) -> Optional[Todo]:
        """Get a specific todo by ID."""
        return self.store.find_by_id(todo_id)

    def create_todo(self, todo_data: TodoCreate) -> Todo:
        """Create a new todo item."""
        if not todo_data.text:
            raise ValueError(TEXT_REQUIRED)
        todo = self.store.insert(Todo(text=todo_data.text))
        logger.info("Created todo %s", todo.id)
        return todo

    def update_todo(self, todo_id: str, todo_data: TodoUpdate) -> Optional[Todo]:
        """Apply ``completed`` when given; other fields are not updatable."""
        if todo_data.completed is None:
            return self.store.find_by_id(todo_id)
        return self.store.update_completed(todo_id, todo_data.completed)

    def delete_todo(self, todo_id: str) -> Optional[Todo]:
        """Delete a todo item and return it."""
        removed = self.store.remove(todo_id)
        if removed is not None:
            logger.info("Deleted todo %s", todo_id)
        return removed
