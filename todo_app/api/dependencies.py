"""API dependencies for todo management."""

from fastapi import Depends, HTTPException, Request

from ..repositories.todo_store import TodoStore
from ..services.todo_service import TodoService


def get_todo_store(request: Request) -> TodoStore:
    """Dependency for the store loaded at application startup."""
    store = getattr(request.app.state, "todo_store", None)
    if store is None:
        raise HTTPException(status_code=503, detail="Todo store is not loaded")
    return store


def get_todo_service(store: TodoStore = Depends(get_todo_store)) -> TodoService:
    """Dependency for getting todo service instance."""
    return TodoService(store)
