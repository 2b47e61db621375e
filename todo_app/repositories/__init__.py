"""Persistence layer for todos."""

from .todo_store import StoreLoadError, TodoStore

__all__ = ["StoreLoadError", "TodoStore"]
