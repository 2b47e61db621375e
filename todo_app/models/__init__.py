"""Pydantic models for the todo API."""

from .todo import ErrorMessage, Todo, TodoCreate, TodoDeleted, TodoUpdate

__all__ = ["ErrorMessage", "Todo", "TodoCreate", "TodoDeleted", "TodoUpdate"]
