"""Todo data models using Pydantic."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator


def utc_timestamp() -> str:
    """Current UTC time as ISO-8601 with milliseconds and a ``Z`` suffix."""
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def new_todo_id() -> str:
    return str(uuid.uuid4())


class Todo(BaseModel):
    """A todo item as stored on disk and returned by the API."""

    id: str = Field(default_factory=new_todo_id)
    text: str = Field(..., min_length=1)
    completed: bool = False
    created_at: str = Field(default_factory=utc_timestamp, alias="createdAt")

    model_config = ConfigDict(populate_by_name=True)

    @field_validator("created_at")
    @classmethod
    def created_at_is_iso(cls, value: str) -> str:
        try:
            datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise ValueError("createdAt must be an ISO-8601 timestamp") from exc
        return value


class TodoCreate(BaseModel):
    """Request body for creating a todo.

    ``text`` is optional at the schema level so that a missing value reaches
    the service and is reported as "Text is required" rather than a generic
    validation error.
    """

    text: Optional[str] = None


class TodoUpdate(BaseModel):
    """Request body for updating a todo. Only completion can change."""

    completed: Optional[StrictBool] = None


class TodoDeleted(BaseModel):
    message: str = "Todo deleted"
    todo: Todo


class ErrorMessage(BaseModel):
    message: str
