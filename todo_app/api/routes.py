"""API routes for todo management."""

from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, status

from ..models.todo import ErrorMessage, Todo, TodoCreate, TodoDeleted, TodoUpdate
from ..services.todo_service import TodoService
from .dependencies import get_todo_service

router = APIRouter(prefix="/todos", tags=["todos"])

TODO_NOT_FOUND = "Todo not found"
_not_found = {404: {"model": ErrorMessage}}


@router.get("", response_model=List[Todo])
def list_todos(service: TodoService = Depends(get_todo_service)) -> List[Todo]:
    """Get all todo items."""
    return service.list_todos()


@router.get("/{todo_id}", response_model=Todo, responses=_not_found)
def get_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Get a specific todo item by ID."""
    todo = service.get_todo(todo_id)
    if todo is None:
        raise HTTPException(status_code=404, detail=TODO_NOT_FOUND)
    return todo


@router.post(
    "",
    response_model=Todo,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorMessage}},
)
def create_todo(
    todo_data: Optional[TodoCreate] = None,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Create a new todo item."""
    try:
        return service.create_todo(todo_data or TodoCreate())
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.put("/{todo_id}", response_model=Todo, responses=_not_found)
def update_todo(
    todo_id: str,
    todo_data: Optional[TodoUpdate] = None,
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Update the completion state of a todo item."""
    todo = service.update_todo(todo_id, todo_data or TodoUpdate())
    if todo is None:
        raise HTTPException(status_code=404, detail=TODO_NOT_FOUND)
    return todo


@router.delete("/{todo_id}", response_model=TodoDeleted, responses=_not_found)
def delete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> TodoDeleted:
    """Delete a todo item."""
    todo = service.delete_todo(todo_id)
    if todo is None:
        raise HTTPException(status_code=404, detail=TODO_NOT_FOUND)
    return TodoDeleted(todo=todo)
