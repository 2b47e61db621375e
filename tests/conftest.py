"""Shared fixtures: an isolated data file, store and client per test."""

from dataclasses import replace
from pathlib import Path
from typing import Iterator

from fastapi.testclient import TestClient
from pytest import fixture

from todo_app.main import create_app
from todo_app.repositories.todo_store import TodoStore
from todo_app.settings import Settings, load_settings


@fixture
def data_file(tmp_path: Path) -> Path:
    """An empty backing file."""
    path = tmp_path / "todos.json"
    path.write_text("[]", encoding="utf-8")
    return path


@fixture
def store(data_file: Path) -> TodoStore:
    return TodoStore.load(data_file)


@fixture
def settings(data_file: Path) -> Settings:
    return replace(load_settings(), data_file=data_file)


@fixture
def client(settings: Settings) -> Iterator[TestClient]:
    """A TestClient with the lifespan entered, so the store is loaded."""
    with TestClient(create_app(settings)) as test_client:
        yield test_client
