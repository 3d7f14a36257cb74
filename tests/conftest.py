"""Shared fixtures: every test gets its own database file."""

import pytest

from todo_backend.config import DatabaseManager
from todo_backend.repositories import TodoRepository


@pytest.fixture
def db_path(tmp_path):
    """Path to a fresh database file inside the test's temp directory."""
    return str(tmp_path / "data" / "todos.db")


@pytest.fixture
def db_manager(db_path):
    """Database manager with the schema already created."""
    manager = DatabaseManager(db_path, timeout=5)
    manager.initialize_schema()
    return manager


@pytest.fixture
def store(db_manager):
    """Todo repository backed by the per-test database."""
    return TodoRepository(db_manager)
