"""
Repository for todo items backed by SQLite.
Handles CRUD operations and identity lookups.
"""

import logging
from typing import Any, Iterable, List, Optional

import pandas as pd
from pydantic import ValidationError as PydanticValidationError

from .todo_store import TodoPayload, TodoStore
from ..config import DatabaseManager
from ..errors import NotFoundError, ValidationError
from ..models import Todo, TodoInput

SELECT_COLUMNS = "SELECT id, title, is_completed FROM todos"
SQLITE_MIN_INT = -2 ** 63
SQLITE_MAX_INT = 2 ** 63 - 1


class TodoRepository(TodoStore):
    """SQLite storage adapter for todo items."""

    def __init__(self, db_manager: Optional[DatabaseManager] = None):
        self.db_manager = db_manager or DatabaseManager()
        self.logger = logging.getLogger(__name__)

    def create(self, todo: TodoPayload) -> Todo:
        """Insert a new todo; the id comes from the table's AUTOINCREMENT key."""
        data = self._validate_payload(todo)
        with self.db_manager.transaction() as conn:
            cursor = conn.execute(
                "INSERT INTO todos (title, is_completed) VALUES (?, ?)",
                [data.title, int(data.is_completed)]
            )
            todo_id = cursor.lastrowid

        created = Todo(id=todo_id, title=data.title, is_completed=data.is_completed)
        self.logger.info(f"Created todo {todo_id}")
        return created

    def find_by_id(self, todo_id: int) -> Todo:
        """Find todo by id."""
        self._validate_id(todo_id)
        df = self.db_manager.execute_query(f"{SELECT_COLUMNS} WHERE id = ?", [todo_id])
        if df.empty:
            self.logger.debug(f"Todo {todo_id} not found")
            raise NotFoundError(todo_id)
        return self._row_to_todo(df.iloc[0])

    def find_all(self) -> List[Todo]:
        """Find all todos ordered by id."""
        df = self.db_manager.execute_query(f"{SELECT_COLUMNS} ORDER BY id")
        return self._frame_to_todos(df)

    def find_all_by_id(self, todo_ids: Iterable[int]) -> List[Todo]:
        """Find the todos whose ids are given; unknown ids are skipped."""
        try:
            ids = list(todo_ids)
        except TypeError as e:
            raise ValidationError(f"Todo ids must be an iterable of integers, got {todo_ids!r}") from e
        for todo_id in ids:
            self._validate_id(todo_id)
        ids = list(dict.fromkeys(ids))
        if not ids:
            return []

        placeholders = ", ".join("?" for _ in ids)
        df = self.db_manager.execute_query(
            f"{SELECT_COLUMNS} WHERE id IN ({placeholders}) ORDER BY id", ids
        )
        return self._frame_to_todos(df)

    def update(self, todo_id: int, todo: TodoPayload) -> Todo:
        """Overwrite title and completion flag of an existing todo."""
        self._validate_id(todo_id)
        data = self._validate_payload(todo)
        with self.db_manager.transaction() as conn:
            cursor = conn.execute(
                "UPDATE todos SET title = ?, is_completed = ? WHERE id = ?",
                [data.title, int(data.is_completed), todo_id]
            )
            if cursor.rowcount == 0:
                self.logger.debug(f"Cannot update todo {todo_id}: not found")
                raise NotFoundError(todo_id)

        self.logger.info(f"Updated todo {todo_id}")
        return Todo(id=todo_id, title=data.title, is_completed=data.is_completed)

    def delete(self, todo_id: int) -> None:
        """Delete a todo by id."""
        self._validate_id(todo_id)
        deleted = self.db_manager.execute_update("DELETE FROM todos WHERE id = ?", [todo_id])
        if deleted == 0:
            self.logger.debug(f"Cannot delete todo {todo_id}: not found")
            raise NotFoundError(todo_id)
        self.logger.info(f"Deleted todo {todo_id}")

    def delete_all(self) -> int:
        """Delete every todo."""
        deleted = self.db_manager.execute_update("DELETE FROM todos")
        self.logger.info(f"Deleted {deleted} todos")
        return deleted

    def exists_by_id(self, todo_id: Any) -> bool:
        """Check whether a todo exists."""
        if not self._is_valid_id(todo_id):
            return False
        result = self.db_manager.execute_scalar(
            "SELECT 1 FROM todos WHERE id = ? LIMIT 1", [todo_id]
        )
        return result is not None

    def count(self) -> int:
        """Count total todos."""
        return self.db_manager.execute_scalar("SELECT COUNT(*) FROM todos")

    @staticmethod
    def _validate_payload(todo: TodoPayload) -> TodoInput:
        """Coerce a payload into a TodoInput or raise ValidationError."""
        if isinstance(todo, TodoInput):
            # model_construct() skips validation
            todo = todo.model_dump()
        try:
            return TodoInput.model_validate(todo)
        except PydanticValidationError as e:
            raise ValidationError(f"Invalid todo: {e}", errors=e.errors()) from e

    @staticmethod
    def _is_valid_id(todo_id: Any) -> bool:
        return (
            isinstance(todo_id, int)
            and not isinstance(todo_id, bool)
            and SQLITE_MIN_INT <= todo_id <= SQLITE_MAX_INT
        )

    def _validate_id(self, todo_id: Any) -> None:
        if not self._is_valid_id(todo_id):
            raise ValidationError(f"Todo id must be an integer, got {todo_id!r}")

    @staticmethod
    def _row_to_todo(row: pd.Series) -> Todo:
        return Todo(
            id=int(row['id']),
            title=row['title'],
            is_completed=bool(row['is_completed'])
        )

    def _frame_to_todos(self, df: pd.DataFrame) -> List[Todo]:
        if df.empty:
            return []
        return [self._row_to_todo(row) for _, row in df.iterrows()]
