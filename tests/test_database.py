"""Tests for DatabaseManager connection and transaction handling."""

import os
import sqlite3
from unittest.mock import MagicMock, patch

import pytest

from todo_backend.config import DatabaseManager
from todo_backend.errors import NotFoundError, StorageError


class TestInitializeSchema:
    """Test DatabaseManager.initialize_schema()."""

    def test_creates_parent_directory_and_table(self, db_path):
        manager = DatabaseManager(db_path)

        manager.initialize_schema()

        assert os.path.exists(db_path)
        assert manager.execute_scalar("SELECT COUNT(*) FROM todos") == 0

    def test_is_idempotent(self, db_manager):
        db_manager.execute_update("INSERT INTO todos (title) VALUES (?)", ["keep me"])

        db_manager.initialize_schema()

        assert db_manager.execute_scalar("SELECT COUNT(*) FROM todos") == 1

    def test_unwritable_directory_raises_storage_error(self, tmp_path):
        blocker = tmp_path / "not_a_dir"
        blocker.write_text("")
        manager = DatabaseManager(str(blocker / "todos.db"))

        with pytest.raises(StorageError):
            manager.initialize_schema()


class TestTransaction:
    """Test DatabaseManager.transaction()."""

    def test_commits_on_success(self, db_manager):
        with db_manager.transaction() as conn:
            conn.execute("INSERT INTO todos (title) VALUES (?)", ["a"])

        assert db_manager.execute_scalar("SELECT COUNT(*) FROM todos") == 1

    def test_rolls_back_and_reraises_application_errors(self, db_manager):
        with pytest.raises(NotFoundError):
            with db_manager.transaction() as conn:
                conn.execute("INSERT INTO todos (title) VALUES (?)", ["a"])
                raise NotFoundError(1)

        assert db_manager.execute_scalar("SELECT COUNT(*) FROM todos") == 0

    def test_rolls_back_partial_write_on_backend_error(self, db_manager):
        with pytest.raises(StorageError) as exc_info:
            with db_manager.transaction() as conn:
                conn.execute("INSERT INTO todos (title) VALUES (?)", ["a"])
                conn.execute("INSERT INTO todos (title) VALUES (NULL)")

        assert isinstance(exc_info.value.__cause__, sqlite3.IntegrityError)
        assert db_manager.execute_scalar("SELECT COUNT(*) FROM todos") == 0

    def test_closes_connection_on_every_exit_path(self, db_manager):
        real_connect = db_manager.get_connection
        opened = []

        def tracking_connect():
            conn = real_connect()
            opened.append(conn)
            return conn

        with patch.object(db_manager, "get_connection", side_effect=tracking_connect):
            with db_manager.transaction() as conn:
                conn.execute("SELECT 1")
            with pytest.raises(RuntimeError):
                with db_manager.transaction():
                    raise RuntimeError("boom")

        assert len(opened) == 2
        for conn in opened:
            with pytest.raises(sqlite3.ProgrammingError):
                conn.execute("SELECT 1")

    def test_failed_rollback_keeps_original_application_error(self, db_manager):
        conn = MagicMock()
        conn.rollback.side_effect = sqlite3.OperationalError("disk I/O error")

        with patch.object(db_manager, "get_connection", return_value=conn):
            with pytest.raises(NotFoundError):
                with db_manager.transaction():
                    raise NotFoundError(1)

        conn.rollback.assert_called_once()
        conn.close.assert_called_once()

    def test_failed_rollback_keeps_original_backend_error(self, db_manager):
        conn = MagicMock()
        original = sqlite3.IntegrityError("NOT NULL constraint failed: todos.title")
        conn.rollback.side_effect = sqlite3.OperationalError("disk I/O error")

        with patch.object(db_manager, "get_connection", return_value=conn):
            with pytest.raises(StorageError) as exc_info:
                with db_manager.transaction():
                    raise original

        assert exc_info.value.__cause__ is original
        conn.close.assert_called_once()


class TestQueries:
    """Test execute_query(), execute_scalar() and execute_update()."""

    def test_execute_query_returns_dataframe(self, db_manager):
        db_manager.execute_update("INSERT INTO todos (title, is_completed) VALUES (?, ?)", ["a", 1])

        df = db_manager.execute_query("SELECT id, title, is_completed FROM todos")

        assert list(df.columns) == ["id", "title", "is_completed"]
        assert df.iloc[0]["title"] == "a"
        assert df.iloc[0]["is_completed"] == 1

    def test_execute_scalar_returns_none_without_rows(self, db_manager):
        assert db_manager.execute_scalar("SELECT id FROM todos WHERE id = ?", [1]) is None

    def test_execute_update_returns_rowcount(self, db_manager):
        db_manager.execute_update("INSERT INTO todos (title) VALUES (?)", ["a"])
        db_manager.execute_update("INSERT INTO todos (title) VALUES (?)", ["b"])

        assert db_manager.execute_update("UPDATE todos SET is_completed = 1") == 2

    def test_bad_query_raises_storage_error(self, db_manager):
        with pytest.raises(StorageError):
            db_manager.execute_query("SELECT * FROM nowhere")
        with pytest.raises(StorageError):
            db_manager.execute_scalar("SELECT * FROM nowhere")
        with pytest.raises(StorageError):
            db_manager.execute_update("DELETE FROM nowhere")
