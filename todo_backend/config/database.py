"""
Database Configuration and Management Module

This module provides centralized SQLite connection and transaction management
for the todo store. Every call acquires its own connection and releases it on
all exit paths, so no connection state is shared between operations.

Tags:
    - database
    - configuration
    - sqlite
    - data-access
    - repository-pattern

Features:
    - Scoped connections with guaranteed cleanup
    - Explicit write transactions (BEGIN IMMEDIATE) with commit/rollback
    - Type-safe parameter binding for SQL injection prevention
    - Pandas DataFrame integration for reads
    - Backend failures translated into StorageError

Usage:
    ```python
    from todo_backend.config import DatabaseManager

    db = DatabaseManager("data/todos.db")
    db.initialize_schema()

    df = db.execute_query("SELECT * FROM todos ORDER BY id")
    total = db.execute_scalar("SELECT COUNT(*) FROM todos")

    with db.transaction() as conn:
        conn.execute("UPDATE todos SET is_completed = 1 WHERE id = ?", [1])
    ```

Database Schema:
    - Table: todos
    - Columns: id (INTEGER PRIMARY KEY AUTOINCREMENT), title, is_completed
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional, Union

import pandas as pd
from pandas.errors import DatabaseError as PandasDatabaseError

from ..errors import StorageError
from .settings import app_config

logger = logging.getLogger(__name__)

SCHEMA = """
    CREATE TABLE IF NOT EXISTS todos (
        id INTEGER PRIMARY KEY AUTOINCREMENT,
        title TEXT NOT NULL,
        is_completed INTEGER NOT NULL DEFAULT 0
    )
"""


class DatabaseManager:
    """
    Connection and transaction management for the todo database.

    Features:
    - SQLite row factory for column access by name
    - Autocommit connections with explicit transaction boundaries
    - Automatic connection cleanup with context management
    - Pandas integration for read queries

    Examples:
        >>> db = DatabaseManager("/tmp/todos.db")
        >>> db.initialize_schema()
        >>> df = db.execute_query("SELECT * FROM todos")
        >>> count = db.execute_scalar("SELECT COUNT(*) FROM todos")
        >>> rows_affected = db.execute_update("DELETE FROM todos WHERE id = ?", [3])
    """

    def __init__(self, database_path: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize the DatabaseManager.

        Args:
            database_path (Optional[str]): Path to the SQLite file. Defaults to
                                           the configured application path.
            timeout (Optional[float]): Seconds to wait for a lock held by another
                                       writer. Defaults to the configured timeout.
        """
        self.database_path = database_path or app_config.database_path
        self.timeout = app_config.database.connection_timeout if timeout is None else timeout

    def get_connection(self) -> sqlite3.Connection:
        """
        Open a database connection with row factory enabled.

        The connection runs in autocommit mode; callers that write should use
        transaction() so that the write is atomic and the connection is closed.

        Returns:
            sqlite3.Connection: Database connection with row factory for column access by name.

        Raises:
            StorageError: If the database file cannot be opened.
        """
        try:
            conn = sqlite3.connect(self.database_path, timeout=self.timeout, isolation_level=None)
        except sqlite3.Error as e:
            logger.error(f"Cannot open database {self.database_path}: {e}")
            raise StorageError(f"Cannot open database {self.database_path}: {e}") from e
        conn.row_factory = sqlite3.Row
        return conn

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """
        Yield a connection for reads and close it on every exit path.

        Raises:
            StorageError: If the backend fails while the connection is in use.
        """
        conn = self.get_connection()
        try:
            yield conn
        except (sqlite3.Error, PandasDatabaseError) as e:
            logger.error(f"Database read failed: {e}")
            raise StorageError(f"Database read failed: {e}") from e
        finally:
            conn.close()

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """
        Yield a connection inside a write transaction.

        The transaction is started with BEGIN IMMEDIATE so concurrent writers
        are serialized by SQLite. It is committed when the block exits normally
        and rolled back when any exception escapes the block. Exceptions that
        are not backend errors (e.g. NotFoundError) propagate unchanged.

        Raises:
            StorageError: If the backend fails to begin, execute or commit.
        """
        conn = self.get_connection()
        try:
            conn.execute("BEGIN IMMEDIATE")
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            self._rollback(conn)
            logger.error(f"Database write failed: {e}")
            raise StorageError(f"Database write failed: {e}") from e
        except Exception:
            self._rollback(conn)
            raise
        finally:
            conn.close()

    @staticmethod
    def _rollback(conn: sqlite3.Connection) -> None:
        """Roll back without masking the exception that triggered it."""
        try:
            conn.rollback()
        except sqlite3.Error as e:
            # Closing the connection discards the open transaction anyway
            logger.warning(f"Rollback failed: {e}")

    def initialize_schema(self) -> None:
        """
        Create the todos table if it does not exist.

        The parent directory of the database file is created when missing.

        Raises:
            StorageError: If the directory or table cannot be created.
        """
        directory = os.path.dirname(self.database_path)
        if directory:
            try:
                os.makedirs(directory, exist_ok=True)
            except OSError as e:
                raise StorageError(f"Cannot create database directory {directory}: {e}") from e

        with self.transaction() as conn:
            conn.execute(SCHEMA)
        logger.debug(f"Schema ready at {self.database_path}")

    def execute_query(self, query: str, params: Optional[List[Any]] = None) -> pd.DataFrame:
        """
        Execute a SELECT query and return results as a pandas DataFrame.

        Args:
            query (str): SQL SELECT query to execute. Use ? placeholders for parameters.
            params (Optional[List[Any]]): Parameters to bind to query placeholders.

        Returns:
            pd.DataFrame: Query results with column names preserved.

        Raises:
            StorageError: If the query execution fails.

        Examples:
            >>> df = db.execute_query("SELECT * FROM todos WHERE id = ?", [1])
        """
        with self.connection() as conn:
            return pd.read_sql_query(query, conn, params=params or [])

    def execute_update(self, query: str, params: Optional[List[Any]] = None) -> int:
        """
        Execute an INSERT, UPDATE, or DELETE statement in its own transaction.

        Args:
            query (str): SQL statement. Use ? placeholders for parameters.
            params (Optional[List[Any]]): Parameters to bind to query placeholders.

        Returns:
            int: Number of rows affected by the statement.

        Raises:
            StorageError: If execution or commit fails. Nothing is written in that case.
        """
        with self.transaction() as conn:
            cursor = conn.execute(query, params or [])
            return cursor.rowcount

    def execute_scalar(self, query: str, params: Optional[List[Any]] = None) -> Union[Any, None]:
        """
        Execute a query and return a single scalar value.

        Returns None if the query produces no rows.

        Examples:
            >>> total = db.execute_scalar("SELECT COUNT(*) FROM todos")
            >>> exists = db.execute_scalar("SELECT 1 FROM todos WHERE id = ? LIMIT 1", [1])
        """
        with self.connection() as conn:
            result = conn.execute(query, params or []).fetchone()
            return result[0] if result else None


