"""
This module builds a ready-to-use todo store: logging configured, database
schema in place, SQLite adapter wired to its connection manager.

Usage:
    ```python
    from todo_backend import create_store

    store = create_store()
    todo = store.create({"title": "buy milk"})
    store.update(todo.id, {"title": "buy bread", "isCompleted": True})
    ```
"""

import logging
from typing import Optional

from .config import ApplicationConfig, DatabaseManager, app_config, setup_logging
from .repositories import TodoRepository

logger = logging.getLogger(__name__)


def create_store(config: Optional[ApplicationConfig] = None) -> TodoRepository:
    """
    Create and configure the todo store.

    Args:
        config (Optional[ApplicationConfig]): Settings to use. Defaults to the
                                              environment-derived app_config.

    Returns:
        TodoRepository: Store backed by the configured SQLite database.

    Raises:
        StorageError: If the database cannot be opened or initialized.
    """
    config = config or app_config
    setup_logging(config.logging)

    db_manager = DatabaseManager(
        config.database_path,
        timeout=config.database.connection_timeout
    )
    db_manager.initialize_schema()

    logger.info(f"Todo store ready at {db_manager.database_path}")
    return TodoRepository(db_manager)
