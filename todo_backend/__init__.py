"""
Todo Backend: persistence of todo items in SQLite.
"""

from .errors import NotFoundError, StorageError, TodoStoreError, ValidationError
from .main import create_store
from .models import Todo, TodoInput
from .repositories import TodoRepository, TodoStore

__version__ = "1.0.0"

__all__ = [
    "create_store",
    "Todo",
    "TodoInput",
    "TodoStore",
    "TodoRepository",
    "TodoStoreError",
    "ValidationError",
    "NotFoundError",
    "StorageError"
]
