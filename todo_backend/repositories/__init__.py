"""
Repository package for data access layer.
"""

from .base_repository import BaseRepository
from .todo_store import TodoStore
from .todo_repository import TodoRepository

__all__ = [
    "BaseRepository",
    "TodoStore",
    "TodoRepository"
]
