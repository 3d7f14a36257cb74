"""
Exception types raised by the todo store.

Callers (a web layer, a CLI, tests) translate these into their own responses.
The store never retries and never swallows them.
"""

from typing import Any, Dict, List, Optional


class TodoStoreError(Exception):
    """Base class for all todo store errors."""


class ValidationError(TodoStoreError, ValueError):
    """Input for a store operation is malformed."""

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.errors = errors or []


class NotFoundError(TodoStoreError, LookupError):
    """An operation referenced a todo id that does not exist."""

    def __init__(self, todo_id: Any):
        super().__init__(f"Todo with id {todo_id!r} not found")
        self.todo_id = todo_id


class StorageError(TodoStoreError):
    """The storage backend is unavailable or failed during I/O."""
