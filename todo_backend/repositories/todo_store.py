"""
TodoStore interface.

The capability set every todo storage adapter provides. Callers depend on this
interface; TodoRepository is the SQLite implementation.
"""

from abc import abstractmethod
from typing import Any, Iterable, List, Mapping, Union

from .base_repository import BaseRepository
from ..models import Todo, TodoInput

TodoPayload = Union[TodoInput, Mapping[str, Any]]


class TodoStore(BaseRepository):
    """
    Persistence of Todo entities.

    Every operation is a single atomic transition over the persisted set.
    Errors (ValidationError, NotFoundError, StorageError) propagate to the
    caller unmodified; there are no retries.
    """

    @abstractmethod
    def create(self, todo: TodoPayload) -> Todo:
        """
        Persist a new todo and return it with its store-assigned id.

        Raises:
            ValidationError: If the payload is missing or has malformed fields.
        """
        pass

    @abstractmethod
    def find_by_id(self, todo_id: int) -> Todo:
        """
        Return the todo with this id.

        Raises:
            NotFoundError: If no todo has this id.
        """
        pass

    @abstractmethod
    def find_all(self) -> List[Todo]:
        """Return every persisted todo, ordered by id."""
        pass

    @abstractmethod
    def find_all_by_id(self, todo_ids: Iterable[int]) -> List[Todo]:
        """Return the todos among todo_ids that exist, ordered by id."""
        pass

    @abstractmethod
    def update(self, todo_id: int, todo: TodoPayload) -> Todo:
        """
        Overwrite the mutable fields of an existing todo.

        Raises:
            ValidationError: If the payload is malformed.
            NotFoundError: If no todo has this id.
        """
        pass

    @abstractmethod
    def delete(self, todo_id: int) -> None:
        """
        Remove a todo permanently.

        Raises:
            NotFoundError: If no todo has this id, including when it was already deleted.
        """
        pass

    @abstractmethod
    def delete_all(self) -> int:
        """Remove every todo and return how many were removed."""
        pass

    @abstractmethod
    def exists_by_id(self, todo_id: Any) -> bool:
        """Return whether a todo with this id exists. Malformed ids do not exist."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count persisted todos."""
        pass
