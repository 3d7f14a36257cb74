"""
Base repository interface for data access.
"""

from abc import ABC, abstractmethod
from typing import Any, Iterable, List


class BaseRepository(ABC):
    """Abstract base repository interface."""

    @abstractmethod
    def find_all(self) -> List[Any]:
        """Find all records."""
        pass

    @abstractmethod
    def find_by_id(self, record_id: Any) -> Any:
        """Find record by ID."""
        pass

    @abstractmethod
    def find_all_by_id(self, record_ids: Iterable[Any]) -> List[Any]:
        """Find the records whose IDs are given."""
        pass

    @abstractmethod
    def exists_by_id(self, record_id: Any) -> bool:
        """Check whether a record with this ID exists."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Count total records."""
        pass
