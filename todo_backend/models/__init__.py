"""
Models package for todo data structures.
"""

from .todo_models import Todo, TodoInput

__all__ = [
    "Todo",
    "TodoInput"
]
