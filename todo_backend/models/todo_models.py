"""
Domain models for todo items.
"""

from pydantic import BaseModel, ConfigDict, Field


class TodoInput(BaseModel):
    """Mutable fields of a todo, as supplied by callers on create and update."""

    # Unknown keys (including "id") are ignored so a full Todo can be sent back
    model_config = ConfigDict(populate_by_name=True)

    title: str  # opaque text, stored exactly as given
    is_completed: bool = Field(default=False, alias="isCompleted")


class Todo(TodoInput):
    """Model for a persisted todo record."""

    model_config = ConfigDict(frozen=True)

    id: int
