from sqlmodel import SQLModel, Field
from datetime import datetime

MAX_DESCRIPTION_LENGTH = 500


class Task(SQLModel):
    """A single to-do record held by the task store.

    Not a table: tasks live in memory for the lifetime of the process.
    `id` and `created_at` are assigned by the store and never change.
    """

    id: int
    description: str = Field(min_length=1, max_length=MAX_DESCRIPTION_LENGTH)
    is_completed: bool = Field(default=False)
    created_at: datetime
