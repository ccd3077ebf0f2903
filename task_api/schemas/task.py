from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class TaskBase(BaseModel):
    """Fields a client may send when creating or updating a task.

    Any `id` or `createdAt` in the body is ignored: both are server-assigned.
    Description rules are enforced by the store so that a missing or blank
    description is a 400, not a schema error.
    """
    description: Optional[str] = None
    is_completed: bool = Field(default=False, alias="isCompleted")

    class Config:
        populate_by_name = True


class TaskCreate(TaskBase):
    """Schema for creating new tasks."""
    pass


class TaskUpdate(TaskBase):
    """Schema for replacing a task's description and completion flag."""
    pass


class Task(BaseModel):
    """Task as returned by the API."""
    id: int
    description: str
    is_completed: bool = Field(alias="isCompleted")
    created_at: datetime = Field(alias="createdAt")

    class Config:
        from_attributes = True
        populate_by_name = True


class Message(BaseModel):
    """Error body returned for every failed request."""
    message: str
