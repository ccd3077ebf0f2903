from dataclasses import dataclass


@dataclass(frozen=True)
class NotFound:
    """No task with `task_id` exists in the store."""

    task_id: int

    @property
    def message(self) -> str:
        return f"Task with ID {self.task_id} not found"


@dataclass(frozen=True)
class InvalidInput:
    """The request was rejected before any mutation."""

    message: str
