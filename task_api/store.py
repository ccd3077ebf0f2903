import logging
import threading
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Union

from fastapi import Request

from .models import Task, NotFound, InvalidInput, MAX_DESCRIPTION_LENGTH

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def validate_description(description: Optional[str]) -> Union[str, InvalidInput]:
    """Return the trimmed description, or the reason it is rejected."""
    if description is None or not description.strip():
        return InvalidInput("Description is required")

    trimmed = description.strip()
    if len(trimmed) > MAX_DESCRIPTION_LENGTH:
        return InvalidInput(
            f"Description must be between 1 and {MAX_DESCRIPTION_LENGTH} characters"
        )
    return trimmed


class TaskStore:
    """In-memory owner of all tasks and of the id sequence.

    Every operation, reads included, runs inside one lock that guards the
    collection and the counter together. Callers get copies of the stored
    records, never the records themselves.
    """

    def __init__(self, clock: Optional[Callable[[], datetime]] = None):
        self._clock = clock or _utcnow
        self._lock = threading.Lock()
        self._tasks: Dict[int, Task] = {}
        self._next_id = 1

    def list_tasks(self) -> List[Task]:
        """Return all tasks in insertion order."""
        with self._lock:
            return [task.model_copy() for task in self._tasks.values()]

    def count(self) -> int:
        with self._lock:
            return len(self._tasks)

    def get_task(self, task_id: int) -> Union[Task, NotFound]:
        with self._lock:
            task = self._tasks.get(task_id)
            if task is None:
                return NotFound(task_id)
            return task.model_copy()

    def create_task(
        self, description: Optional[str], is_completed: bool = False
    ) -> Union[Task, InvalidInput]:
        """Store a new task under the next id.

        A rejected description consumes no id.
        """
        validated = validate_description(description)
        if isinstance(validated, InvalidInput):
            logger.info("Rejected task create: %s", validated.message)
            return validated

        with self._lock:
            task = Task(
                id=self._next_id,
                description=validated,
                is_completed=is_completed,
                created_at=self._clock(),
            )
            self._tasks[task.id] = task
            self._next_id += 1

        logger.info("Created task id=%s", task.id)
        return task.model_copy()

    def update_task(
        self, task_id: int, description: Optional[str], is_completed: bool
    ) -> Union[Task, NotFound, InvalidInput]:
        """Replace description and completion flag of an existing task.

        Existence is checked first: an unknown id is reported as NotFound
        even when the description is invalid too.
        """
        with self._lock:
            current = self._tasks.get(task_id)
            if current is None:
                return NotFound(task_id)

            validated = validate_description(description)
            if not isinstance(validated, InvalidInput):
                updated = Task(
                    id=current.id,
                    description=validated,
                    is_completed=is_completed,
                    created_at=current.created_at,
                )
                self._tasks[task_id] = updated

        if isinstance(validated, InvalidInput):
            logger.info("Rejected update of task id=%s: %s", task_id, validated.message)
            return validated

        logger.info("Updated task id=%s", task_id)
        return updated.model_copy()

    def delete_task(self, task_id: int) -> Optional[NotFound]:
        """Remove a task. Returns None on success; the id is never reused."""
        with self._lock:
            if task_id not in self._tasks:
                return NotFound(task_id)
            del self._tasks[task_id]

        logger.info("Deleted task id=%s", task_id)
        return None


def get_store(request: Request) -> TaskStore:
    """Dependency returning the store owned by the running app."""
    return request.app.state.task_store
