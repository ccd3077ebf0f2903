from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status

from ..models import NotFound, InvalidInput
from ..schemas.task import Message, Task as TaskSchema, TaskCreate, TaskUpdate
from ..store import TaskStore, get_store

router = APIRouter()

_ERROR_RESPONSES = {
    status.HTTP_400_BAD_REQUEST: {"model": Message},
    status.HTTP_404_NOT_FOUND: {"model": Message},
}


def _raise_for_outcome(outcome) -> None:
    if isinstance(outcome, NotFound):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=outcome.message)
    if isinstance(outcome, InvalidInput):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=outcome.message)


@router.get("/tasks", response_model=List[TaskSchema], name="GetAllTasks")
def get_tasks(store: TaskStore = Depends(get_store)):
    """Retrieve all tasks."""
    return store.list_tasks()


@router.get(
    "/tasks/{task_id}",
    response_model=TaskSchema,
    responses=_ERROR_RESPONSES,
    name="GetTaskById",
)
def get_task(task_id: int, store: TaskStore = Depends(get_store)):
    """Retrieve a specific task by its ID."""
    task = store.get_task(task_id)
    _raise_for_outcome(task)
    return task


@router.post(
    "/tasks",
    response_model=TaskSchema,
    status_code=status.HTTP_201_CREATED,
    responses=_ERROR_RESPONSES,
    name="CreateTask",
)
def create_task(
    task: TaskCreate,
    response: Response,
    store: TaskStore = Depends(get_store),
):
    """Create a new task. The id and creation time are assigned by the server."""
    created = store.create_task(task.description, task.is_completed)
    _raise_for_outcome(created)
    response.headers["Location"] = f"/api/tasks/{created.id}"
    return created


@router.put(
    "/tasks/{task_id}",
    response_model=TaskSchema,
    responses=_ERROR_RESPONSES,
    name="UpdateTask",
)
def update_task(
    task_id: int,
    task_update: TaskUpdate,
    store: TaskStore = Depends(get_store),
):
    """Update an existing task's description and completion flag."""
    updated = store.update_task(task_id, task_update.description, task_update.is_completed)
    _raise_for_outcome(updated)
    return updated


@router.delete(
    "/tasks/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_ERROR_RESPONSES,
    name="DeleteTask",
)
def delete_task(task_id: int, store: TaskStore = Depends(get_store)):
    """Delete a task by ID."""
    _raise_for_outcome(store.delete_task(task_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
