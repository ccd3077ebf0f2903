from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from ..store import TaskStore, get_store

router = APIRouter()


@router.get("/health", include_in_schema=False)
def health_check(store: TaskStore = Depends(get_store)):
    """Report liveness and the current number of tasks."""
    return {
        "status": "Healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "taskCount": store.count(),
    }
