#!/usr/bin/env python
"""Script to run the Task Manager API server."""
import uvicorn

from task_api.config import ENVIRONMENT, HOST, PORT, LOG_LEVEL

if __name__ == "__main__":
    uvicorn.run(
        "task_api.main:app",
        host=HOST,
        port=PORT,
        log_level=LOG_LEVEL.lower(),
        reload=ENVIRONMENT == "development",
    )
