import logging
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .config import APP_NAME, CORS_ORIGINS, HOST, PORT, docs_enabled
from .logging_config import configure_logging
from .routers import health, tasks
from .store import TaskStore

logger = logging.getLogger(__name__)


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "Invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    if location:
        return f"{location}: {first.get('msg', 'invalid value')}"
    return first.get("msg", "Invalid request")


def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    """Build the API around `store`, or around a fresh empty store."""
    configure_logging()

    show_docs = docs_enabled()
    app = FastAPI(
        title=APP_NAME,
        description="A simple RESTful API for managing tasks",
        version="1.0.0",
        docs_url="/swagger" if show_docs else None,
        redoc_url=None,
        openapi_url="/swagger/v1/swagger.json" if show_docs else None,
    )
    app.state.task_store = store if store is not None else TaskStore()

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"message": _validation_message(exc)},
        )

    # Include routers
    app.include_router(tasks.router, prefix="/api", tags=["Tasks"])
    app.include_router(health.router, prefix="/api", tags=["System"])

    @app.on_event("startup")
    def log_startup():
        logger.info("%s is running", APP_NAME)
        logger.info("HTTP:    http://%s:%s", HOST, PORT)
        if show_docs:
            logger.info("Swagger: http://%s:%s/swagger", HOST, PORT)
        logger.info("Health:  http://%s:%s/api/health", HOST, PORT)

    @app.get("/", include_in_schema=False)
    def read_root():
        return {"message": APP_NAME}

    return app


app = create_app()
