import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from taskboard.core.config import settings
from taskboard.core.database import engine, Base
from taskboard.core.errors import TaskboardError, ValidationError
from taskboard.api.routes import auth, priorities, tasks, users
# Imported so their tables are registered on Base.metadata
from taskboard.models import priority, task, user  # noqa: F401

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage app lifecycle events.

    Startup: configure logging and create tables that don't exist yet.
    In production, use migrations (Alembic) instead of create_all.
    """
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    Base.metadata.create_all(bind=engine)
    logger.info(f"{settings.PROJECT_NAME} {settings.VERSION} started")
    yield


async def taskboard_error_handler(request: Request, exc: TaskboardError):
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=exc.headers,
    )


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    # Malformed bodies (bad email, bad date, wrong types) are client errors
    # like any other missing field
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(part) for part in error['loc'] if part != 'body')}: {error['msg']}"
        for error in errors
    ) or "Invalid request"
    return JSONResponse(
        status_code=ValidationError.status_code,
        content={"detail": message},
    )


def create_application() -> FastAPI:
    app = FastAPI(
        title=settings.PROJECT_NAME,
        description="Personal task manager API",
        version=settings.VERSION,
        lifespan=lifespan
    )

    # CORS middleware - allows the browser client to call the API
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.get_cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(TaskboardError, taskboard_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)

    app.include_router(auth.router)
    app.include_router(priorities.router)
    app.include_router(tasks.router)
    app.include_router(users.router)

    @app.get("/")
    async def root():
        """Root endpoint - API information"""
        return {"message": settings.PROJECT_NAME, "version": settings.VERSION}

    @app.get("/health")
    async def health():
        """Health check endpoint - used by monitoring/deployment tools"""
        return {"status": "healthy"}

    return app


app = create_application()
