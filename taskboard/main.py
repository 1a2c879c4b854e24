from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .config import CORS_ORIGINS
from .database import create_tables
from .logging_config import get_logger, setup_logging
from .routers import tasks
from .services.errors import TaskNotFoundError

logger = get_logger(__name__)

# Create FastAPI app
app = FastAPI(
    title="Taskboard API",
    description="Per-user and per-organization task lists with a priority board",
    version="1.0.0",
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(tasks.router, prefix="/api", tags=["tasks"])


@app.exception_handler(TaskNotFoundError)
async def task_not_found_handler(request: Request, exc: TaskNotFoundError):
    return JSONResponse(status_code=404, content={"detail": "Task not found"})


@app.exception_handler(SQLAlchemyError)
async def datastore_error_handler(request: Request, exc: SQLAlchemyError):
    # Not retried here; 503 tells the caller it may retry.
    logger.error("Datastore failure on %s %s", request.method, request.url.path, exc_info=exc)
    return JSONResponse(status_code=503, content={"detail": "Datastore unavailable"})


# Create tables on startup
@app.on_event("startup")
def on_startup():
    setup_logging()
    create_tables()
    logger.info("Taskboard API started")


@app.get("/")
def read_root():
    return {"message": "Taskboard API"}


@app.get("/health")
def health_check():
    return {"status": "healthy"}
