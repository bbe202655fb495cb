from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
import logging
from logging.handlers import RotatingFileHandler
import sys

from api import users
from config.settings import get_settings, Settings
from constants import HTTPStatus, ErrorMessages
from init_db import init_database
from utils.logging_utils import (
    REQUEST_ID_HEADER,
    RequestContextFilter,
    clear_logging_context,
    new_request_id,
    set_logging_context,
)

settings = get_settings()


def configure_logging(settings: Settings) -> None:
    """
    Attach console and (optionally) rotating file handlers to the root logger.

    Safe to call more than once; handlers are only added the first time.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(settings.log_level)
    if getattr(root_logger, "_users_api_configured", False):
        return

    log_formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - [%(request_id)s] %(message)s'
    )
    context_filter = RequestContextFilter()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(log_formatter)
    console_handler.addFilter(context_filter)
    root_logger.addHandler(console_handler)

    if settings.log_to_file:
        settings.log_file.parent.mkdir(parents=True, exist_ok=True)
        # File handler with rotation (10MB per file, keep 5 backups)
        file_handler = RotatingFileHandler(
            settings.log_file,
            maxBytes=10 * 1024 * 1024,
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(log_formatter)
        file_handler.addFilter(context_filter)
        root_logger.addHandler(file_handler)

    root_logger._users_api_configured = True


configure_logging(settings)
logger = logging.getLogger(__name__)
if settings.log_to_file:
    logger.info(f"Logging initialized: {settings.log_file}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Initializing database...")
    init_database()
    logger.info("Application startup complete")

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title="Users API",
    description="CRUD service for user records",
    version="1.0.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context_middleware(request: Request, call_next):
    """Tag every log line of a request with a request id and echo it back."""
    request_id = request.headers.get(REQUEST_ID_HEADER) or new_request_id()
    set_logging_context(request_id=request_id, method=request.method, path=request.url.path)
    try:
        response = await call_next(request)
        response.headers[REQUEST_ID_HEADER] = request_id
        logger.info(f"{request.method} {request.url.path} -> {response.status_code}")
        return response
    finally:
        clear_logging_context()


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report unparseable request bodies as 400 with a short message."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ())[1:])
        message = error.get("msg", "invalid value")
        problems.append(f"{location}: {message}" if location else message)

    detail = "; ".join(problems) or ErrorMessages.INVALID_PAYLOAD
    logger.warning(f"Rejected malformed request to {request.url.path}: {detail}")
    return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content={"detail": detail})


app.include_router(users.router, prefix="/api", tags=["users"])


@app.get("/api/health")
def health_check():
    """Health check endpoint"""
    return {
        "status": "ok",
        "service": "Users API",
        "version": "1.0.0"
    }


@app.get("/")
def root():
    """Root endpoint - API only"""
    return {
        "message": "Users API",
        "docs": "/docs",
        "health": "/api/health"
    }


if __name__ == "__main__":
    import uvicorn
    import socket

    # Check if port is available
    def is_port_in_use(host: str, port: int) -> bool:
        with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
            try:
                s.bind((host, port))
                return False
            except OSError:
                return True

    if is_port_in_use(settings.host, settings.port):
        logger.error(f"Port {settings.port} is already in use!")
        logger.error(f"   To fix: set USERS_API_PORT or stop the process holding port {settings.port}")
        sys.exit(1)

    logger.info(f"Starting Users API on http://{settings.host}:{settings.port}...")
    uvicorn.run(app, host=settings.host, port=settings.port)
