from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from init_db import init_database
from api import courses, students, teachers
from config import settings
from constants import ServerConfig
from dtos.response import HealthResponse
from utils.error_handlers import register_exception_handlers
from utils.logging_utils import clear_logging_context, set_logging_context
import logging
from logging.handlers import RotatingFileHandler
import sys
import uuid

# Configure logging with rotating file handler
LOG_DIR = settings.LOG_DIR
LOG_DIR.mkdir(parents=True, exist_ok=True)
LOG_FILE = LOG_DIR / "edutrack.log"

# Create formatters and handlers
log_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

# File handler with rotation (10MB per file, keep 5 backups)
file_handler = RotatingFileHandler(
    LOG_FILE,
    maxBytes=10 * 1024 * 1024,  # 10MB
    backupCount=5,
    encoding='utf-8'
)
file_handler.setFormatter(log_formatter)
file_handler.setLevel(settings.LOG_LEVEL)

# Console handler
console_handler = logging.StreamHandler(sys.stdout)
console_handler.setFormatter(log_formatter)
console_handler.setLevel(settings.LOG_LEVEL)

# Configure root logger
root_logger = logging.getLogger()
root_logger.setLevel(settings.LOG_LEVEL)
root_logger.addHandler(file_handler)
root_logger.addHandler(console_handler)

logger = logging.getLogger(__name__)
logger.info(f"Logging initialized: {LOG_FILE}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan - startup and shutdown"""
    logger.info("Initializing database...")
    init_database()
    logger.info(f"{ServerConfig.SERVICE_NAME} {ServerConfig.VERSION} ready")

    yield

    logger.info("Application shutdown complete")


app = FastAPI(
    title=ServerConfig.SERVICE_NAME,
    description="Student, course and teacher records for an educational institution",
    version=ServerConfig.VERSION,
    lifespan=lifespan
)

# Configure CORS for the web frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_context(request: Request, call_next):
    """Tag every log record written while handling a request with its id."""
    request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
    set_logging_context(request_id=request_id, path=request.url.path)
    try:
        response = await call_next(request)
    finally:
        clear_logging_context()
    response.headers["X-Request-ID"] = request_id
    return response


register_exception_handlers(app)

# Include API routers
app.include_router(students.router, prefix="/api/students", tags=["students"])
app.include_router(courses.router, prefix="/api/courses", tags=["courses"])
app.include_router(teachers.router, prefix="/api/teachers", tags=["teachers"])


@app.get("/api/health", response_model=HealthResponse)
def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="ok",
        service=ServerConfig.SERVICE_NAME,
        version=ServerConfig.VERSION,
    )


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Starting {ServerConfig.SERVICE_NAME} on {ServerConfig.url()}...")
    uvicorn.run(app, host=ServerConfig.HOST, port=ServerConfig.PORT)
