"""
Tuition Backend API Server

FastAPI application exposing tutor and student registration, lesson booking
and the lesson summary / tutor review reports.
"""
import logging
import time
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tuition import __version__
from tuition.api.routes import reports, students, tutors
from tuition.config import configure_logging, get_demo_settings
from tuition.exceptions import DuplicateTutorError, InvalidSubjectError
from tuition.services.demo_data import DemoDataGenerator
from tuition.services.tuition_system import get_tuition_system

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Handles startup and shutdown events.
    """
    logger.info("Starting Tuition API server...")
    system = get_tuition_system()
    logger.info(f"Tuition system ready (duplicate tutor policy: {system.duplicate_policy})")

    yield

    logger.info("Shutting down Tuition API server...")


app = FastAPI(
    title="Tuition API",
    description="Tutor, student and lesson booking records",
    version=__version__,
    lifespan=lifespan,
    docs_url="/api/docs",
    redoc_url="/api/redoc",
    openapi_url="/api/openapi.json"
)


# CORS middleware for development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all requests with timing"""
    start_time = time.time()

    response = await call_next(request)

    duration_ms = (time.time() - start_time) * 1000
    logger.info(
        f"{request.method} {request.url.path} - "
        f"Status: {response.status_code} - "
        f"Duration: {duration_ms:.2f}ms"
    )

    return response


def error_response(status_code: int, code: str, message: str, details=None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": {
                "code": code,
                "message": message,
                "details": details
            }
        }
    )


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Handle all uncaught exceptions"""
    logger.error(f"Unhandled exception: {exc}", exc_info=True)
    return error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An internal server error occurred",
        str(exc) if app.debug else None,
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors"""
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "VALIDATION_ERROR",
        "Request validation failed",
        exc.errors(),
    )


@app.exception_handler(InvalidSubjectError)
async def invalid_subject_handler(request: Request, exc: InvalidSubjectError):
    """Unknown subject text is rejected, never mapped to a default"""
    return error_response(
        status.HTTP_422_UNPROCESSABLE_ENTITY,
        "INVALID_SUBJECT",
        str(exc),
        {"subject": exc.text, "choices": exc.choices},
    )


@app.exception_handler(DuplicateTutorError)
async def duplicate_tutor_handler(request: Request, exc: DuplicateTutorError):
    return error_response(
        status.HTTP_409_CONFLICT,
        "DUPLICATE_TUTOR",
        str(exc),
        {"name": exc.name},
    )


@app.get("/health", tags=["Health"])
async def health_check():
    """
    Health check endpoint.

    Returns server status, version and registry sizes.
    """
    system = get_tuition_system()
    return {
        "status": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
        "service": "tuition-api",
        "tutors": len(system.get_tutors()),
        "students": len(system.get_students()),
    }


app.include_router(tutors.router)
app.include_router(students.router)
app.include_router(reports.router)


@app.get("/", tags=["Root"])
async def root():
    """API root endpoint"""
    return {
        "name": "Tuition API",
        "version": __version__,
        "description": "Tutor, student and lesson booking records",
        "docs": "/api/docs",
        "health": "/health"
    }


@app.post("/admin/load-demo", tags=["Admin"])
async def load_demo_data():
    """Add generated demo tutors, students and lessons to the running system"""
    logger.info("Loading demo data...")
    generator = DemoDataGenerator.from_settings(get_demo_settings())
    counts = generator.populate(get_tuition_system())
    return {"status": "success", "data": counts}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
