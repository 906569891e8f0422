"""Main FastAPI application for the Player Registry service."""

from contextlib import asynccontextmanager
from typing import Dict, Any

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
import structlog

from app.core import db_manager, get_global_settings
from app.core.exceptions import ErrorKind, ServiceException
from app.core.logging import setup_logging
from app.features.players import players_router


settings = get_global_settings()
setup_logging(settings.log_level)
logger = structlog.get_logger(__name__)

ERROR_STATUS_CODES = {
    ErrorKind.BAD_REQUEST: status.HTTP_400_BAD_REQUEST,
    ErrorKind.NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorKind.INTERNAL: status.HTTP_500_INTERNAL_SERVER_ERROR,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    logger.info("Starting up Player Registry application")
    yield
    logger.info("Shutting down Player Registry application")
    await db_manager.close()


async def service_exception_handler(
    request: Request, exc: ServiceException
) -> JSONResponse:
    """Translate a service error kind into its HTTP status."""
    status_code = ERROR_STATUS_CODES[exc.kind]
    if status_code >= 500:
        logger.error(
            "request_failed",
            path=request.url.path,
            error_type=type(exc).__name__,
            error=str(exc),
        )
        detail = "Internal server error"
    else:
        detail = exc.message
    return JSONResponse(status_code=status_code, content={"detail": detail})


async def request_validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Answer unparseable path, query or body input with 400."""
    logger.info(
        "request_rejected",
        path=request.url.path,
        errors=len(exc.errors()),
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_errors(exc)},
    )


def jsonable_errors(exc: RequestValidationError) -> list[Dict[str, Any]]:
    """Keep only the JSON-safe parts of framework validation errors."""
    return [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg", "")}
        for error in exc.errors()
    ]


# OpenAPI tags metadata
tags_metadata = [
    {
        "name": "players",
        "description": "Create, search, update and delete player characters.",
    },
    {
        "name": "health",
        "description": "Health check and system status endpoints.",
    },
]

# Create FastAPI application
app = FastAPI(
    title="Player Registry Service",
    description="""
    CRUD API for game player characters.

    ## Features

    * **Search**: Filter by name, title, race, profession, birthday, banned flag,
      experience and level ranges, with paging and sorting
    * **Progression**: Level and experience to the next level are always
      derived server-side from experience
    """,
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
    openapi_tags=tags_metadata,
    lifespan=lifespan,
    debug=settings.debug,
)

app.add_exception_handler(ServiceException, service_exception_handler)  # type: ignore[arg-type]
app.add_exception_handler(RequestValidationError, request_validation_exception_handler)  # type: ignore[arg-type]

# Configure CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routers
app.include_router(players_router, prefix="/rest", tags=["players"])


@app.get("/health", tags=["health"])
async def health_check() -> Dict[str, Any]:
    """
    Health check endpoint.

    Returns the health status of the application including:
    - Overall health status
    - Application version
    - Debug mode status
    """
    return {
        "status": "healthy",
        "message": "Application is running",
        "version": "0.1.0",
        "debug": settings.debug,
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )
