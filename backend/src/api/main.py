"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routers import bookmarks, health
from core.config import get_settings
from core.logging import configure_logging
from db.session import dispose_engine
from services.exceptions import PersistenceError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - startup and shutdown."""
    app_settings = get_settings()
    configure_logging(app_settings.log_level)
    logger.info("Bookmarking service starting")

    yield

    # Shutdown: release the database connection pool
    await dispose_engine()
    logger.info("Bookmarking service stopped")


app_settings = get_settings()

app = FastAPI(
    title="Bookmarks API",
    description="A minimal bookmarking service for short text snippets.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    _request: Request, exc: RequestValidationError,
) -> JSONResponse:
    """Report malformed request bodies as 400 rather than FastAPI's default 422."""
    return JSONResponse(
        status_code=400,
        content={"detail": jsonable_encoder(exc.errors())},
    )


@app.exception_handler(PersistenceError)
async def persistence_exception_handler(
    request: Request, exc: PersistenceError,
) -> JSONResponse:
    """Log datastore failures and hide their details from clients."""
    logger.error(
        "Datastore failure during %s %s (%s)",
        request.method,
        request.url.path,
        exc.operation,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(bookmarks.router)
