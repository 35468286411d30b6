"""FastAPI application entrypoint. No business logic; only wiring, startup and error mapping."""

from dotenv import load_dotenv

load_dotenv()

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from nonprofit.api.v1 import router as v1_router
from nonprofit.core.config import settings
from nonprofit.core.database import SessionLocal, engine
from nonprofit.models import Base
from nonprofit.services.storage import URL_PREFIX, ensure_upload_dir
from nonprofit.services.users import ensure_owner

logger = logging.getLogger(__name__)

# Pydantic error types that mean "the field was not filled in".
MISSING_FIELD_ERRORS = frozenset({"missing", "string_too_short"})
REQUEST_LOCATIONS = frozenset({"body", "path", "query", "header"})


def initialize_database() -> None:
    """Create missing tables and the owner account. Failures are logged; the API still starts."""
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tables ensured")
    except SQLAlchemyError:
        logger.exception("Database initialization failed. Check DATABASE_URL and Postgres credentials.")
        return

    db = SessionLocal()
    try:
        ensure_owner(db, settings)
    except SQLAlchemyError:
        logger.exception("Owner bootstrap failed")
    finally:
        db.close()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    initialize_database()
    yield
    engine.dispose()


app = FastAPI(
    title="Nonprofit API",
    version="0.1.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(_request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render every HTTP error as {"error": <message>}."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(_request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed or incomplete input is a 400, not FastAPI's default 422."""
    errors = exc.errors()
    if not errors or any(err.get("type") in MISSING_FIELD_ERRORS for err in errors):
        message = "All fields are required"
    else:
        first = errors[0]
        field = ".".join(str(part) for part in first.get("loc", ()) if part not in REQUEST_LOCATIONS)
        reason = str(first.get("msg", "Invalid value")).removeprefix("Value error, ")
        message = f"Invalid {field}: {reason}" if field else reason
    return JSONResponse(status_code=400, content={"error": message})


@app.exception_handler(SQLAlchemyError)
async def database_exception_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    logger.error(
        "Database error",
        exc_info=exc,
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(status_code=500, content={"error": "Internal Server Error"})


app.include_router(v1_router)

# Uploaded director photos, served without access control.
ensure_upload_dir(settings)
app.mount(f"/{URL_PREFIX}", StaticFiles(directory=settings.UPLOAD_DIR), name=URL_PREFIX)


@app.get("/")
def root() -> dict[str, str]:
    """Root route; minimal payload for discovery."""
    return {"message": "Nonprofit API"}
