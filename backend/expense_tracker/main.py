import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from .api import api_router
from .config import ensure_data_dir, get_settings
from .database import init_db, close_db, is_db_open

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle startup and shutdown events."""
    if not is_db_open():
        if settings.database_url.startswith("sqlite"):
            ensure_data_dir(settings)
        init_db(settings.database_url)
    yield
    # Cleanup on shutdown
    close_db()


app = FastAPI(
    title="Expense Tracker",
    description="Personal income and expense tracking API",
    version="0.1.0",
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["Origin", "Content-Type", "Authorization"],
)

# API routes
app.include_router(api_router, prefix=settings.api_prefix)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Log unexpected database failures and answer with a generic 500."""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Database error"})


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}
