"""
Master-data service - Main Application Entry Point
"""
import logging
from urllib.parse import urlparse, urlunparse

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from masterdata import __version__
from masterdata.api.router import api_router
from masterdata.core.config import settings
from masterdata.core.errors import register_exception_handlers
from masterdata.core.logging import setup_logging, log_requests
from masterdata.db.init_db import init_db
from masterdata.db.session import engine, DATABASE_URL

# Setup logging first
setup_logging()
logger = logging.getLogger(__name__)


def _mask_database_url(url: str) -> str:
    """Mask password in DATABASE_URL for safe logging; show full path for sqlite."""
    try:
        parsed = urlparse(url)
        if parsed.scheme.startswith("sqlite"):
            return url
        if parsed.password:
            netloc = f"{parsed.username}:****@{parsed.hostname or ''}"
            if parsed.port:
                netloc += f":{parsed.port}"
            return urlunparse(parsed._replace(netloc=netloc))
    except ValueError:
        return "***"
    return url


app = FastAPI(
    title="Master Data Service",
    description="Employee records plus department, position and geography reference data",
    version=settings.VERSION or __version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.get_allowed_origins_list(),
    allow_credentials=False,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)
app.middleware("http")(log_requests)

register_exception_handlers(app)

# Include all API routes under /api
app.include_router(api_router, prefix="/api")


@app.on_event("startup")
def startup_database() -> None:
    """Log the database in use and create any missing tables"""
    logger.info("DATABASE_URL (app): %s", _mask_database_url(DATABASE_URL))
    init_db(engine)
