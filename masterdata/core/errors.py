"""
Central error handling for the master-data service

Every error leaves the service as a plain-text body with an HTTP status code.
"""
import logging

from fastapi import Request, status
from fastapi.responses import PlainTextResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError

from masterdata.core.config import settings
from masterdata.utils.record_format import RecordDecodeError

logger = logging.getLogger(__name__)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    """
    Handle HTTPException raised by routes and services

    Args:
        request: FastAPI request object
        exc: HTTPException instance

    Returns:
        PlainTextResponse carrying exc.detail
    """
    return PlainTextResponse(
        str(exc.detail),
        status_code=exc.status_code,
        headers=getattr(exc, "headers", None),
    )


def _describe_validation_error(err: dict) -> str:
    loc = [str(part) for part in err.get("loc", ())]
    source = loc[0] if loc else ""
    field = ".".join(loc[1:])
    if source in ("path", "query"):
        return f"Invalid {field} parameter"
    if not field or err.get("type") == "json_invalid":
        return "Invalid request body"
    return f"{field}: {err.get('msg')}"


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> PlainTextResponse:
    """
    Handle RequestValidationError as a 400 client error

    Malformed identifiers, filters and JSON bodies are all client input errors.
    """
    messages = []
    for err in exc.errors():
        message = _describe_validation_error(err)
        if message not in messages:
            messages.append(message)
    return PlainTextResponse(
        "; ".join(messages) or "Invalid request",
        status_code=status.HTTP_400_BAD_REQUEST,
    )


async def database_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """
    Handle store and row-decoding failures

    Does not leak driver error text in production.
    """
    logger.error(f"Store failure on {request.method} {request.url.path}: {exc}", exc_info=exc)

    if settings.APP_ENV == "prod":
        return PlainTextResponse(
            "Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    label = "Error decoding record" if isinstance(exc, RecordDecodeError) else "Database error"
    return PlainTextResponse(
        f"{label}: {exc}",
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def generic_exception_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """
    Handle unexpected exceptions

    Does not leak internal error details in production.
    """
    logger.error(f"Unhandled exception: {exc}", exc_info=exc)

    if settings.APP_ENV == "prod":
        return PlainTextResponse(
            "Internal server error",
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return PlainTextResponse(
        str(exc),
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


def register_exception_handlers(app) -> None:
    """Attach every handler above to the application"""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, database_exception_handler)
    app.add_exception_handler(RecordDecodeError, database_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)
