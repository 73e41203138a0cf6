import logging
from datetime import datetime, timezone
from typing import Tuple

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, NoResultFound, SQLAlchemyError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core import config

logger = logging.getLogger(__name__)


def _validation_message(errors) -> str:
    messages = []
    for error in errors:
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "Invalid value")
        messages.append(f"{location}: {message}" if location else message)
    return "; ".join(messages) or "Invalid input"


def describe_exception(exc: BaseException) -> Tuple[int, str]:
    """Map an exception raised while handling a request to (status code, message)"""
    if isinstance(exc, (HTTPException, StarletteHTTPException)):
        status_code, message = exc.status_code, str(exc.detail)
    elif isinstance(exc, (ValidationError, RequestValidationError)):
        status_code, message = status.HTTP_400_BAD_REQUEST, _validation_message(exc.errors())
    elif isinstance(exc, IntegrityError):
        status_code, message = status.HTTP_409_CONFLICT, "Unique or foreign key constraint failed"
    elif isinstance(exc, NoResultFound):
        status_code, message = status.HTTP_404_NOT_FOUND, "Record not found"
    elif isinstance(exc, SQLAlchemyError):
        logger.error(f"Database error: {str(exc)}", exc_info=exc)
        status_code, message = status.HTTP_500_INTERNAL_SERVER_ERROR, "A database error occurred"
    else:
        logger.error(f"Unhandled error: {str(exc)}", exc_info=exc)
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        message = "Internal server error" if config.APP_ENV == "production" else str(exc)
    return status_code, message.replace("\n", "")


def error_body(status_code: int, path: str, message: str) -> dict:
    return {
        "statusCode": status_code,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "path": path,
        "message": message.replace("\n", ""),
    }


async def _handle_exception(request: Request, exc: Exception) -> JSONResponse:
    status_code, message = describe_exception(exc)
    headers = getattr(exc, "headers", None)
    return JSONResponse(
        status_code=status_code,
        content=error_body(status_code, request.url.path, message),
        headers=headers,
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Render REST errors as {statusCode, timestamp, path, message}"""
    app.add_exception_handler(StarletteHTTPException, _handle_exception)
    app.add_exception_handler(RequestValidationError, _handle_exception)
    app.add_exception_handler(SQLAlchemyError, _handle_exception)
    app.add_exception_handler(Exception, _handle_exception)
