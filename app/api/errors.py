"""
Error translation for the HTTP layer

Service exceptions and request validation failures are converted into the
standard envelope here, so endpoints only deal with the success path.

Unexpected exceptions are caught by each endpoint and passed to
``handle_error``. No handler is registered for bare ``Exception``: Starlette
runs such a handler outside the CORS middleware and re-raises afterwards.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.infrastructure.exceptions import AppError, NotFoundError, ValidationFailedError
from app.infrastructure.response import (
    error_response,
    not_found_response,
    server_error_response,
    validation_error_response,
)
from app.schemas.validation import first_issue

logger = logging.getLogger(__name__)


def handle_error(err: Exception) -> JSONResponse:
    """Convert an unexpected exception into the generic 500 response"""
    logger.exception(f"unhandled error: {err}")
    return JSONResponse(status_code=500, content=server_error_response(err))


async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if isinstance(exc, ValidationFailedError):
        content = validation_error_response(exc.message)
    elif isinstance(exc, NotFoundError):
        content = not_found_response(exc.message)
    else:
        content = error_response(message=exc.message)
    return JSONResponse(status_code=exc.status_code, content=content)


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    issue = first_issue(exc.errors())
    logger.info(f"{request.method} {request.url.path} rejected: {issue}")
    return JSONResponse(status_code=400, content=validation_error_response(issue))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
