"""
Exception handlers that turn application errors into JSON responses.
"""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from hostel_allocation.config.logging import get_logger
from hostel_allocation.core.exceptions import (
    BaseAppException,
    ErrorCode,
    create_validation_error,
    field_errors_from,
)

logger = get_logger(__name__)


async def app_exception_handler(request: Request, exc: BaseAppException) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Missing or malformed request fields are a 400, not FastAPI's default 422."""
    error = create_validation_error(field_errors_from(exc.errors()))
    if any(err.get("type") == "missing" for err in exc.errors()):
        error.error_code = ErrorCode.MISSING_REQUIRED_FIELD
    return JSONResponse(status_code=error.status_code, content=error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(BaseAppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
