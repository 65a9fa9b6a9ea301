"""
Core middleware registration for the FastAPI application.

This module provides middleware components for request tracking,
timing, metrics and error logging.
"""
from __future__ import annotations

import time
import uuid
from typing import Callable, Iterable

from fastapi import FastAPI, Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from hostel_allocation.config.logging import get_logger

logger = get_logger(__name__)

OPERATIONAL_PATHS = ("/health", "/ready", "/metrics")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """
    Adds a unique request ID to each incoming request.

    The ID is stored in ``request.state.request_id`` and echoed in the
    ``X-Request-ID`` response header.
    """

    def __init__(self, app: ASGIApp, header_name: str = "X-Request-ID"):
        super().__init__(app)
        self.header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers[self.header_name] = request_id
        return response


class TimingMiddleware(BaseHTTPMiddleware):
    """
    Measures and logs request processing time.

    Adds X-Process-Time header to responses with the processing duration in seconds.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        start_time = time.time()
        response = await call_next(request)
        process_time = time.time() - start_time

        response.headers["X-Process-Time"] = f"{process_time:.4f}"

        logger.info(
            "Request completed",
            extra={
                "request_id": getattr(request.state, "request_id", "unknown"),
                "method": request.method,
                "url": str(request.url.path),
                "status_code": response.status_code,
                "process_time": f"{process_time:.4f}s",
                "client_host": request.client.host if request.client else None,
            }
        )
        return response


class MetricsMiddleware(BaseHTTPMiddleware):
    """
    Counts requests and error responses on the app's PerformanceTracker.

    Health, readiness and metrics scrapes are not counted. Unhandled
    exceptions are counted as 500s before being re-raised.
    """

    def __init__(self, app: ASGIApp, exclude_paths: Iterable[str] = OPERATIONAL_PATHS):
        super().__init__(app)
        self.exclude_paths = frozenset(exclude_paths)

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        tracker = getattr(request.app.state, "metrics", None)
        if tracker is None or request.url.path in self.exclude_paths:
            return await call_next(request)

        try:
            response = await call_next(request)
        except Exception:
            tracker.track_request(request.method, 500)
            raise

        tracker.track_request(request.method, response.status_code)
        return response


class ErrorLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs error responses and exceptions during request processing.
    """

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = getattr(request.state, "request_id", "unknown")
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.error(
                f"Request processing failed: {exc}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url.path),
                    "error_type": type(exc).__name__,
                },
                exc_info=True
            )
            raise

        if response.status_code >= 400:
            logger.warning(
                f"Request returned error status {response.status_code}",
                extra={
                    "request_id": request_id,
                    "method": request.method,
                    "url": str(request.url.path),
                    "status_code": response.status_code,
                }
            )
        return response


def register_middlewares(app: FastAPI) -> None:
    """
    Register all core middlewares to the FastAPI application.

    Middlewares are registered in reverse order of execution (LIFO):
    the last one added is the first to see the request.

    Execution order:
        1. RequestIDMiddleware
        2. MetricsMiddleware
        3. TimingMiddleware
        4. ErrorLoggingMiddleware
    """
    app.add_middleware(ErrorLoggingMiddleware)
    app.add_middleware(TimingMiddleware)
    app.add_middleware(MetricsMiddleware)
    app.add_middleware(RequestIDMiddleware)
    logger.debug("Core middlewares registered")


__all__ = [
    "RequestIDMiddleware",
    "TimingMiddleware",
    "MetricsMiddleware",
    "ErrorLoggingMiddleware",
    "register_middlewares",
]
