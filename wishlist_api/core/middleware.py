"""
Application middleware for request/response processing
Handles CORS, request ids and request logging
"""

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from starlette.middleware.base import BaseHTTPMiddleware
import time
import uuid
import logging
from typing import Callable

from .config import settings

logger = logging.getLogger(__name__)

class RequestIDMiddleware(BaseHTTPMiddleware):
    """Add unique request ID to each request"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id

        return response

class LoggingMiddleware(BaseHTTPMiddleware):
    """One access log line per request, tagged with its request id"""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        started = time.perf_counter()
        request_id = getattr(request.state, "request_id", "-")
        route = f"{request.method} {request.url.path}"

        try:
            response = await call_next(request)
        except Exception:
            elapsed = time.perf_counter() - started
            logger.exception(f"[{request_id}] {route} crashed after {elapsed:.3f}s")
            raise

        elapsed = time.perf_counter() - started
        level = logging.WARNING if response.status_code >= 500 else logging.INFO
        logger.log(level, f"[{request_id}] {route} -> {response.status_code} in {elapsed:.3f}s")
        response.headers["X-Process-Time"] = f"{elapsed:.4f}"

        return response

def setup_middleware(app: FastAPI) -> None:
    """Configure all middleware for the application"""
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.ALLOWED_HOSTS
    )

    # Added last so it runs first and the id is visible to the logger
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)
