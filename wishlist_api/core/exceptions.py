"""
Custom exception classes and error handlers
Provides consistent error responses across the application
"""

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from typing import Any, Dict, Optional
import logging

logger = logging.getLogger(__name__)

class WishlistAPIException(HTTPException):
    """Base exception class for the Wishlist API"""

    def __init__(
        self,
        status_code: int,
        detail: str,
        error_code: Optional[str] = None,
        headers: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(status_code=status_code, detail=detail, headers=headers)
        self.error_code = error_code

class ValidationError(WishlistAPIException):
    """400 Bad Request - malformed input such as a bad type tag or blank name"""

    def __init__(self, detail: str, error_code: str = "VALIDATION_ERROR"):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            error_code=error_code
        )

class UnauthorizedException(WishlistAPIException):
    """401 Unauthorized"""

    def __init__(self, detail: str = "Unauthorized", error_code: str = "UNAUTHORIZED"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            error_code=error_code,
            headers={"WWW-Authenticate": "Bearer"}
        )

class NotFoundError(WishlistAPIException):
    """404 Not Found - referenced folder or catalog entity is absent"""

    def __init__(self, detail: str = "Not found", error_code: str = "NOT_FOUND"):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=detail,
            error_code=error_code
        )

class ConflictError(WishlistAPIException):
    """409 Conflict - duplicate item or concurrent modification"""

    def __init__(self, detail: str, error_code: str = "CONFLICT"):
        super().__init__(
            status_code=status.HTTP_409_CONFLICT,
            detail=detail,
            error_code=error_code
        )

class StorageError(WishlistAPIException):
    """500 Internal Server Error - persistence or lookup unavailable"""

    def __init__(
        self,
        detail: str = "Storage unavailable",
        error_code: str = "STORAGE_ERROR"
    ):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            error_code=error_code
        )

class CheckoutError(WishlistAPIException):
    """502 Bad Gateway - checkout provider failed to open a session"""

    def __init__(
        self,
        detail: str = "Unable to start checkout",
        error_code: str = "CHECKOUT_FAILED"
    ):
        super().__init__(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=detail,
            error_code=error_code
        )

# Business logic exceptions
class DuplicateItemError(ConflictError):
    """Item already saved in the folder"""

    def __init__(self, detail: str = "Item already in folder"):
        super().__init__(detail=detail, error_code="DUPLICATE_ITEM")

class ConcurrentModificationError(ConflictError):
    """Aggregate changed between read and write"""

    def __init__(self, detail: str = "Wishlist was modified concurrently"):
        super().__init__(detail=detail, error_code="CONCURRENT_MODIFICATION")

def error_body(code: str, message: str) -> Dict[str, Any]:
    return {"error": {"code": code, "message": message}}

async def wishlist_exception_handler(request: Request, exc: WishlistAPIException) -> JSONResponse:
    """Render application exceptions with their error code"""
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(exc.error_code or "ERROR", str(exc.detail)),
        headers=exc.headers,
    )

async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed request bodies are client errors like any other ValidationError"""
    first = exc.errors()[0] if exc.errors() else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request")
    if location:
        message = f"{location}: {message}"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body("VALIDATION_ERROR", message),
    )

async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Last-resort handler so clients always receive the error envelope"""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_body("INTERNAL_ERROR", "An internal error occurred"),
    )

def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(WishlistAPIException, wishlist_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
