"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import logging
import traceback
from typing import Any, Dict, Optional
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status

from app.config import settings
from app.domain.models.base import AuthenticationError, ValidationError

logger = logging.getLogger(__name__)


class BusinessException(Exception):
    """
    Base exception for errors that map onto a specific HTTP status.
    """
    def __init__(
        self,
        message: str,
        error_code: str = None,
        status_code: int = status.HTTP_400_BAD_REQUEST,
        headers: Optional[Dict[str, str]] = None
    ):
        self.message = message
        self.error_code = error_code
        self.status_code = status_code
        self.headers = headers
        super().__init__(self.message)


class UnauthorizedException(BusinessException):
    """Exception raised for authentication errors."""
    def __init__(self, message: str = "Unauthorized Access..."):
        super().__init__(
            message=message,
            error_code="UNAUTHORIZED",
            status_code=status.HTTP_401_UNAUTHORIZED,
            headers={"WWW-Authenticate": "Bearer"}
        )


class ForbiddenException(BusinessException):
    """Exception raised for authorization errors."""
    def __init__(self, message: str = "Forbidden Access..."):
        super().__init__(
            message=message,
            error_code="FORBIDDEN",
            status_code=status.HTTP_403_FORBIDDEN
        )


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Handle different types of exceptions and return appropriate responses.
        """
        error_response = self.format_error_response(exc)

        if error_response["status_code"] >= 500:
            logger.error(
                f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
                exc_info=True,
                extra={
                    "request_path": request.url.path,
                    "request_method": request.method,
                    "client_host": request.client.host if request.client else None
                }
            )
        else:
            logger.info(
                f"{request.method} {request.url.path} -> "
                f"{error_response['status_code']}: {error_response['message']}"
            )

        # In development, add more debug information
        if settings.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        return JSONResponse(
            status_code=error_response["status_code"],
            content=error_response,
            headers=getattr(exc, "headers", None)
        )

    def format_error_response(self, exc: Exception) -> Dict[str, Any]:
        """
        Format exception into a consistent error response structure.
        """
        # Default error response
        error_response = {
            "error": True,
            "message": "An unexpected error occurred",
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR
        }

        if isinstance(exc, BusinessException):
            error_response.update({
                "message": exc.message,
                "status_code": exc.status_code
            })
        elif isinstance(exc, AuthenticationError):
            error_response.update({
                "message": "Unauthorized Access...",
                "status_code": status.HTTP_401_UNAUTHORIZED
            })
        elif isinstance(exc, ValidationError):
            error_response.update({
                "message": exc.message,
                "status_code": status.HTTP_400_BAD_REQUEST
            })

        return error_response
