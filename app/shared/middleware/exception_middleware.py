# app/shared/middleware/exception_middleware.py (async version)

"""
Middleware for centralized exception handling.

This module defines middleware that intercepts exceptions and formats
them into the JSON error envelope ``{success, message, code, errors?, error?}``.
"""

import time
import logging
from typing import Any, Callable, Dict, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from app.domain.exceptions import DatabaseOperationException, DomainException

# Configure logger
logger = logging.getLogger(__name__)


def error_response(
        status_code: int,
        message: str,
        code: str,
        errors: Optional[list] = None,
        error: Optional[str] = None,
) -> JSONResponse:
    """Build the JSON error envelope."""
    content: Dict[str, Any] = {"success": False, "message": message, "code": code}
    if errors:
        content["errors"] = errors
    if error is not None:
        content["error"] = error
    return JSONResponse(status_code=status_code, content=content)


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.
    Captures specific exceptions and formats the response accordingly.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except DatabaseOperationException as exc:
            # Store failure already wrapped by a repository
            logger.error(
                f"Database operation error: {exc.detail} | "
                f"Path: {request.url.path}"
            )
            return error_response(
                status_code=exc.status_code,
                message=self._public_message(request, "Internal database error", exc.detail),
                code=exc.internal_code,
                error=self._raw_error(request, exc.original_error or exc),
            )

        except DomainException as exc:
            # Business rule violations carry their own status and internal code
            logger.warning(
                f"Domain exception: {exc.detail} | Code: {exc.internal_code} | "
                f"Path: {request.url.path}"
            )
            return error_response(
                status_code=exc.status_code,
                message=exc.detail,
                code=exc.internal_code,
                errors=exc.errors,
            )

        except SQLAlchemyError as exc:
            logger.error(
                f"Database error: Type={type(exc).__name__} | {str(exc)} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return error_response(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message="Internal database error",
                code="DATABASE_ERROR",
                error=self._raw_error(request, exc),
            )

        except Exception as exc:
            # Unhandled exceptions
            logger.exception(
                f"Unhandled exception: Type={type(exc).__name__} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return error_response(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                message="Internal server error",
                code="INTERNAL_SERVER_ERROR",
                error=self._raw_error(request, exc),
            )

    @staticmethod
    def _is_production(request: Request) -> bool:
        settings = getattr(request.app.state, "settings", None)
        return settings is not None and settings.ENVIRONMENT == "production"

    def _public_message(self, request: Request, generic: str, detailed: str) -> str:
        return generic if self._is_production(request) else detailed

    def _raw_error(self, request: Request, exc: BaseException) -> str:
        """Raw error text; masked in production."""
        if self._is_production(request):
            return "Internal server error"
        return str(exc)
