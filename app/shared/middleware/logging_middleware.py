# app/shared/middleware/logging_middleware.py (async version)

"""
Middleware for HTTP request logging.

Every request gets an identifier, taken from the ``X-Request-ID`` header
when the caller sends one, which is echoed in the response and prefixed to
the access log lines.
"""

import time
import uuid
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs one line when a request arrives and one when its response leaves.

    Responses with 4xx status are logged as warnings and 5xx as errors.
    Query strings and client addresses are left out in production.
    """

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        request.state.request_id = request_id
        verbose = request.app.state.settings.ENVIRONMENT != "production"

        if verbose:
            query = request.url.query or "-"
            client = request.client.host if request.client else "-"
            logger.info(f"[{request_id}] {request.method} {request.url.path} query={query} client={client}")
        else:
            logger.info(f"[{request_id}] {request.method} {request.url.path}")

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        if response.status_code >= 500:
            level = logging.ERROR
        elif response.status_code >= 400:
            level = logging.WARNING
        else:
            level = logging.INFO
        logger.log(
            level,
            f"[{request_id}] {response.status_code} {request.method} {request.url.path} ({elapsed_ms:.1f} ms)"
        )

        response.headers[REQUEST_ID_HEADER] = request_id
        return response
