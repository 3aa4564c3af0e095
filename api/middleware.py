"""
Consolidated middleware and error handlers for the NourishHub API
"""

import time
import logging
from uuid import uuid4

from fastapi import Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from app.exceptions import NourishHubError
from domain.clock import utc_now

logger = logging.getLogger("nourishhub.middleware")


# ============================================================================
# Helper Functions
# ============================================================================


def error_envelope(status_code: int, error: dict) -> JSONResponse:
    """Build the standard ``{success: false, error, timestamp}`` body"""
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            {
                "success": False,
                "error": error,
                "timestamp": utc_now().isoformat(),
            }
        ),
    )


# ============================================================================
# Request Logging Middleware
# ============================================================================


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all HTTP requests and responses"""

    async def dispatch(self, request: Request, call_next):
        request_id = str(uuid4())
        request.state.request_id = request_id

        logger.info(
            f"Request started {request.method} {request.url.path}",
            extra={
                "request_id": request_id,
                "client": request.client.host if request.client else None,
            },
        )

        start_time = time.time()

        try:
            response: Response = await call_next(request)
        except Exception as exc:
            process_time = time.time() - start_time
            logger.error(
                f"Request failed {request.method} {request.url.path}",
                extra={
                    "request_id": request_id,
                    "error": str(exc),
                    "process_time": f"{process_time:.4f}s",
                },
                exc_info=True,
            )
            raise

        process_time = time.time() - start_time
        logger.info(
            f"Request completed {request.method} {request.url.path} {response.status_code}",
            extra={
                "request_id": request_id,
                "process_time": f"{process_time:.4f}s",
            },
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.4f}"
        return response


# ============================================================================
# Error Handlers
# ============================================================================


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request body/query validation errors as 400 Bad Request"""
    logger.warning(f"Validation error on {request.url.path}: {exc.errors()}")

    details = [
        {
            "field": ".".join(str(part) for part in err.get("loc", ()) if part != "body"),
            "message": err.get("msg"),
        }
        for err in exc.errors()
    ]
    return error_envelope(
        status.HTTP_400_BAD_REQUEST,
        {
            "code": "VALIDATION_ERROR",
            "message": "Missing or invalid fields",
            "details": details,
        },
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions"""
    logger.warning(f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}")

    return error_envelope(
        exc.status_code, {"code": f"HTTP_{exc.status_code}", "message": exc.detail}
    )


async def service_exception_handler(request: Request, exc: NourishHubError):
    """Handle errors raised by the service layer (validation, not found, store)"""
    if exc.http_status >= 500:
        # Detail was logged where the database error was caught
        logger.error(f"Store error on {request.url.path}: {exc}")
    else:
        logger.warning(f"{exc.code} on {request.url.path}: {exc}")

    return error_envelope(exc.http_status, exc.to_dict())


async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected errors"""
    logger.exception(f"Unexpected error on {request.url.path}: {str(exc)}")

    return error_envelope(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        {"code": "INTERNAL_SERVER_ERROR", "message": "An unexpected error occurred"},
    )
