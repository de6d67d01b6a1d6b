"""Error Handlers: map exceptions raised before the SSE stream opens to JSON errors.

Invariants:
    - ShoppingAgentError → its own envelope and http_status, logged with log_fields()
    - RequestValidationError (bad StreamRequest body) → 400 VALIDATION_ERROR + field details
    - Anything else → 500 INTERNAL_ERROR, message never includes the exception text
    - Failures after the stream opens are SSE error frames (routes/stream_helpers.py),
      never these handlers

Design Decisions:
    - 4xx domain errors log at WARNING, 5xx at ERROR: a rejected prompt is not an outage
    - Handlers are module-level coroutines, registered through app.exception_handler,
      so tests can call them directly
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from shopping_agent.core.errors import ErrorCategory, ErrorSeverity, ShoppingAgentError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.exception_handler(ShoppingAgentError)(shopping_agent_error_handler)
    app.exception_handler(RequestValidationError)(request_validation_error_handler)
    app.exception_handler(Exception)(unhandled_error_handler)


async def shopping_agent_error_handler(
    request: Request, exc: ShoppingAgentError,
) -> JSONResponse:
    level = logging.WARNING if exc.http_status < 500 else logging.ERROR
    logger.log(level, "%s on %s: %s", exc.code, request.url.path, exc.message,
        extra=exc.log_fields())
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def request_validation_error_handler(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
    logger.warning("Rejected stream request on %s: %s", request.url.path,
        ", ".join(d["field"] for d in details),
        extra={"error_code": "VALIDATION_ERROR"})
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=_error_body(
            "VALIDATION_ERROR", "Invalid request data",
            ErrorCategory.VALIDATION, ErrorSeverity.ERROR, details=details,
        ),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled %s on %s", type(exc).__name__, request.url.path,
        exc_info=exc, extra={"error_code": "INTERNAL_ERROR"})
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            "INTERNAL_ERROR", "An unexpected error occurred",
            ErrorCategory.INTERNAL, ErrorSeverity.CRITICAL,
        ),
    )


def _error_body(
    code: str,
    message: str,
    category: ErrorCategory,
    severity: ErrorSeverity,
    details: list[dict] | None = None,
) -> dict:
    error = {
        "code": code,
        "message": message,
        "category": category.value,
        "severity": severity.value,
    }
    if details is not None:
        error["details"] = details
    return {"error": error}
