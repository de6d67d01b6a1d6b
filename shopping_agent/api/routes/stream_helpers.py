"""Stream Helpers: SSE formatting and runtime error mapping for the agent stream route.

Invariants:
    - sse_line() emits exactly one `data: <json>\\n\\n` frame per event
    - Runtime failures map to one SSE error event; the route never adds a done event after it
    - SDK exception classes map to a stable runtime_error_type string
"""

import json

from claude_agent_sdk import (
    ClaudeSDKError, CLIConnectionError, CLIJSONDecodeError,
    CLINotFoundError, ProcessError,
)

from shopping_agent.core.errors import AgentRuntimeError, ErrorContext, ErrorSeverity


# SSE headers prevent proxy/browser buffering of streamed events.
SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}

# Subclasses first: CLINotFoundError is a CLIConnectionError.
_RUNTIME_ERROR_TYPES: tuple[tuple[type[Exception], str], ...] = (
    (CLINotFoundError, "cli_not_found"),
    (CLIConnectionError, "connection_error"),
    (ProcessError, "process_error"),
    (CLIJSONDecodeError, "malformed_message"),
    (ClaudeSDKError, "sdk_error"),
)


def sse_line(event: dict) -> str:
    """Format event as SSE data line."""
    return f"data: {json.dumps(event, ensure_ascii=False)}\n\n"


def runtime_error_type(exc: Exception) -> str:
    for cls, name in _RUNTIME_ERROR_TYPES:
        if isinstance(exc, cls):
            return name
    return "unknown"


def runtime_error(exc: ClaudeSDKError, session_id: str) -> AgentRuntimeError:
    return AgentRuntimeError(
        str(exc), runtime_error_type(exc),
        context=ErrorContext(session_id=session_id),
    )


def unexpected_error_event() -> dict:
    return {
        "type": "error",
        "data": {
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred",
            "severity": ErrorSeverity.CRITICAL.value,
            "recoverable": False,
        },
    }
