"""Error Hierarchy: typed, categorized exceptions for the shopping agent surface.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - to_response() produces the REST envelope; to_sse_event() produces the SSE envelope
    - No internal details leaked in user-facing messages
    - The event stream itself never raises these; only the HTTP layer maps into them

Design Decisions:
    - Single hierarchy with ShoppingAgentError base: FastAPI global handler catches all
    - ErrorContext as dataclass, decoupled from the logging setup
"""

from dataclasses import dataclass, field
from enum import Enum
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    EXTERNAL_API = "external_api"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Where an error happened and what the client should be told."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    session_id: str | None = None
    tool_name: str | None = None
    user_message: str | None = None


class ShoppingAgentError(Exception):
    """Base exception for all shopping agent errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "session_id": self.context.session_id,
                    "tool_name": self.context.tool_name,
                },
            }
        }

    def log_fields(self) -> dict:
        """Extras for the structured log line; None values are left out."""
        fields = {
            "error_code": self.code,
            "session_id": self.context.session_id,
            "tool_name": self.context.tool_name,
        }
        return {k: v for k, v in fields.items() if v is not None}

    def to_sse_event(self) -> dict:
        """Convert to SSE error event."""
        return {
            "type": "error",
            "data": {
                "code": self.code,
                "message": self.context.user_message or self.message,
                "severity": self.severity.value,
                "recoverable": self.severity in (
                    ErrorSeverity.INFO, ErrorSeverity.WARNING,
                ),
                "tool_name": self.context.tool_name,
            },
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class PromptValidationError(ShoppingAgentError):
    """Prompt rejected before an agent session was opened."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            message, "INVALID_PROMPT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class AgentRuntimeError(ShoppingAgentError):
    """Agent runtime or tool-server process failed mid-session."""
    def __init__(
        self,
        message: str,
        runtime_error_type: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        if ctx.user_message is None:
            ctx.user_message = "The shopping assistant stopped unexpectedly"
        super().__init__(
            f"Agent runtime error ({runtime_error_type}): {message}",
            "AGENT_RUNTIME_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.CRITICAL, ctx, 503,
        )
        self.runtime_error_type = runtime_error_type

    def log_fields(self) -> dict:
        return {**super().log_fields(), "runtime_error_type": self.runtime_error_type}
