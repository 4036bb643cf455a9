"""Error Hierarchy — typed, categorized exceptions for every failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Client errors (400-level) are surfaced; UpstreamError is never surfaced
      (the content pipeline converts it into fallback data)
    - to_response() produces the flat {"error": message} envelope clients expect

Design Decisions:
    - Single hierarchy with PrenatalAPIError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    WARNING = "warning"
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    METHOD = "method"
    EXTERNAL_API = "external_api"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    endpoint: str | None = None
    language: str | None = None
    weeks: int | None = None


class PrenatalAPIError(Exception):
    """Base exception for all Prenatal Companion API errors."""

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
        """Convert to the REST error body."""
        return {"error": self.message}


# ─── Client Errors (400-level) ──────────────────────────────────

class InvalidWeeksError(PrenatalAPIError):
    """weeks missing, zero, negative, above 42, or not a whole number."""
    def __init__(self, value: Any = None, context: ErrorContext | None = None):
        super().__init__(
            "Invalid weeks parameter", "INVALID_WEEKS",
            ErrorCategory.VALIDATION, ErrorSeverity.WARNING, context, 400,
        )
        self.value = value


class MethodNotAllowedError(PrenatalAPIError):
    """Content endpoints only accept POST (and OPTIONS preflight)."""
    def __init__(self, method: str, context: ErrorContext | None = None):
        super().__init__(
            "Method not allowed", "METHOD_NOT_ALLOWED",
            ErrorCategory.METHOD, ErrorSeverity.WARNING, context, 405,
        )
        self.method = method


# ─── Upstream Errors (masked) ───────────────────────────────────

class UpstreamError(PrenatalAPIError):
    """The model call or its output was unusable.

    kind is one of: connection_error, timeout, status_error, empty_response,
    invalid_json, schema_mismatch, unknown.
    """
    def __init__(
        self,
        message: str,
        kind: str,
        status_code: int | None = None,
        context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Anthropic API error ({kind}): {message}",
            "UPSTREAM_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.WARNING, context, 503,
        )
        self.kind = kind
        self.status_code = status_code
