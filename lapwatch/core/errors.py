"""Error Hierarchy — typed, categorized exceptions for all lapwatch failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Errors are raised synchronously; the object that raised them is left unchanged
    - to_dict() produces the structured envelope the CLI attaches to its log record

Design Decisions:
    - Single hierarchy with LapwatchError base: the CLI catches one type
    - ErrorContext as dataclass: rich observability without coupling to logging framework
    - InvalidInputError is also a ValueError so plain callers can catch it idiomatically
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    ERROR = "error"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    STATE_TRANSITION = "state_transition"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    operation: str | None = None
    state: str | None = None
    debug_info: dict[str, Any] | None = None


class LapwatchError(Exception):
    """Base exception for all lapwatch errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()

    def to_dict(self) -> dict:
        """Convert to a standardized error envelope."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "operation": self.context.operation,
                    "state": self.context.state,
                    "debug_info": self.context.debug_info,
                },
            }
        }


# ─── Domain Errors ──────────────────────────────────────────────

class IllegalStateError(LapwatchError):
    """Operation called from a state that does not allow it."""
    def __init__(self, message: str, operation: str, state: str):
        super().__init__(
            message, "ILLEGAL_STATE", ErrorCategory.STATE_TRANSITION,
            ErrorSeverity.ERROR, ErrorContext(operation=operation, state=state),
        )
        self.operation = operation
        self.state = state


class InvalidInputError(LapwatchError, ValueError):
    """Input outside the domain of the operation."""
    def __init__(self, message: str, field: str, value: Any = None):
        super().__init__(
            message, "INVALID_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR,
            ErrorContext(operation=field, debug_info={"value": repr(value)}),
        )
        self.field = field
        self.value = value
