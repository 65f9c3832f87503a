"""Error Hierarchy - typed, categorized exceptions for every registry failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are terminal for the call and leave registry state unchanged
    - Retrying a domain error with the same input always fails identically
    - to_response() produces the REST envelope used by the global handlers

Design Decisions:
    - Single hierarchy with RegistryError base: FastAPI global handler catches all
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
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
    CONFLICT = "conflict"
    REFERENTIAL_INTEGRITY = "referential_integrity"
    AUTHORIZATION = "authorization"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    entity_kind: str | None = None
    entity_name: str | None = None
    field: str | None = None
    debug_info: dict[str, Any] | None = None


class RegistryError(Exception):
    """Base exception for all registry errors."""

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
                    "entity_kind": self.context.entity_kind,
                    "entity_name": self.context.entity_name,
                    "field": self.context.field,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class EmptyFieldError(RegistryError):
    """A required string field was empty."""
    def __init__(self, entity_kind: str, field: str):
        super().__init__(
            f"{entity_kind} field '{field}' must not be empty",
            "EMPTY_FIELD", ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            ErrorContext(entity_kind=entity_kind, field=field), 400,
        )
        self.entity_kind = entity_kind
        self.field = field


class InvalidFieldError(RegistryError):
    """A field value is outside its allowed range."""
    def __init__(self, entity_kind: str, field: str, reason: str):
        super().__init__(
            f"{entity_kind} field '{field}' is invalid: {reason}",
            "INVALID_FIELD", ErrorCategory.VALIDATION, ErrorSeverity.ERROR,
            ErrorContext(entity_kind=entity_kind, field=field), 400,
        )
        self.entity_kind = entity_kind
        self.field = field


class DuplicateEntityError(RegistryError):
    """Unique-key collision on a driver or customer name."""
    def __init__(self, entity_kind: str, name: str):
        super().__init__(
            f"{entity_kind} '{name}' already exists",
            "DUPLICATE_ENTITY", ErrorCategory.CONFLICT, ErrorSeverity.ERROR,
            ErrorContext(entity_kind=entity_kind, entity_name=name), 409,
        )
        self.entity_kind = entity_kind
        self.name = name


class UnknownCustomerError(RegistryError):
    """Order references a customer that was never registered."""
    def __init__(self, name: str):
        super().__init__(
            f"customer '{name}' is not registered",
            "UNKNOWN_CUSTOMER", ErrorCategory.REFERENTIAL_INTEGRITY,
            ErrorSeverity.ERROR,
            ErrorContext(entity_kind="customer", entity_name=name,
                         field="customer_name"),
            422,
        )
        self.name = name


class UnknownDriverError(RegistryError):
    """Shipment references a driver that was never registered."""
    def __init__(self, name: str):
        super().__init__(
            f"driver '{name}' is not registered",
            "UNKNOWN_DRIVER", ErrorCategory.REFERENTIAL_INTEGRITY,
            ErrorSeverity.ERROR,
            ErrorContext(entity_kind="driver", entity_name=name,
                         field="driver_name"),
            422,
        )
        self.name = name


class UnknownReceiverError(RegistryError):
    """Shipment receiver is not a registered customer."""
    def __init__(self, name: str, position: int):
        super().__init__(
            f"receiver '{name}' at position {position} is not a registered customer",
            "UNKNOWN_RECEIVER", ErrorCategory.REFERENTIAL_INTEGRITY,
            ErrorSeverity.ERROR,
            ErrorContext(entity_kind="customer", entity_name=name,
                         field="receivers", debug_info={"position": position}),
            422,
        )
        self.name = name
        self.position = position


class OperatorRequiredError(RegistryError):
    """Mutating call made by someone other than the privileged operator."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "This operation is restricted to the registry operator",
            "OPERATOR_REQUIRED", ErrorCategory.AUTHORIZATION,
            ErrorSeverity.WARNING, context, 403,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(RegistryError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
