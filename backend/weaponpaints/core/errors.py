"""Error Hierarchy — typed, categorized exceptions for all Weapon Paints failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Every error has a public label ("Validation error", "Not found", ...) used as
      the `error` field of the REST envelope
    - Domain errors (4xx) are client-caused; infrastructure errors (5xx) are critical
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with WeaponPaintsError base: FastAPI global handler catches all
      (ADR: uniform error shape)
    - ErrorContext as dataclass: observability fields travel with the error without
      coupling core/ to the logging framework
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
    AUTHORIZATION = "authorization"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Context for error observability and debugging (never sent to clients)."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    steamid: str | None = None
    weapon_team: int | None = None
    weapon_defindex: int | None = None
    debug_info: dict[str, Any] | None = None


class WeaponPaintsError(Exception):
    """Base exception for all Weapon Paints errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        label: str,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.label = label
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def public_message(self) -> str:
        """Message safe to return to the caller."""
        return self.message

    def to_response(self) -> dict:
        """Convert to the REST error envelope: {error, message}."""
        return {"error": self.label, "message": self.public_message}

    def log_extra(self) -> dict:
        """Fields surfaced by the JSON log formatter."""
        return {
            "error_code": self.code,
            "steamid": self.context.steamid,
            "weapon_team": self.context.weapon_team,
            "weapon_defindex": self.context.weapon_defindex,
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ValidationError(WeaponPaintsError):
    """A field is outside its documented range/shape, or a collection exceeds its bound."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            "Validation error", ErrorSeverity.WARNING, context, 400,
        )
        self.field = field


class UnauthorizedError(WeaponPaintsError):
    """No authenticated player identity reached the service."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "Authentication required",
            "UNAUTHORIZED", ErrorCategory.AUTHORIZATION,
            "Unauthorized", ErrorSeverity.WARNING, context, 401,
        )


class ForbiddenError(WeaponPaintsError):
    """Caller tried to act on another player's resources."""
    def __init__(self, context: ErrorContext | None = None):
        super().__init__(
            "You can only access your own resources",
            "FORBIDDEN", ErrorCategory.AUTHORIZATION,
            "Forbidden", ErrorSeverity.WARNING, context, 403,
        )


class ResourceNotFoundError(WeaponPaintsError):
    """Requested resource does not exist."""
    def __init__(self, resource_type: str, context: ErrorContext | None = None):
        super().__init__(
            f"{resource_type} not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            "Not found", ErrorSeverity.INFO, context, 404,
        )
        self.resource_type = resource_type


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(WeaponPaintsError):
    """Database operation failed. Detail is logged, never returned."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            "Internal server error", ErrorSeverity.CRITICAL, context, 500,
        )
        self.operation = operation

    @property
    def public_message(self) -> str:
        return "An unexpected error occurred"
