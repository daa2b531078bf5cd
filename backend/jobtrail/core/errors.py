"""Error Hierarchy — typed, categorized exceptions for all jobtrail failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Domain errors (400-level) are recoverable; infrastructure errors (500-level) are critical
    - Constraint violations caused by request data are 409 WriteRejectedError,
      never the 503 DatabaseError reserved for infrastructure failures
    - to_response() produces the REST envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with JobTrailError base: FastAPI global handler catches all (ADR: uniform error shape)
    - HistoryWriteError is never caught inside the write path — it aborts the
      enclosing employee write (ADR: all-or-nothing audit trail)
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
    BUSINESS_RULE = "business_rule"
    RESOURCE_NOT_FOUND = "resource_not_found"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    employee_id: int | None = None
    job_id: str | None = None
    department_id: int | None = None
    operation: str | None = None
    debug_info: dict[str, Any] | None = None


class JobTrailError(Exception):
    """Base exception for all jobtrail errors."""

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
                    "employee_id": self.context.employee_id,
                    "job_id": self.context.job_id,
                    "department_id": self.context.department_id,
                    "operation": self.context.operation,
                },
            }
        }


# ─── Domain Errors (400-level) ──────────────────────────────────

class ResourceNotFoundError(JobTrailError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )
        self.resource_type = resource_type
        self.resource_id = resource_id


class EmployeeNotFoundError(ResourceNotFoundError):
    """No employee matches the given identifier."""
    def __init__(self, employee_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.employee_id = employee_id
        super().__init__("Employee", str(employee_id), ctx)
        self.employee_id = employee_id


class InvalidEmployeeIdError(JobTrailError):
    """Employee identifiers are positive integers."""
    def __init__(self, employee_id: int, context: ErrorContext | None = None):
        super().__init__(
            f"Employee id must be >= 1, got {employee_id}",
            "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.employee_id = employee_id


class SelfManagementError(JobTrailError):
    """An employee cannot be their own manager."""
    def __init__(self, employee_id: int, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.employee_id = employee_id
        super().__init__(
            f"Employee {employee_id} cannot be their own manager",
            "SELF_MANAGEMENT", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )


class SalaryBandError(JobTrailError):
    """Job salary band violates 0 <= min_salary <= max_salary."""
    def __init__(
        self, job_id: str, min_salary: float, max_salary: float,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.job_id = job_id
        super().__init__(
            f"Invalid salary band for job '{job_id}': {min_salary} .. {max_salary}",
            "INVALID_SALARY_BAND", ErrorCategory.BUSINESS_RULE,
            ErrorSeverity.ERROR, ctx, 400,
        )


class DuplicateJobError(JobTrailError):
    """Job code already exists."""
    def __init__(self, job_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.job_id = job_id
        super().__init__(
            f"Job '{job_id}' already exists",
            "DUPLICATE_JOB", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, ctx, 409,
        )


# ─── Write-path Errors ──────────────────────────────────────────

class WriteRejectedError(JobTrailError):
    """A write broke a table constraint (unique email, unknown job/department/location).

    Caused by the request data, so retrying the same request cannot succeed.
    """
    def __init__(
        self, resource_type: str, operation: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.operation = ctx.operation or operation
        super().__init__(
            f"{resource_type} {operation} rejected: a unique value is taken "
            f"or a referenced row does not exist",
            "WRITE_REJECTED", ErrorCategory.CONFLICT,
            ErrorSeverity.WARNING, ctx, 409,
        )
        self.resource_type = resource_type
        self.operation = operation


class HistoryWriteError(JobTrailError):
    """Job history entry could not be stored; the enclosing write is aborted."""
    def __init__(self, message: str, context: ErrorContext | None = None):
        super().__init__(
            f"Job history append failed: {message}",
            "HISTORY_WRITE_FAILED", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )


# ─── Infrastructure Errors (500-level) ──────────────────────────

class DatabaseError(JobTrailError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation


class UnsupportedDialectError(JobTrailError):
    """Configured database engine has no deferred-constraint support here."""
    def __init__(self, dialect: str, context: ErrorContext | None = None):
        super().__init__(
            f"Deferred constraints not supported for dialect '{dialect}'",
            "UNSUPPORTED_DIALECT", ErrorCategory.INTERNAL,
            ErrorSeverity.CRITICAL, context, 500,
        )
        self.dialect = dialect
