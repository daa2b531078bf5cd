"""Error Handlers — map jobtrail failures onto the REST error envelope.

Invariants:
    - Every error body is {"error": {"code", "message", "category", "severity", ...}}
    - JobTrailError → its own http_status and to_response() envelope
    - IntegrityError that escaped a service → 409 WRITE_REJECTED, never 503
    - Malformed ids or bodies → 400 VALIDATION_ERROR, one detail per offending field
    - Anything else → 500 without internal details

Design Decisions:
    - Client-caused failures (4xx) log at WARNING, server-side (5xx) at ERROR,
      with the employee/job/department context as structured extras
    - Handlers are module-level coroutines so tests can await them directly
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError

from jobtrail.core.errors import (
    ErrorCategory, ErrorSeverity, JobTrailError, WriteRejectedError,
)

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(JobTrailError, handle_jobtrail_error)
    app.add_exception_handler(IntegrityError, handle_integrity_error)
    app.add_exception_handler(RequestValidationError, handle_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


async def handle_jobtrail_error(request: Request, exc: JobTrailError) -> JSONResponse:
    level = logging.ERROR if exc.http_status >= 500 else logging.WARNING
    ctx = exc.context
    logger.log(
        level,
        f"{exc.code}: {exc.message}",
        extra={
            "error_code": exc.code,
            "path": request.url.path,
            "employee_id": ctx.employee_id,
            "job_id": ctx.job_id,
            "department_id": ctx.department_id,
            "operation": ctx.operation,
        },
    )
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_integrity_error(request: Request, exc: IntegrityError) -> JSONResponse:
    """Constraint violation no service translated; still the caller's data."""
    return await handle_jobtrail_error(
        request, WriteRejectedError("Record", request.method.lower()),
    )


async def handle_validation_error(
    request: Request, exc: RequestValidationError,
) -> JSONResponse:
    details = [_field_detail(e) for e in exc.errors()]
    logger.warning(
        f"Rejected {request.method} {request.url.path}: "
        f"{', '.join(d['field'] for d in details)}",
        extra={"error_code": "VALIDATION_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "error": {
                "code": "VALIDATION_ERROR",
                "message": "Invalid request data",
                "category": ErrorCategory.VALIDATION.value,
                "severity": ErrorSeverity.ERROR.value,
                "details": details,
            },
        },
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        f"Unhandled exception on {request.method} {request.url.path}: {exc}",
        exc_info=exc,
        extra={"error_code": "INTERNAL_ERROR", "path": request.url.path},
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "error": {
                "code": "INTERNAL_ERROR",
                "message": "An unexpected error occurred",
                "category": ErrorCategory.INTERNAL.value,
                "severity": ErrorSeverity.CRITICAL.value,
            },
        },
    )


def _field_detail(error: dict) -> dict:
    """Split pydantic's loc into where the value came from and which field."""
    location, *path = error["loc"] or ("request",)
    return {
        "location": str(location),
        "field": ".".join(str(part) for part in path) or str(location),
        "message": error["msg"],
        "type": error["type"],
    }
