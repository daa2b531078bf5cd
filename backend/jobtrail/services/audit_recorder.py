"""Audit Recorder — appends job history rows on employee inserts and job changes.

Invariants:
    - Called by the employee write path after the employee row is flushed and
      before the transaction commits (same transaction as the write)
    - Appends exactly 0 or 1 rows per write; never updates existing rows
      unless close_prior_on_change is enabled
    - Performs no validation that could reject the write; storage failures are
      raised as HistoryWriteError and abort the enclosing write

Design Decisions:
    - Explicit hook instead of a database trigger: the decision lives in
      core/audit_trail.py, this class only persists it
    - Core insert() rather than session.add(): see models/job_history.py
    - clock injected: tests pin the date, production uses UTC now
"""

import logging
from collections.abc import Callable
from datetime import date, datetime, timezone

from sqlalchemy import insert, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from jobtrail.core.audit_trail import plan_history_entry
from jobtrail.core.domain_types import (
    EmployeeSnapshot, HistoryEntryDraft, WriteOperation,
)
from jobtrail.core.errors import ErrorContext, HistoryWriteError
from jobtrail.models.job_history import JobHistory

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _as_snapshot(employee) -> EmployeeSnapshot | None:
    if employee is None or isinstance(employee, EmployeeSnapshot):
        return employee
    return EmployeeSnapshot.of(employee)


class AuditRecorder:
    """Persists the job history entry planned for an employee write."""

    def __init__(
        self,
        db: AsyncSession,
        clock: Clock = utc_now,
        close_prior_on_change: bool = False,
    ):
        self.db = db
        self._clock = clock
        self._close_prior_on_change = close_prior_on_change

    def today(self) -> date:
        return self._clock().date()

    async def record_if_changed(
        self, after, before=None,
    ) -> HistoryEntryDraft | None:
        """Append a history row for this write if one is due.

        `after` / `before` are Employee rows or EmployeeSnapshots; `before` is
        None for inserts. Returns the appended entry, or None when skipped.
        """
        after_snap = _as_snapshot(after)
        before_snap = _as_snapshot(before)
        today = self.today()

        draft = plan_history_entry(after_snap, before_snap, today)
        if draft is None:
            logger.debug(
                "Job unchanged, no history appended",
                extra={"employee_id": after_snap.employee_id},
            )
            return None

        try:
            if (
                self._close_prior_on_change
                and draft.operation == WriteOperation.UPDATE
            ):
                await self._close_open_entries(draft.employee_id, today)
            await self.db.execute(
                insert(JobHistory).values(
                    employee_id=draft.employee_id,
                    start_date=draft.start_date,
                    end_date=draft.end_date,
                    job_id=draft.job_id,
                    department_id=draft.department_id,
                ),
            )
        except IntegrityError as e:
            logger.error(
                f"History append rejected: {e.orig}",
                extra={
                    "employee_id": draft.employee_id,
                    "job_id": draft.job_id,
                    "operation": draft.operation.value,
                    "error_code": "HISTORY_WRITE_FAILED",
                },
            )
            raise HistoryWriteError(
                f"employee {draft.employee_id} on {draft.start_date.isoformat()}",
                ErrorContext(
                    employee_id=draft.employee_id,
                    job_id=draft.job_id,
                    department_id=draft.department_id,
                    operation=draft.operation.value,
                ),
            ) from e

        logger.info(
            f"Job history appended ({draft.operation.value})",
            extra={
                "employee_id": draft.employee_id,
                "job_id": draft.job_id,
                "department_id": draft.department_id,
                "operation": draft.operation.value,
            },
        )
        return draft

    async def _close_open_entries(self, employee_id: int, today: date) -> None:
        await self.db.execute(
            update(JobHistory)
            .where(JobHistory.employee_id == employee_id)
            .where(JobHistory.end_date.is_(None))
            .values(end_date=today)
            .execution_options(synchronize_session="fetch"),
        )
