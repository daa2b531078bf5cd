"""Audit Trail Decision — pure logic deciding whether an employee write appends history.

Invariants:
    - Insert (no before image) always yields exactly one draft
    - Update yields a draft only when the job id changed; department-only moves do not
    - Draft always carries the post-write job and department, start_date = today, end_date = None
    - Never inspects or rewrites existing history rows

Design Decisions:
    - Pure function with injected `today`: the shell owns the clock, tests pin it
    - Job id is the only compared column (ADR: salary, manager and department
      edits are not job changes and leave the timeline untouched)
"""

from datetime import date

from jobtrail.core.domain_types import (
    EmployeeSnapshot, HistoryEntryDraft, WriteOperation,
)


def job_changed(after: EmployeeSnapshot, before: EmployeeSnapshot) -> bool:
    return after.job_id != before.job_id


def plan_history_entry(
    after: EmployeeSnapshot,
    before: EmployeeSnapshot | None,
    today: date,
) -> HistoryEntryDraft | None:
    """Return the history row to append for this write, or None to skip."""
    if before is None:
        operation = WriteOperation.INSERT
    elif job_changed(after, before):
        operation = WriteOperation.UPDATE
    else:
        return None

    return HistoryEntryDraft(
        employee_id=after.employee_id,
        start_date=today,
        job_id=after.job_id,
        department_id=after.department_id,
        operation=operation,
    )
