"""Audit Trail Decision — tests for the pure history-append decision.

Tests cover:
    - insert always yields exactly one open entry with the new assignment
    - update with unchanged job yields nothing
    - update with a changed job yields one entry with the post-write assignment
    - department-only moves do not yield an entry
"""

from datetime import date

from jobtrail.core.audit_trail import job_changed, plan_history_entry
from jobtrail.core.domain_types import (
    DepartmentId, EmployeeId, EmployeeSnapshot, JobId, WriteOperation,
)

TODAY = date(2024, 3, 1)


def _snap(job: str, department: int, employee_id: int = 7) -> EmployeeSnapshot:
    return EmployeeSnapshot(
        employee_id=EmployeeId(employee_id),
        job_id=JobId(job),
        department_id=DepartmentId(department),
    )


# ─── insert ──────────────────────────────────────────────────────

def test_insert_always_yields_entry():
    draft = plan_history_entry(_snap("DEV", 3), None, TODAY)
    assert draft is not None
    assert draft.operation == WriteOperation.INSERT
    assert draft.employee_id == 7
    assert draft.job_id == "DEV"
    assert draft.department_id == 3


def test_insert_entry_is_open_and_starts_today():
    draft = plan_history_entry(_snap("DEV", 3), None, TODAY)
    assert draft.start_date == TODAY
    assert draft.end_date is None


# ─── update ──────────────────────────────────────────────────────

def test_update_with_same_job_yields_nothing():
    assert plan_history_entry(_snap("DEV", 3), _snap("DEV", 3), TODAY) is None


def test_update_with_changed_job_yields_post_write_assignment():
    draft = plan_history_entry(_snap("QCENGR", 5), _snap("DEV", 3), TODAY)
    assert draft is not None
    assert draft.operation == WriteOperation.UPDATE
    assert draft.job_id == "QCENGR"
    assert draft.department_id == 5
    assert draft.end_date is None


def test_department_only_move_yields_nothing():
    assert plan_history_entry(_snap("DEV", 9), _snap("DEV", 3), TODAY) is None


def test_job_changed_compares_job_id_only():
    assert job_changed(_snap("A", 1), _snap("B", 1))
    assert not job_changed(_snap("A", 1), _snap("A", 2))
