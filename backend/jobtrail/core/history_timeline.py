"""History Timeline — pure assembly of an employee's job-history records.

Invariants:
    - Output ordered by start_date ascending (earliest assignment first)
    - Job and department come from the history row; every other field is the employee's current value
    - Salary band (min/max) is the band of the historical job, None if the job row is missing

Design Decisions:
    - Sorting here as well as in SQL: the function is reusable for rows that
      did not come from an ordered query (ADR: ordering is part of the contract)
"""

from collections.abc import Iterable, Mapping

from jobtrail.core.domain_types import (
    DepartmentId, EmployeeId, HistoryRecord, JobId,
)
from jobtrail.core.repository_protocols import (
    EmployeeLike, JobHistoryLike, JobLike,
)


def build_history_record(
    employee: EmployeeLike, entry: JobHistoryLike, job: JobLike | None,
) -> HistoryRecord:
    return HistoryRecord(
        employee_id=EmployeeId(employee.id),
        start_date=entry.start_date,
        end_date=entry.end_date,
        first_name=employee.first_name,
        last_name=employee.last_name,
        email=employee.email,
        phone_number=employee.phone_number,
        hire_date=employee.hire_date,
        job_id=JobId(entry.job_id),
        min_salary=job.min_salary if job else None,
        max_salary=job.max_salary if job else None,
        salary=employee.salary,
        commission_pct=employee.commission_pct,
        manager_id=(
            EmployeeId(employee.manager_id)
            if employee.manager_id is not None else None
        ),
        department_id=DepartmentId(entry.department_id),
    )


def build_timeline(
    employee: EmployeeLike,
    entries: Iterable[JobHistoryLike],
    jobs: Mapping[str, JobLike],
) -> list[HistoryRecord]:
    """Merge history rows with the employee's current attributes, oldest first."""
    ordered = sorted(entries, key=lambda e: e.start_date)
    return [
        build_history_record(employee, entry, jobs.get(entry.job_id))
        for entry in ordered
    ]
