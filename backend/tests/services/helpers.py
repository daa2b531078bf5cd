"""Shared query helpers for service tests."""

from datetime import date

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from jobtrail.models.employee import Employee
from jobtrail.models.job_history import JobHistory

NEW_HIRE = {
    "first_name": "Britney",
    "last_name": "Berney",
    "email": "bberneyi@upenn.edu",
    "phone_number": "2272813554",
    "hire_date": date(2008, 7, 14),
    "job_id": "MEDIAPLAN",
    "salary": 72690,
    "commission_pct": 30,
    "manager_id": 2,
    "department_id": 1,
}


async def history_rows(db: AsyncSession, employee_id: int) -> list[tuple]:
    """(start, end, job, department) tuples straight from the table, oldest first."""
    result = await db.execute(
        select(
            JobHistory.start_date, JobHistory.end_date,
            JobHistory.job_id, JobHistory.department_id,
        )
        .where(JobHistory.employee_id == employee_id)
        .order_by(JobHistory.start_date),
    )
    return [tuple(row) for row in result.all()]


async def history_count(db: AsyncSession, employee_id: int) -> int:
    return await db.scalar(
        select(func.count())
        .select_from(JobHistory)
        .where(JobHistory.employee_id == employee_id),
    )


async def current_job(db: AsyncSession, employee_id: int) -> str:
    return await db.scalar(
        select(Employee.job_id).where(Employee.id == employee_id),
    )
