"""Department Service — two-phase onboarding across the department/employee FK cycle.

Invariants:
    - Department and manager both persisted, each referencing the other
    - Manager's first history row names the new department
    - Unknown location fails at commit and leaves neither row behind
"""

from datetime import date

import pytest
from sqlalchemy import func, select

from jobtrail.core.errors import WriteRejectedError
from jobtrail.models.department import Department
from jobtrail.models.employee import Employee
from jobtrail.services.department_service import DepartmentService
from tests.services.helpers import history_rows

MANAGER = {
    "first_name": "Dill",
    "last_name": "Fawloe",
    "email": "dfawloej@github.com",
    "phone_number": "3829788672",
    "hire_date": date(1993, 5, 25),
    "job_id": "GENMGR",
    "salary": 73467,
    "commission_pct": 24,
}


async def test_onboard_links_department_and_manager(seeded, recorder):
    department, manager = await DepartmentService(seeded, recorder).onboard_department(
        "Research and Development", 3, MANAGER,
    )

    assert department.manager_id == manager.id
    assert manager.department_id == department.id
    stored = await seeded.scalar(
        select(Employee.department_id).where(Employee.id == manager.id),
    )
    assert stored == department.id


async def test_onboard_records_manager_history(seeded, recorder):
    department, manager = await DepartmentService(seeded, recorder).onboard_department(
        "Training", 2, MANAGER,
    )

    rows = await history_rows(seeded, manager.id)
    assert rows == [(date(2024, 3, 1), None, "GENMGR", department.id)]


async def test_unknown_location_rolls_back_both_rows(seeded, recorder):
    with pytest.raises(WriteRejectedError):
        await DepartmentService(seeded, recorder).onboard_department(
            "Nowhere", 999, MANAGER,
        )

    result = await seeded.execute(
        select(Employee).where(Employee.email == MANAGER["email"]),
    )
    assert result.scalar_one_or_none() is None
    assert await seeded.scalar(
        select(func.count()).select_from(Department).where(Department.name == "Nowhere"),
    ) == 0
