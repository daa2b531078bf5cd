"""Employee Service — write path validation and transaction boundaries.

Invariants:
    - Unknown employee id → EmployeeNotFoundError, nothing written
    - manager_id == own id → SelfManagementError before flush
    - Integrity failure on the employee row → 409 WriteRejectedError, rolled back
"""

import pytest
from sqlalchemy import select

from jobtrail.core.errors import (
    EmployeeNotFoundError, SelfManagementError, WriteRejectedError,
)
from jobtrail.models.employee import Employee
from jobtrail.services.employee_service import EmployeeService
from tests.services.helpers import NEW_HIRE, history_count


async def test_create_returns_persisted_employee(seeded, recorder):
    employee = await EmployeeService(seeded, recorder).create_employee(NEW_HIRE)
    assert employee.id == 9
    assert employee.email == "bberneyi@upenn.edu"


async def test_update_unknown_employee_raises(seeded, recorder):
    with pytest.raises(EmployeeNotFoundError):
        await EmployeeService(seeded, recorder).update_employee(
            999999, {"job_id": "GENMGR"},
        )


async def test_self_management_rejected(seeded, recorder):
    with pytest.raises(SelfManagementError):
        await EmployeeService(seeded, recorder).update_employee(
            5, {"manager_id": 5},
        )


async def test_manager_can_be_cleared(seeded, recorder):
    employee = await EmployeeService(seeded, recorder).update_employee(
        5, {"manager_id": None},
    )
    assert employee.manager_id is None


async def test_unknown_department_rolls_back_insert(seeded, recorder):
    data = {**NEW_HIRE, "department_id": 999}

    with pytest.raises(WriteRejectedError):
        await EmployeeService(seeded, recorder).create_employee(data)

    result = await seeded.execute(
        select(Employee).where(Employee.email == NEW_HIRE["email"]),
    )
    assert result.scalar_one_or_none() is None


async def test_duplicate_email_rejected_without_history(seeded, recorder):
    data = {**NEW_HIRE, "email": "lomalley0@ed.gov"}

    with pytest.raises(WriteRejectedError) as info:
        await EmployeeService(seeded, recorder).create_employee(data)

    assert info.value.http_status == 409
    assert info.value.context.operation == "insert"
    assert await history_count(seeded, 9) == 0


async def test_id_in_changes_is_ignored(seeded, recorder):
    employee = await EmployeeService(seeded, recorder).update_employee(
        6, {"id": 600, "last_name": "Tiernan-Smith"},
    )
    assert employee.id == 6
    assert employee.last_name == "Tiernan-Smith"


async def test_unknown_job_on_update_rejected_without_history(seeded, recorder):
    with pytest.raises(WriteRejectedError) as info:
        await EmployeeService(seeded, recorder).update_employee(
            1, {"job_id": "NOPE"},
        )

    assert info.value.http_status == 409
    assert info.value.context.employee_id == 1
    assert info.value.context.operation == "update"
    assert await history_count(seeded, 1) == 1
