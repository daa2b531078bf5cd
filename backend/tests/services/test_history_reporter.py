"""History Reporter — ordered timeline reads.

Invariants:
    - Unknown employee id raises EmployeeNotFoundError (checked before rows are read)
    - Existing employee without rows yields [] (distinct from not found)
    - Rows ordered by start_date ascending
    - Repeated reads without writes are identical
"""

from datetime import date
from decimal import Decimal

import pytest
from sqlalchemy import delete

from jobtrail.core.errors import EmployeeNotFoundError, InvalidEmployeeIdError
from jobtrail.models.job_history import JobHistory
from jobtrail.services.employee_service import EmployeeService
from jobtrail.services.history_reporter import HistoryReporter


async def test_unknown_employee_raises_not_found(seeded):
    with pytest.raises(EmployeeNotFoundError) as exc_info:
        await HistoryReporter(seeded).get_history(999999)
    assert exc_info.value.employee_id == 999999


async def test_non_positive_id_rejected(seeded):
    with pytest.raises(InvalidEmployeeIdError):
        await HistoryReporter(seeded).get_history(0)


async def test_employee_without_history_yields_empty_list(seeded):
    await seeded.execute(delete(JobHistory).where(JobHistory.employee_id == 2))
    await seeded.commit()

    assert await HistoryReporter(seeded).get_history(2) == []


async def test_single_row_carries_employee_and_job_band(seeded):
    (record,) = await HistoryReporter(seeded).get_history(1)

    assert record.employee_id == 1
    assert record.start_date == date(2008, 5, 26)
    assert record.end_date is None
    assert record.first_name == "Lina"
    assert record.last_name == "O'Malley"
    assert record.email == "lomalley0@ed.gov"
    assert record.hire_date == date(2008, 5, 26)
    assert record.job_id == "MEDIAPLAN"
    assert record.min_salary == Decimal("52469")
    assert record.max_salary == Decimal("53876")
    assert record.commission_pct == 23
    assert record.manager_id == 2
    assert record.department_id == 1


async def test_rows_ordered_earliest_first(seeded, recorder, clock):
    clock.set_date(2020, 2, 4)
    await EmployeeService(seeded, recorder).update_employee(
        1, {"job_id": "GENMGR", "department_id": 4},
    )

    records = await HistoryReporter(seeded).get_history(1)

    assert [r.start_date for r in records] == [date(2008, 5, 26), date(2020, 2, 4)]
    assert [r.job_id for r in records] == ["MEDIAPLAN", "GENMGR"]
    assert [r.department_id for r in records] == [1, 4]


async def test_historical_job_keeps_its_own_band(seeded, recorder, clock):
    clock.set_date(2020, 2, 4)
    await EmployeeService(seeded, recorder).update_employee(1, {"job_id": "GENMGR"})

    first, second = await HistoryReporter(seeded).get_history(1)

    assert first.max_salary == Decimal("53876")
    assert second.max_salary == Decimal("63009")


async def test_employee_four_timeline(seeded, recorder, clock):
    clock.set_date(1998, 2, 10)
    await EmployeeService(seeded, recorder).update_employee(4, {"job_id": "QCENGR"})

    first, second = await HistoryReporter(seeded).get_history(4)

    assert (first.start_date, first.end_date, first.job_id) == (
        date(1951, 11, 18), date(1998, 2, 10), "VPQC",
    )
    assert (second.start_date, second.end_date, second.job_id) == (
        date(1998, 2, 10), None, "QCENGR",
    )


async def test_repeated_reads_are_identical(seeded):
    reporter = HistoryReporter(seeded)
    assert await reporter.get_history(4) == await reporter.get_history(4)
