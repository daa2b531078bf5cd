"""Sample Data — a consistent slice of the BigCompany sample dataset.

Invariants:
    - Loaded in one transaction with constraints deferred (department/employee cycle)
    - Employees are inserted without managers first, managers patched in a second pass
      (employees.manager_id is not deferrable)
    - Job history rows are backfilled directly; the audit recorder is not involved
    - Idempotent: nothing happens if the jobs table already has rows

Design Decisions:
    - Explicit primary keys: departments and history rows reference employees by id.
      On PostgreSQL the serial sequences are moved past the seeded ids afterwards
"""

import asyncio
import logging
from datetime import date
from decimal import Decimal

from sqlalchemy import func, insert, select, text, update
from sqlalchemy.ext.asyncio import AsyncSession

from jobtrail.models.country import Country
from jobtrail.models.department import Department
from jobtrail.models.employee import Employee
from jobtrail.models.job import Job
from jobtrail.models.job_history import JobHistory
from jobtrail.models.location import Location
from jobtrail.models.region import Region
from jobtrail.services.audit_recorder import Clock, utc_now
from jobtrail.services.constraints import defer_constraints

logger = logging.getLogger(__name__)

REGIONS = [
    {"id": 1, "name": "North America"},
    {"id": 2, "name": "Europe"},
    {"id": 3, "name": "Asia"},
]

COUNTRIES = [
    {"id": "CA", "name": "Canada", "region_id": 1},
    {"id": "US", "name": "United States", "region_id": 1},
    {"id": "GB", "name": "United Kingdom", "region_id": 2},
    {"id": "DE", "name": "Germany", "region_id": 2},
    {"id": "JP", "name": "Japan", "region_id": 3},
]

LOCATIONS = [
    {"id": 1, "street_address": "0032 Del Mar Place", "postal_code": "32868",
     "city": "Orlando", "state_province": "FL", "country_id": "US"},
    {"id": 2, "street_address": "819 Dorton Junction", "postal_code": "999-8241",
     "city": "Fukuyama", "state_province": None, "country_id": "JP"},
    {"id": 3, "street_address": "0 Macpherson Drive", "postal_code": "77095",
     "city": "Houston", "state_province": "TX", "country_id": "US"},
    {"id": 4, "street_address": "12923 Westport Pass", "postal_code": "CT15",
     "city": "Sutton", "state_province": "ENG", "country_id": "GB"},
]

# (job_id, title, min, max)
JOBS = [
    ("MEDIAPLAN", "Media Planner", 52469, 53876),
    ("RSRCHASST", "Research Assistant", 43922, 55270),
    ("VPQC", "VP Quality Control", 10269, 86609),
    ("FINADVISR", "Financial Advisor", 26059, 48042),
    ("LEGASST", "Legal Assistant", 26238, 76695),
    ("PARALEGAL", "Paralegal", 40137, 92303),
    ("QCENGR", "Quality Engineer", 41556, 50123),
    ("GENMGR", "General Manager", 49653, 63009),
    ("SOFTENGR", "Software Engineer", 57253, 60092),
]

DEPARTMENTS = [
    {"id": 1, "name": "Services", "manager_id": 1, "location_id": 1},
    {"id": 2, "name": "Marketing", "manager_id": 2, "location_id": 2},
    {"id": 3, "name": "Support", "manager_id": 3, "location_id": 3},
    {"id": 4, "name": "Legal", "manager_id": 4, "location_id": 4},
]

# (id, first, last, email, phone, hire_date, job, salary, commission, manager, department)
EMPLOYEES = [
    (1, "Lina", "O'Malley", "lomalley0@ed.gov", "5396866263",
     date(2008, 5, 26), "MEDIAPLAN", 69204, 23, 2, 1),
    (2, "Dianne", "Gaye", "dgaye1@rediff.com", "6642969370",
     date(2014, 4, 3), "RSRCHASST", 85552, 22, None, 2),
    (3, "Curtice", "Dunnaway", "cdunnaway2@dion.ne.jp", "2474117763",
     date(1992, 4, 9), "MEDIAPLAN", 62690, 23, 2, 3),
    (4, "Maxi", "Hove", "mhove3@umn.edu", "1622421048",
     date(1951, 11, 18), "VPQC", 67480, 27, 3, 4),
    (5, "Lynea", "Redmire", "lredmire4@globo.com", "4433159630",
     date(2022, 2, 9), "FINADVISR", 92511, 13, 4, 1),
    (6, "Paxon", "Tiernan", "ptiernan5@sitemeter.com", "1029634540",
     date(1988, 5, 25), "MEDIAPLAN", 55990, 20, 1, 2),
    (7, "Darius", "Cowling", "dcowling6@altervista.org", "5311040758",
     date(1975, 1, 31), "PARALEGAL", 79712, 17, 3, 3),
    (8, "Corry", "Preist", "cpreist7@goo.ne.jp", "9042150900",
     date(1956, 11, 8), "LEGASST", 42786, 19, 4, 4),
]

# (employee, start, end, job, department)
JOB_HISTORY = [
    (1, date(2008, 5, 26), None, "MEDIAPLAN", 1),
    (2, date(2014, 4, 3), None, "RSRCHASST", 2),
    (3, date(1992, 4, 9), None, "MEDIAPLAN", 3),
    (4, date(1951, 11, 18), date(1998, 2, 10), "VPQC", 4),
    (5, date(2022, 2, 9), None, "FINADVISR", 1),
    (6, date(1988, 5, 25), None, "MEDIAPLAN", 2),
    (7, date(1975, 1, 31), None, "PARALEGAL", 3),
    (8, date(1956, 11, 8), date(2013, 12, 8), "LEGASST", 4),
]

# (table, pk column) for serial sequences
_SERIAL_COLUMNS = [
    ("regions", "region_id"),
    ("locations", "location_id"),
    ("departments", "department_id"),
    ("employees", "employee_id"),
]


async def seed_sample_data(db: AsyncSession, clock: Clock = utc_now) -> bool:
    """Load the sample dataset. Returns False if data was already present."""
    existing = await db.scalar(select(func.count()).select_from(Job))
    if existing:
        logger.info(f"Sample data skipped: {existing} job(s) already present")
        return False

    await defer_constraints(db)
    stamped = clock()

    await db.execute(insert(Region), REGIONS)
    await db.execute(insert(Country), COUNTRIES)
    await db.execute(insert(Location), LOCATIONS)
    await db.execute(insert(Job), [
        {"id": job_id, "title": title, "min_salary": Decimal(low),
         "max_salary": Decimal(high), "last_update": stamped}
        for job_id, title, low, high in JOBS
    ])
    await db.execute(insert(Department), DEPARTMENTS)
    await db.execute(insert(Employee), [
        {"id": emp_id, "first_name": first, "last_name": last, "email": email,
         "phone_number": phone, "hire_date": hired, "job_id": job_id,
         "salary": Decimal(salary), "commission_pct": commission,
         "manager_id": None, "department_id": dept}
        for (emp_id, first, last, email, phone, hired, job_id, salary,
             commission, _, dept) in EMPLOYEES
    ])
    await db.execute(update(Employee), [
        {"id": row[0], "manager_id": row[9]}
        for row in EMPLOYEES if row[9] is not None
    ])
    await db.execute(insert(JobHistory), [
        {"employee_id": emp_id, "start_date": start, "end_date": end,
         "job_id": job_id, "department_id": dept}
        for emp_id, start, end, job_id, dept in JOB_HISTORY
    ])
    await _sync_sequences(db)
    await db.commit()
    logger.info(
        f"Sample data loaded: {len(EMPLOYEES)} employees, "
        f"{len(JOB_HISTORY)} history rows",
    )
    return True


async def _sync_sequences(db: AsyncSession) -> None:
    if db.get_bind().dialect.name != "postgresql":
        return
    for table, column in _SERIAL_COLUMNS:
        await db.execute(text(
            f"SELECT setval(pg_get_serial_sequence('{table}', '{column}'), "
            f"(SELECT MAX({column}) FROM {table}))"
        ))


async def main() -> None:
    from jobtrail.config import get_settings
    from jobtrail.db.session import create_session_factory
    from jobtrail.infrastructure.observability import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    factory = create_session_factory(settings.database_url)
    async with factory() as db:
        await seed_sample_data(db)


if __name__ == "__main__":
    asyncio.run(main())
