"""ORM Models — SQLAlchemy declarative models for the HR schema.

Invariants:
    - All models inherit from Base (db/base.py)
    - Employee is the audited entity; JobHistory is its append-only trail

Design Decisions:
    - One file per entity for locality
    - All models imported here so Base.metadata knows every table (and the
      use_alter department/employee cycle) before create_all or alembic runs
"""

from jobtrail.models.region import Region  # noqa: F401
from jobtrail.models.country import Country  # noqa: F401
from jobtrail.models.location import Location  # noqa: F401
from jobtrail.models.job import Job  # noqa: F401
from jobtrail.models.department import Department  # noqa: F401
from jobtrail.models.employee import Employee  # noqa: F401
from jobtrail.models.job_history import JobHistory  # noqa: F401
