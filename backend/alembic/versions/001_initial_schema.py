"""Initial schema — regions, countries, locations, jobs, departments, employees, job_history.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-17

departments.manager_id and employees.department_id reference each other and
are both NOT NULL. The two foreign keys are added after both tables exist and
are DEFERRABLE so a department and its manager can be inserted in one
transaction with constraints deferred.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "regions",
        sa.Column("region_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("region_name", sa.String(25), nullable=True),
    )

    op.create_table(
        "countries",
        sa.Column("country_id", sa.CHAR(2), primary_key=True),
        sa.Column("country_name", sa.String(40), nullable=True),
        sa.Column("region_id", sa.Integer, sa.ForeignKey("regions.region_id"), nullable=False),
    )

    op.create_table(
        "locations",
        sa.Column("location_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("street_address", sa.String(25), nullable=True),
        sa.Column("postal_code", sa.String(12), nullable=True),
        sa.Column("city", sa.String(30), nullable=True),
        sa.Column("state_province", sa.String(12), nullable=True),
        sa.Column("country_id", sa.CHAR(2), sa.ForeignKey("countries.country_id"), nullable=False),
    )

    op.create_table(
        "jobs",
        sa.Column("job_id", sa.String(10), primary_key=True),
        sa.Column("job_title", sa.String(35), nullable=True),
        sa.Column("min_salary", sa.Numeric(12, 2), nullable=True, server_default="0"),
        sa.Column("max_salary", sa.Numeric(12, 2), nullable=True, server_default="1000000"),
        sa.CheckConstraint("min_salary >= 0 AND max_salary >= 0", name="ck_jobs_salary_non_negative"),
        sa.CheckConstraint("min_salary <= max_salary", name="ck_jobs_salary_band"),
    )

    op.create_table(
        "departments",
        sa.Column("department_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("department_name", sa.String(30), nullable=True),
        sa.Column("manager_id", sa.Integer, nullable=False, unique=True),
        sa.Column("location_id", sa.Integer, sa.ForeignKey("locations.location_id"), nullable=False),
    )

    op.create_table(
        "employees",
        sa.Column("employee_id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("first_name", sa.String(20), nullable=False),
        sa.Column("last_name", sa.String(25), nullable=False),
        sa.Column("email", sa.String(25), nullable=False, unique=True),
        sa.Column("phone_number", sa.String(20), nullable=True),
        sa.Column("hire_date", sa.Date, nullable=True),
        sa.Column("job_id", sa.String(10), sa.ForeignKey("jobs.job_id"), nullable=False),
        sa.Column("salary", sa.Numeric(12, 2), nullable=True),
        sa.Column("commission_pct", sa.Integer, nullable=True),
        sa.Column(
            "manager_id", sa.Integer,
            sa.ForeignKey("employees.employee_id", ondelete="SET NULL"),
            nullable=True,
        ),
        sa.Column("department_id", sa.Integer, nullable=False),
        sa.CheckConstraint("manager_id <> employee_id", name="ck_employees_not_own_manager"),
    )

    op.create_foreign_key(
        "fk_departments_manager_id", "departments", "employees",
        ["manager_id"], ["employee_id"],
        deferrable=True, initially="IMMEDIATE",
    )
    op.create_foreign_key(
        "fk_employees_department_id", "employees", "departments",
        ["department_id"], ["department_id"],
        deferrable=True, initially="IMMEDIATE",
    )

    op.create_table(
        "job_history",
        sa.Column("employee_id", sa.Integer, sa.ForeignKey("employees.employee_id"), primary_key=True),
        sa.Column("start_date", sa.Date, primary_key=True),
        sa.Column("end_date", sa.Date, nullable=True),
        sa.Column("job_id", sa.String(10), sa.ForeignKey("jobs.job_id"), nullable=False),
        sa.Column("department_id", sa.Integer, sa.ForeignKey("departments.department_id"), nullable=False),
    )


def downgrade() -> None:
    op.drop_table("job_history")
    op.drop_constraint("fk_employees_department_id", "employees", type_="foreignkey")
    op.drop_constraint("fk_departments_manager_id", "departments", type_="foreignkey")
    op.drop_table("employees")
    op.drop_table("departments")
    op.drop_table("jobs")
    op.drop_table("locations")
    op.drop_table("countries")
    op.drop_table("regions")
