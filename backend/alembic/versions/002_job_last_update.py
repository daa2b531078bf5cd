"""Add last_update timestamp to jobs.

Revision ID: 002_job_last_update
Revises: 001_initial
Create Date: 2026-10-17

Stamped by the job write path on every insert and update; existing rows
start with the migration time.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '002_job_last_update'
down_revision: Union[str, None] = '001_initial'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.add_column(
        'jobs',
        sa.Column(
            'last_update', sa.DateTime(timezone=True), nullable=True,
            server_default=sa.func.now(),
        ),
    )


def downgrade() -> None:
    op.drop_column('jobs', 'last_update')
