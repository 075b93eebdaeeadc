"""create job_roles and applicants

Revision ID: 3c1f0a9d2b41
Revises:
Create Date: 2026-10-19 09:12:44.201733

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3c1f0a9d2b41'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'job_roles',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('skills', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_job_roles_id', 'job_roles', ['id'])
    op.create_index('ix_job_roles_name', 'job_roles', ['name'])

    op.create_table(
        'applicants',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False),
        sa.Column('phone', sa.String(length=64), nullable=False),
        sa.Column('skills', sa.JSON(), nullable=False),
        sa.Column('resume', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_applicants_id', 'applicants', ['id'])
    op.create_index('ix_applicants_created_at_id', 'applicants', ['created_at', 'id'])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('ix_applicants_created_at_id', table_name='applicants')
    op.drop_index('ix_applicants_id', table_name='applicants')
    op.drop_table('applicants')
    op.drop_index('ix_job_roles_name', table_name='job_roles')
    op.drop_index('ix_job_roles_id', table_name='job_roles')
    op.drop_table('job_roles')
