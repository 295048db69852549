"""create sharded workplaces, workers and shifts tables

Revision ID: 3f1c9a2b7d10
Revises:
Create Date: 2026-10-18 09:12:04.118220

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a2b7d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema - create record tables with a shard column each."""
    op.create_table(
        'workplaces',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('status', sa.Integer(), nullable=False),
        sa.Column('shard', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_workplaces_shard'), 'workplaces', ['shard'], unique=False)

    op.create_table(
        'workers',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.Column('status', sa.Integer(), nullable=False),
        sa.Column('shard', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_workers_shard'), 'workers', ['shard'], unique=False)

    op.create_table(
        'shifts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('start_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('end_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('cancelled_at', sa.DateTime(timezone=True), nullable=True),
        sa.Column('shard', sa.Integer(), nullable=False),
        sa.Column('workplace_id', sa.Integer(), nullable=False),
        sa.Column('worker_id', sa.Integer(), nullable=True),
        sa.ForeignKeyConstraint(['workplace_id'], ['workplaces.id']),
        sa.ForeignKeyConstraint(['worker_id'], ['workers.id']),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_shifts_shard'), 'shifts', ['shard'], unique=False)


def downgrade() -> None:
    """Downgrade schema - drop record tables."""
    op.drop_index(op.f('ix_shifts_shard'), table_name='shifts')
    op.drop_table('shifts')
    op.drop_index(op.f('ix_workers_shard'), table_name='workers')
    op.drop_table('workers')
    op.drop_index(op.f('ix_workplaces_shard'), table_name='workplaces')
    op.drop_table('workplaces')
