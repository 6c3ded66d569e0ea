"""create goals and weekly_progress tables

Revision ID: 5e2d9a41c7b0
Revises:
Create Date: 2026-10-18 00:10:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5e2d9a41c7b0'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'goals',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('type', sa.String(20), nullable=False),
        sa.Column('target', sa.Float(), nullable=True),
        sa.Column('unit', sa.String(), nullable=True),
        sa.Column('icon', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.PrimaryKeyConstraint('id')
    )

    op.create_table(
        'weekly_progress',
        sa.Column('id', sa.String(36), nullable=False),
        sa.Column('goal_id', sa.String(36), nullable=False),
        sa.Column('week_start', sa.DateTime(), nullable=False),
        sa.Column('week_end', sa.DateTime(), nullable=False),
        sa.Column('value', sa.Float(), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.text('CURRENT_TIMESTAMP'), nullable=False),
        sa.ForeignKeyConstraint(['goal_id'], ['goals.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('goal_id', 'week_start', name='uq_weekly_progress_goal_week')
    )
    op.create_index('ix_weekly_progress_goal_id', 'weekly_progress', ['goal_id'])


def downgrade() -> None:
    op.drop_index('ix_weekly_progress_goal_id', table_name='weekly_progress')
    op.drop_table('weekly_progress')
    op.drop_table('goals')
