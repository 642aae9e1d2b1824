"""Add users, teams, staff links and training records

Revision ID: 001
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create teams, users, staff_team_links and training_records tables."""
    op.create_table('teams', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('users', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=255), nullable=True),
        sa.Column('role', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)
    op.create_index(op.f('ix_users_role'), 'users', ['role'], unique=False)
    op.create_index(op.f('ix_users_team_id'), 'users', ['team_id'], unique=False)

    op.create_table('staff_team_links', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('staff_user_id', sa.Integer(), nullable=False),
        sa.Column('team_id', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['staff_user_id'], ['users.id']),
        sa.ForeignKeyConstraint(['team_id'], ['teams.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('staff_user_id', 'team_id', name='uq_staff_team'))
    op.create_index(op.f('ix_staff_team_links_staff_user_id'), 'staff_team_links', ['staff_user_id'], unique=False)
    op.create_index(op.f('ix_staff_team_links_team_id'), 'staff_team_links', ['team_id'], unique=False)

    op.create_table('training_records', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('rpe', sa.Float(), nullable=True),
        sa.Column('duration_min', sa.Float(), nullable=True),
        sa.Column('load', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.ForeignKeyConstraint(['user_id'], ['users.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_training_records_user_id'), 'training_records', ['user_id'], unique=False)
    op.create_index(op.f('ix_training_records_date'), 'training_records', ['date'], unique=False)


def downgrade() -> None:
    """Drop all workload tables."""
    op.drop_index(op.f('ix_training_records_date'), table_name='training_records')
    op.drop_index(op.f('ix_training_records_user_id'), table_name='training_records')
    op.drop_table('training_records')
    op.drop_index(op.f('ix_staff_team_links_team_id'), table_name='staff_team_links')
    op.drop_index(op.f('ix_staff_team_links_staff_user_id'), table_name='staff_team_links')
    op.drop_table('staff_team_links')
    op.drop_index(op.f('ix_users_team_id'), table_name='users')
    op.drop_index(op.f('ix_users_role'), table_name='users')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_table('users')
    op.drop_table('teams')
