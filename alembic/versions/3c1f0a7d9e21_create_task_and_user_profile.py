"""create task and user_profile tables

Revision ID: 3c1f0a7d9e21
Revises:
Create Date: 2026-10-17 09:12:44.201553

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '3c1f0a7d9e21'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'user_profile',
        sa.Column('user_id', sa.String(length=128), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('age', sa.Integer(), nullable=True),
        sa.Column('height', sa.Integer(), nullable=True),
        sa.Column('weight', sa.Integer(), nullable=True),
        sa.Column('health_issues', sa.JSON(), nullable=True),
        sa.Column('mental_health', sa.JSON(), nullable=True),
        sa.Column('xp', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('level', sa.Integer(), nullable=False, server_default='1'),
        sa.Column('tasks_completed', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('streak', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('onboarding_completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_table(
        'task',
        sa.Column('task_id', sa.String(length=36), primary_key=True),
        sa.Column('user_id', sa.String(length=128), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('scheduled_time', sa.DateTime(), nullable=False),
        sa.Column('duration', sa.Integer(), nullable=True),
        sa.Column('completed', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('notification_sent', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('xp_credited', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('xp_reward', sa.Integer(), nullable=False, server_default='50'),
        sa.Column('category', sa.String(length=50), nullable=True),
        sa.Column('auto_generated', sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column('created_at', sa.DateTime(), nullable=True),
        sa.Column('updated_at', sa.DateTime(), nullable=True),
    )
    op.create_index('ix_task_user_scheduled', 'task', ['user_id', 'scheduled_time'])


def downgrade():
    op.drop_index('ix_task_user_scheduled', table_name='task')
    op.drop_table('task')
    op.drop_table('user_profile')
