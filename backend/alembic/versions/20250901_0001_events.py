"""events table

Revision ID: 20250901_0001
Revises: 
Create Date: 2025-09-01
"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = '20250901_0001'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table('events',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('title', sa.String(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('date', sa.String(length=10), nullable=False, index=True),
        sa.Column('time', sa.String(length=5), nullable=False),
        sa.Column('category', sa.String(), nullable=False, server_default='personal', index=True),
        sa.Column('recurrence', sa.String(), nullable=False, server_default='none', index=True),
        sa.Column('recurrence_config', sa.Text(), nullable=True),
        sa.Column('original_event_id', sa.Integer(), nullable=True)
    )


def downgrade():
    op.drop_table('events')
