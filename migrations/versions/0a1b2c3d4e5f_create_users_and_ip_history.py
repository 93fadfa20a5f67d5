"""create users and ip_history

Revision ID: 0a1b2c3d4e5f
Revises:
Create Date: 2026-02-02 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '0a1b2c3d4e5f'
down_revision = None
branch_labels = None
depends_on = None


def _has_table(name):
    return sa.inspect(op.get_bind()).has_table(name)


def upgrade():
    # deployments bootstrapped with `flask init-db` already have both tables
    if not _has_table('users'):
        op.create_table(
            'users',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('email', sa.Text(), nullable=False),
            sa.Column('password', sa.Text(), nullable=False),
            sa.PrimaryKeyConstraint('id'),
            sa.UniqueConstraint('email')
        )

    if not _has_table('ip_history'):
        op.create_table(
            'ip_history',
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('ip_address', sa.Text(), nullable=False),
            sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
            sa.PrimaryKeyConstraint('id')
        )


def downgrade():
    op.drop_table('ip_history')
    op.drop_table('users')
