"""create_profiles_table

Revision ID: 5b1e2c7a9d04
Revises:
Create Date: 2026-10-18 09:12:44.318207

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '5b1e2c7a9d04'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the profiles table keyed by owner identity."""
    op.create_table('profiles',
        sa.Column('owner_id', sa.UUID(), nullable=False),
        sa.Column('username', sa.String(length=50), nullable=False),
        sa.Column('skin_type', sa.String(length=50), nullable=False),
        sa.Column('goals', sa.JSON(), server_default='[]', nullable=False),
        sa.Column('privacy_mode', sa.SmallInteger(), server_default='2', nullable=False),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.CheckConstraint('privacy_mode IN (1, 2)', name='ck_profiles_privacy_mode'),
        sa.CheckConstraint('length(username) > 0', name='ck_profiles_username_not_empty'),
        sa.CheckConstraint('length(skin_type) > 0', name='ck_profiles_skin_type_not_empty'),
        sa.PrimaryKeyConstraint('owner_id'),
    )


def downgrade() -> None:
    """Drop the profiles table."""
    op.drop_table('profiles')
