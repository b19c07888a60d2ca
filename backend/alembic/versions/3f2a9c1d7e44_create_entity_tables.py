"""Create users and entity tables

Revision ID: 3f2a9c1d7e44
Revises:
Create Date: 2026-10-17 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# Revision identifiers used by Alembic
revision: str = '3f2a9c1d7e44'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('email', sa.String(), nullable=False),
        sa.Column('google_sub', sa.String(), nullable=True),
        sa.Column('picture_url', sa.String(), nullable=True),
        sa.Column('full_name', sa.String(), nullable=True),
        sa.Column('given_name', sa.String(), nullable=True),
        sa.Column('family_name', sa.String(), nullable=True),
        sa.Column('email_verified', sa.Boolean(), nullable=False),
        sa.Column('locale', sa.String(), nullable=True),
        sa.Column('hosted_domain', sa.String(), nullable=True),
        sa.Column('admin', sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_email'), 'users', ['email'], unique=True)

    op.create_table(
        'games',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('description', sa.String(), nullable=True),
        sa.Column('genre', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_games_id'), 'games', ['id'], unique=False)

    op.create_table(
        'groceries',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('price', sa.String(), nullable=True),
        sa.Column('expiration', sa.String(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_groceries_id'), 'groceries', ['id'], unique=False)

    # Hotels and restaurants share the same shape
    for table in ('hotels', 'restaurants'):
        op.create_table(
            table,
            sa.Column('id', sa.Integer(), nullable=False),
            sa.Column('name', sa.String(), nullable=True),
            sa.Column('address', sa.String(), nullable=True),
            sa.Column('description', sa.String(), nullable=True),
            sa.PrimaryKeyConstraint('id'),
        )
        op.create_index(op.f(f'ix_{table}_id'), table, ['id'], unique=False)

    op.create_table(
        'songs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('artist', sa.String(), nullable=True),
        sa.Column('album', sa.String(), nullable=True),
        sa.Column('year', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_songs_id'), 'songs', ['id'], unique=False)

    op.create_table(
        'ucsbdates',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('quarter_yyyyq', sa.String(), nullable=True),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('local_date_time', sa.DateTime(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_ucsbdates_id'), 'ucsbdates', ['id'], unique=False)
    op.create_index(op.f('ix_ucsbdates_quarter_yyyyq'), 'ucsbdates', ['quarter_yyyyq'], unique=False)

    op.create_table(
        'ucsbdiningcommons',
        sa.Column('code', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=True),
        sa.Column('has_sack_meal', sa.Boolean(), nullable=False),
        sa.Column('has_take_out_meal', sa.Boolean(), nullable=False),
        sa.Column('has_dining_cam', sa.Boolean(), nullable=False),
        sa.Column('latitude', sa.Float(), nullable=True),
        sa.Column('longitude', sa.Float(), nullable=True),
        sa.PrimaryKeyConstraint('code'),
    )
    op.create_index(op.f('ix_ucsbdiningcommons_code'), 'ucsbdiningcommons', ['code'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_ucsbdiningcommons_code'), table_name='ucsbdiningcommons')
    op.drop_table('ucsbdiningcommons')
    op.drop_index(op.f('ix_ucsbdates_quarter_yyyyq'), table_name='ucsbdates')
    op.drop_index(op.f('ix_ucsbdates_id'), table_name='ucsbdates')
    op.drop_table('ucsbdates')
    op.drop_index(op.f('ix_songs_id'), table_name='songs')
    op.drop_table('songs')
    for table in ('restaurants', 'hotels'):
        op.drop_index(op.f(f'ix_{table}_id'), table_name=table)
        op.drop_table(table)
    op.drop_index(op.f('ix_groceries_id'), table_name='groceries')
    op.drop_table('groceries')
    op.drop_index(op.f('ix_games_id'), table_name='games')
    op.drop_table('games')
    op.drop_index(op.f('ix_users_email'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
