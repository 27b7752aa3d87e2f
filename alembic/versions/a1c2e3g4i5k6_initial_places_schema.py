"""initial_places_schema

Revision ID: a1c2e3g4i5k6
Revises:
Create Date: 2026-10-19 09:00:00.000000

장소 디렉터리 초기 스키마: users, categories, specifications, places,
locations, opening_hours, discounts, favorite_places.
Initial schema for the places directory.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1c2e3g4i5k6'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

user_role = sa.Enum('ROLE_USER', 'ROLE_MODERATOR', 'ROLE_ADMIN', name='user_role')
place_status = sa.Enum('PROPOSED', 'DECLINED', 'APPROVED', 'DELETED', name='place_status')
week_day = sa.Enum(
    'MONDAY', 'TUESDAY', 'WEDNESDAY', 'THURSDAY', 'FRIDAY', 'SATURDAY', 'SUNDAY',
    name='week_day',
)


def upgrade() -> None:
    op.create_table(
        'users',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('email', sa.String(255), nullable=False, unique=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(255), nullable=False),
        sa.Column('role', user_role, nullable=False),
        sa.Column('is_active', sa.Boolean(), server_default=sa.text('true'), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'categories',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
    )

    op.create_table(
        'specifications',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False, unique=True),
    )

    # places — 장소, 물리 삭제 없음 (never physically deleted; status DELETED)
    op.create_table(
        'places',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('phone', sa.String(30), nullable=True),
        sa.Column('email', sa.String(255), nullable=True),
        sa.Column('status', place_status, nullable=False),
        sa.Column('category_id', sa.BigInteger(), sa.ForeignKey('categories.id'), nullable=False),
        sa.Column('author_id', sa.BigInteger(), sa.ForeignKey('users.id', ondelete='SET NULL'), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('modified_date', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_places_status_modified', 'places', ['status', 'modified_date'])

    op.create_table(
        'locations',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('place_id', sa.BigInteger(), sa.ForeignKey('places.id', ondelete='CASCADE'), nullable=False, unique=True),
        sa.Column('address', sa.String(255), nullable=False),
        sa.Column('lat', sa.Float(), nullable=False),
        sa.Column('lng', sa.Float(), nullable=False),
    )
    op.create_index('ix_locations_lat_lng', 'locations', ['lat', 'lng'])

    op.create_table(
        'opening_hours',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('place_id', sa.BigInteger(), sa.ForeignKey('places.id', ondelete='CASCADE'), nullable=False),
        sa.Column('week_day', week_day, nullable=False),
        sa.Column('open_time', sa.Time(), nullable=False),
        sa.Column('close_time', sa.Time(), nullable=False),
    )

    op.create_table(
        'discounts',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('place_id', sa.BigInteger(), sa.ForeignKey('places.id', ondelete='CASCADE'), nullable=False),
        sa.Column('specification_id', sa.BigInteger(), sa.ForeignKey('specifications.id'), nullable=False),
        sa.Column('value', sa.Integer(), nullable=False),
    )
    op.create_index('ix_discounts_place_id', 'discounts', ['place_id'])

    op.create_table(
        'favorite_places',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.BigInteger(), sa.ForeignKey('users.id', ondelete='CASCADE'), nullable=False),
        sa.Column('place_id', sa.BigInteger(), sa.ForeignKey('places.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(100), nullable=False),
        sa.UniqueConstraint('user_id', 'place_id', name='uq_favorite_user_place'),
    )


def downgrade() -> None:
    op.drop_table('favorite_places')
    op.drop_index('ix_discounts_place_id', table_name='discounts')
    op.drop_table('discounts')
    op.drop_table('opening_hours')
    op.drop_index('ix_locations_lat_lng', table_name='locations')
    op.drop_table('locations')
    op.drop_index('ix_places_status_modified', table_name='places')
    op.drop_table('places')
    op.drop_table('specifications')
    op.drop_table('categories')
    op.drop_table('users')
    week_day.drop(op.get_bind(), checkfirst=True)
    place_status.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
