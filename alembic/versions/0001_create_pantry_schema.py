"""create_pantry_schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00.000000

계정, 역할, 재료, 측정 단위, 팬트리 테이블 생성.
Create account, role, ingredient, measurement, and pantry tables.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # app_role — 역할 이름 (USER, ADMIN)
    op.create_table(
        'app_role',
        sa.Column('app_role_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(50), nullable=False, unique=True),
    )

    # app_user — 로그인 계정 (username 전역 고유)
    op.create_table(
        'app_user',
        sa.Column('app_user_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('username', sa.String(50), nullable=False, unique=True),
        sa.Column('password_hash', sa.String(2048), nullable=False),
        sa.Column('enabled', sa.Boolean(), server_default=sa.text('true'), nullable=False),
    )

    op.create_table(
        'app_user_role',
        sa.Column('app_user_id', sa.Integer(), sa.ForeignKey('app_user.app_user_id', ondelete='CASCADE'), primary_key=True),
        sa.Column('app_role_id', sa.Integer(), sa.ForeignKey('app_role.app_role_id', ondelete='CASCADE'), primary_key=True),
    )

    op.create_table(
        'ingredient',
        sa.Column('ingredient_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('ingredient_name', sa.String(100), nullable=False, unique=True),
    )

    op.create_table(
        'measurement',
        sa.Column('measurement_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('measurement_name', sa.String(50), nullable=False, unique=True),
    )

    # pantry — 사용자 보유 재료 수량
    op.create_table(
        'pantry',
        sa.Column('pantry_id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('app_user_id', sa.Integer(), sa.ForeignKey('app_user.app_user_id', ondelete='CASCADE'), nullable=False),
        sa.Column('ingredient_id', sa.Integer(), sa.ForeignKey('ingredient.ingredient_id'), nullable=False),
        sa.Column('measurement_id', sa.Integer(), sa.ForeignKey('measurement.measurement_id'), nullable=False),
        sa.Column('quantity', sa.Numeric(10, 2), nullable=False),
    )
    op.create_index('ix_pantry_app_user', 'pantry', ['app_user_id'])


def downgrade() -> None:
    op.drop_index('ix_pantry_app_user', table_name='pantry')
    op.drop_table('pantry')
    op.drop_table('measurement')
    op.drop_table('ingredient')
    op.drop_table('app_user_role')
    op.drop_table('app_user')
    op.drop_table('app_role')
