"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for Alembic migrations and
relationship resolution.

Modules:
    user: 계정 및 역할 (AppUser, AppRole, app_user_role)
    pantry: 재료, 측정 단위, 팬트리 항목 (Ingredient, Measurement, Pantry)
"""

from app.models.user import AppRole, AppUser, app_user_role
from app.models.pantry import Ingredient, Measurement, Pantry

__all__ = [
    "AppRole", "AppUser", "app_user_role",
    "Ingredient", "Measurement", "Pantry",
]
