"""팬트리 관련 SQLAlchemy ORM 모델 정의.

Pantry SQLAlchemy ORM model definitions.
A pantry row records how much of one ingredient, in one measurement unit,
a user has on hand.

Tables:
    - ingredient: 재료 (Ingredient reference data)
    - measurement: 측정 단위 (Measurement unit reference data, e.g. "cup")
    - pantry: 사용자 보유 재료 (Ingredient quantities owned by a user)
"""

from sqlalchemy import ForeignKey, Index, Integer, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base

# 수량 소수 자릿수 — Decimal places kept for pantry quantities
QUANTITY_SCALE: int = 2


class Ingredient(Base):
    """재료 모델 (Ingredient reference model)."""

    __tablename__ = "ingredient"

    ingredient_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    ingredient_name: Mapped[str] = mapped_column(String(100), nullable=False, unique=True)


class Measurement(Base):
    """측정 단위 모델 (Measurement unit reference model)."""

    __tablename__ = "measurement"

    measurement_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    measurement_name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)


class Pantry(Base):
    """팬트리 항목 모델 — 사용자가 보유한 재료 수량.

    Pantry entry model — An ingredient quantity owned by a user.
    Created through PantryService.add and removed by id; never updated.

    Attributes:
        pantry_id: 고유 식별자 (Unique identifier, None until persisted)
        app_user_id: 소유자 FK (Owning account, required)
        ingredient_id: 재료 FK (Ingredient, required and positive)
        measurement_id: 측정 단위 FK (Measurement unit, required and positive)
        quantity: 수량 (Quantity on hand, positive after rounding to QUANTITY_SCALE)
    """

    __tablename__ = "pantry"
    __table_args__ = (Index("ix_pantry_app_user", "app_user_id"),)

    pantry_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 소유자 FK — 계정 삭제 시 함께 삭제 (CASCADE on account deletion)
    app_user_id: Mapped[int] = mapped_column(Integer, ForeignKey("app_user.app_user_id", ondelete="CASCADE"), nullable=False)
    ingredient_id: Mapped[int] = mapped_column(Integer, ForeignKey("ingredient.ingredient_id"), nullable=False)
    measurement_id: Mapped[int] = mapped_column(Integer, ForeignKey("measurement.measurement_id"), nullable=False)
    # 수량 — 소수 허용 (Fractional quantities allowed, e.g. 0.5 cup)
    quantity: Mapped[float] = mapped_column(Numeric(10, QUANTITY_SCALE, asdecimal=False), nullable=False)
