"""초기 데이터 시드 스크립트 — 역할, 재료, 측정 단위 생성.

Seed script — Creates roles and pantry reference data.
Run this script once to bootstrap the database.

Usage:
    python -m app.seed

Creates:
    - 2개 역할: USER, ADMIN (2 roles)
    - 기본 재료 및 측정 단위 (Starter ingredients and measurement units)
"""

import asyncio
from typing import Any

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import async_session, engine, Base
from app.models import AppRole, Ingredient, Measurement

ROLE_NAMES: list[str] = ["USER", "ADMIN"]

INGREDIENT_NAMES: list[str] = [
    "flour", "sugar", "salt", "butter", "eggs", "milk", "rice", "olive oil",
]

MEASUREMENT_NAMES: list[str] = [
    "cup", "tablespoon", "teaspoon", "gram", "kilogram", "ounce", "pound", "each",
]


async def _add_missing(db: AsyncSession, column: Any, names: list[str]) -> list[str]:
    """테이블에 없는 이름만 추가합니다 (Insert only the names not yet stored)."""
    existing = set((await db.execute(select(column).where(column.in_(names)))).scalars())
    missing: list[str] = [name for name in names if name not in existing]
    model = column.class_
    db.add_all([model(**{column.key: name}) for name in missing])
    return missing


async def seed_reference_data(db: AsyncSession) -> dict[str, list[str]]:
    """역할, 재료, 측정 단위를 테이블별로 보충합니다.

    Fill in roles, ingredients, and measurement units table by table, so a
    role created by an earlier registration does not block the other tables.

    Returns:
        dict: 테이블별 새로 추가된 이름 (Newly inserted names per table)
    """
    added: dict[str, list[str]] = {
        "roles": await _add_missing(db, AppRole.name, ROLE_NAMES),
        "ingredients": await _add_missing(db, Ingredient.ingredient_name, INGREDIENT_NAMES),
        "measurements": await _add_missing(db, Measurement.measurement_name, MEASUREMENT_NAMES),
    }
    await db.commit()
    return added


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data. Creates tables if they don't exist.

    Idempotent: 이미 있는 이름은 건너뜁니다 (Existing names are skipped).
    """
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        added = await seed_reference_data(db)

    if not any(added.values()):
        print("Already seeded. Skipping.")
        return

    print("Seed complete.")
    print(f"  Roles: {', '.join(added['roles']) or '-'}")
    print(f"  Ingredients: {len(added['ingredients'])}")
    print(f"  Measurement units: {len(added['measurements'])}")


if __name__ == "__main__":
    asyncio.run(seed())
