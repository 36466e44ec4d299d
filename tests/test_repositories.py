"""레포지토리 테스트 — SQLite 세션 기반.

Repository tests against an in-memory SQLite session: role resolution,
duplicate usernames, pantry inserts rejected by foreign keys, and deletes.
"""

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import AppRole, AppUser, Ingredient, Measurement, Pantry
from app.repositories.app_user_repository import AppUserRepository
from app.repositories.pantry_repository import PantryRepository
from app.utils.exceptions import DuplicateKeyError


def new_user(username: str, *role_names: str) -> AppUser:
    return AppUser(
        username=username,
        password_hash="hashed",
        enabled=True,
        roles=[AppRole(name=name) for name in role_names or ("USER",)],
    )


class TestAppUserRepository:
    """계정 레포지토리."""

    async def test_create_assigns_id(self, db: AsyncSession):
        repo = AppUserRepository(db)
        created = await repo.create(new_user("a@example.com"))

        assert created.app_user_id is not None
        assert created.app_user_id > 0
        assert created.role_names == {"USER"}

    async def test_roles_are_shared_between_users(self, db: AsyncSession):
        repo = AppUserRepository(db)
        await repo.create(new_user("a@example.com"))
        await repo.create(new_user("b@example.com", "USER", "ADMIN"))
        await db.commit()

        count = (await db.execute(select(func.count()).select_from(AppRole))).scalar()
        assert count == 2

    async def test_find_by_username(self, db: AsyncSession, cook: AppUser):
        repo = AppUserRepository(db)

        found = await repo.find_by_username("cook@example.com")
        assert found is not None
        assert found.app_user_id == cook.app_user_id
        assert await repo.find_by_username("COOK@example.com") is None

    async def test_find_all_and_by_id(self, db: AsyncSession, cook: AppUser, disabled_user: AppUser):
        repo = AppUserRepository(db)

        users = await repo.find_all()
        assert [u.username for u in users] == ["cook@example.com", "gone@example.com"]
        assert (await repo.find_by_user_id(cook.app_user_id)).username == "cook@example.com"
        assert await repo.find_by_user_id(9999) is None

    async def test_duplicate_username_raises(self, db: AsyncSession, cook: AppUser):
        repo = AppUserRepository(db)

        with pytest.raises(DuplicateKeyError):
            await repo.create(new_user("cook@example.com"))

        # 롤백 이후에도 세션은 재사용 가능 — session is usable after the rollback
        assert await repo.find_by_username("cook@example.com") is not None

    async def test_role_inserted_concurrently_is_reused(self, db: AsyncSession, cook: AppUser, monkeypatch):
        """다른 가입이 역할을 먼저 저장해도 새 사용자명은 중복으로 보고되지 않음."""
        repo = AppUserRepository(db)
        find_role = repo._find_role
        lookups: list[str] = []

        async def stale_first_lookup(name: str) -> AppRole | None:
            lookups.append(name)
            return None if len(lookups) == 1 else await find_role(name)

        monkeypatch.setattr(repo, "_find_role", stale_first_lookup)

        created = await repo.create(new_user("second@example.com"))
        await db.commit()

        assert created.app_user_id > 0
        assert created.role_names == {"USER"}
        assert lookups == ["USER", "USER"]
        count = (await db.execute(select(func.count()).select_from(AppRole))).scalar()
        assert count == 1

    async def test_role_conflict_is_not_duplicate_username(self, db: AsyncSession, cook: AppUser, monkeypatch):
        repo = AppUserRepository(db)

        async def never_found(name: str) -> AppRole | None:
            return None

        monkeypatch.setattr(repo, "_find_role", never_found)

        with pytest.raises(IntegrityError):
            await repo.create(new_user("second@example.com"))


class TestPantryRepository:
    """팬트리 레포지토리."""

    async def test_add_and_find(
        self, db: AsyncSession, cook: AppUser, flour: Ingredient, cup: Measurement
    ):
        repo = PantryRepository(db)
        added = await repo.add(Pantry(
            app_user_id=cook.app_user_id,
            ingredient_id=flour.ingredient_id,
            measurement_id=cup.measurement_id,
            quantity=2.5,
        ))
        await db.commit()

        assert added is not None
        assert added.pantry_id > 0
        mine = await repo.find_by_user_id(cook.app_user_id)
        assert [p.pantry_id for p in mine] == [added.pantry_id]
        assert mine[0].quantity == 2.5
        assert await repo.find_by_user_id(cook.app_user_id + 100) == []
        assert len(await repo.find_all()) == 1

    async def test_add_unknown_ingredient_returns_none(
        self, db: AsyncSession, cook: AppUser, cup: Measurement
    ):
        repo = PantryRepository(db)
        user_id = cook.app_user_id
        measurement_id = cup.measurement_id

        added = await repo.add(Pantry(
            app_user_id=user_id,
            ingredient_id=999,
            measurement_id=measurement_id,
            quantity=1,
        ))

        assert added is None
        assert await repo.find_all() == []

    async def test_delete(
        self, db: AsyncSession, cook: AppUser, flour: Ingredient, cup: Measurement
    ):
        repo = PantryRepository(db)
        added = await repo.add(Pantry(
            app_user_id=cook.app_user_id,
            ingredient_id=flour.ingredient_id,
            measurement_id=cup.measurement_id,
            quantity=1,
        ))
        await db.commit()

        assert await repo.delete(added.pantry_id) is True
        assert await repo.delete(added.pantry_id) is False
        assert await repo.find_all() == []


class TestPantrySchema:
    """ORM 메타데이터와 마이그레이션 일치."""

    def test_user_index_declared(self):
        indexes = {index.name: [c.name for c in index.columns] for index in Pantry.__table__.indexes}
        assert indexes == {"ix_pantry_app_user": ["app_user_id"]}
