"""계정 레포지토리 — 계정 조회 및 생성 쿼리.

Account Repository — Lookup and creation queries for app_user.
Role names on a new account are resolved against app_role before insert;
a username collision surfaces as DuplicateKeyError.
"""

from typing import Sequence

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.user import AppRole, AppUser
from app.repositories.base import BaseRepository
from app.utils.exceptions import DuplicateKeyError

# 역할 동시 생성 충돌 시 재시도 횟수 — Attempts when a concurrent insert wins the role name
_ROLE_RESOLVE_ATTEMPTS: int = 2


class AppUserRepository(BaseRepository[AppUser]):
    """app_user 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the app_user table.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, AppUser)

    async def find_all(self) -> Sequence[AppUser]:
        """모든 계정을 ID 순으로 조회합니다 (All accounts ordered by id)."""
        return await self.get_all(order_by=AppUser.app_user_id)

    async def find_by_user_id(self, app_user_id: int) -> AppUser | None:
        return await self.get_by_id(app_user_id)

    async def find_by_username(self, username: str) -> AppUser | None:
        """로그인 아이디로 계정을 조회합니다.

        Retrieve an account by its exact username.

        Args:
            username: 로그인 아이디 (Login name)

        Returns:
            AppUser | None: 역할이 로드된 계정 또는 None (Account with roles, or None)
        """
        query: Select = select(AppUser).where(AppUser.username == username)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def create(self, db_obj: AppUser) -> AppUser:
        """새 계정을 저장합니다.

        Persist a new account together with its role grants.
        Transient AppRole entries are swapped for the stored role of the same
        name; unknown role names are stored as new roles and flushed before the
        account, so an IntegrityError on the account insert always means the
        username is taken.

        Args:
            db_obj: 저장할 계정 (Transient account)

        Returns:
            AppUser: ID가 할당된 계정 (Account with app_user_id assigned)

        Raises:
            DuplicateKeyError: 같은 사용자명이 이미 존재할 때
                               (When the username already exists)
        """
        username: str = db_obj.username
        db_obj.roles = await self._resolve_roles([role.name for role in db_obj.roles])

        try:
            return await super().create(db_obj)
        except IntegrityError as exc:
            # 실패한 flush 이후 세션은 롤백해야 재사용 가능
            await self.db.rollback()
            raise DuplicateKeyError(f"Username '{username}' already exists") from exc

    async def _resolve_roles(self, names: list[str]) -> list[AppRole]:
        """역할 이름을 저장된 역할로 변환하고, 없는 역할은 먼저 저장합니다.

        Map role names to stored roles, inserting missing ones. When a
        concurrent registration stores the same role first, the session is
        rolled back and the lookup retried against the committed row.
        """
        attempts: int = 0
        while True:
            roles: list[AppRole] = [
                (await self._find_role(name)) or AppRole(name=name) for name in names
            ]
            new_roles: list[AppRole] = [role for role in roles if role.app_role_id is None]
            if not new_roles:
                return roles

            self.db.add_all(new_roles)
            try:
                await self.db.flush()
                return roles
            except IntegrityError:
                await self.db.rollback()
                attempts += 1
                if attempts >= _ROLE_RESOLVE_ATTEMPTS:
                    raise

    async def _find_role(self, name: str) -> AppRole | None:
        query: Select = select(AppRole).where(AppRole.name == name)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()
