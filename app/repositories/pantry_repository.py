"""팬트리 레포지토리 — 사용자 보유 재료 쿼리.

Pantry Repository — Queries for the pantry table.
An insert rejected by the database (unknown user, ingredient, or unit)
is reported as None rather than raised.
"""

from typing import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.pantry import Pantry
from app.repositories.base import BaseRepository


class PantryRepository(BaseRepository[Pantry]):
    """pantry 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the pantry table.
    """

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Pantry)

    async def find_all(self) -> Sequence[Pantry]:
        return await self.get_all(order_by=Pantry.pantry_id)

    async def find_by_user_id(self, app_user_id: int) -> Sequence[Pantry]:
        """사용자가 보유한 팬트리 항목을 조회합니다.

        Retrieve every pantry entry owned by one account.

        Args:
            app_user_id: 소유자 계정 ID (Owning account id)

        Returns:
            Sequence[Pantry]: 팬트리 항목 목록 (Pantry entries, ordered by id)
        """
        return await self.get_all(
            filters={"app_user_id": app_user_id}, order_by=Pantry.pantry_id
        )

    async def add(self, pantry: Pantry) -> Pantry | None:
        """팬트리 항목을 추가합니다.

        Insert a pantry entry.

        Returns:
            Pantry | None: ID가 할당된 항목, 삽입 거부 시 None
                           (Entry with pantry_id assigned, or None if rejected)
        """
        try:
            return await self.create(pantry)
        except IntegrityError:
            await self.db.rollback()
            return None
