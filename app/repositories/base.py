"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Delete operations over a single async session
bound at construction time, so services receive a ready-to-use repository.

Usage:
    class PantryRepository(BaseRepository[Pantry]):
        def __init__(self, db: AsyncSession) -> None:
            super().__init__(db, Pantry)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.
    Records are looked up by their single-column integer primary key.

    Attributes:
        db: 비동기 데이터베이스 세션 (Async database session)
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Args:
            db: 이 레포지토리가 사용할 세션 (Session used for every query)
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.db: AsyncSession = db
        self.model: type[ModelType] = model

    async def get_by_id(self, record_id: int) -> ModelType | None:
        """기본 키로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        return await self.db.get(self.model, record_id)

    async def get_all(
        self,
        filters: dict[str, Any] | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다.

        Retrieve all records matching the given filters.

        Args:
            filters: 추가 필터 딕셔너리 {'컬럼명': 값}
                     (Additional filter dict {'column_name': value})
            order_by: 정렬 기준 컬럼 (Column to order by)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = select(self.model)

        # 동적 필터 적용 — Dynamic filter application
        if filters:
            for column_name, value in filters.items():
                if hasattr(self.model, column_name) and value is not None:
                    query = query.where(getattr(self.model, column_name) == value)

        if order_by is not None:
            query = query.order_by(order_by)

        result = await self.db.execute(query)
        return result.scalars().all()

    async def create(self, db_obj: ModelType) -> ModelType:
        """새 레코드를 저장합니다.

        Persist a new record and return it with its generated key populated.

        Args:
            db_obj: 저장할 모델 인스턴스 (Transient model instance to persist)

        Returns:
            ModelType: 저장된 레코드 (The persisted record)
        """
        self.db.add(db_obj)
        await self.db.flush()
        return db_obj

    async def delete(self, record_id: int) -> bool:
        """레코드를 삭제합니다.

        Delete a record by its primary key.

        Returns:
            bool: 삭제 성공 여부 (Whether a record was removed)
        """
        db_obj: ModelType | None = await self.get_by_id(record_id)
        if db_obj is None:
            return False

        await self.db.delete(db_obj)
        await self.db.flush()
        return True
