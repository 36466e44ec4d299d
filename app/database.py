"""팬트리 DB 연결 — 비동기 엔진, 세션 팩토리, ORM 베이스.

Async database wiring for the pantry service. Repositories receive an
AsyncSession from get_db; routers that mutate data commit that session
themselves, everything else is discarded when the request ends.
"""

from collections.abc import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import settings

# 엔진 — SQL 로그는 DEBUG 설정을 따름 (SQL echo follows DEBUG)
engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DEBUG,
    pool_pre_ping=True,
)

# 커밋 후에도 응답 스키마가 속성을 읽을 수 있도록 만료하지 않음
# Committed accounts and pantry rows stay readable for response serialization
async_session: async_sessionmaker[AsyncSession] = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """계정, 역할, 재료, 측정 단위, 팬트리 모델의 공통 베이스."""


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """요청 단위 세션 (One session per request, closed on exit)."""
    async with async_session() as session:
        yield session
