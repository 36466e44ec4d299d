"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Each test gets a fresh schema on a single shared aiosqlite connection with
foreign keys enforced.
"""

from collections.abc import AsyncGenerator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.main import app
from app.models import AppRole, AppUser, Ingredient, Measurement
from app.utils.jwt import access_claims, create_access_token
from app.utils.password import hash_password

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite://"

VALID_PASSWORD = "Valid123!"


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    @event.listens_for(eng.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def make_user(
    db: AsyncSession,
    username: str,
    password: str = VALID_PASSWORD,
    enabled: bool = True,
) -> AppUser:
    """커밋된 테스트 계정을 생성합니다. USER 역할은 한 번만 생성됩니다."""
    role = (await db.execute(select(AppRole).where(AppRole.name == "USER"))).scalar_one_or_none()
    user = AppUser(
        username=username,
        password_hash=hash_password(password),
        enabled=enabled,
        roles=[role or AppRole(name="USER")],
    )
    db.add(user)
    await db.commit()
    return user


@pytest_asyncio.fixture
async def cook(db: AsyncSession) -> AppUser:
    """활성 계정을 생성합니다."""
    return await make_user(db, "cook@example.com")


@pytest_asyncio.fixture
async def disabled_user(db: AsyncSession) -> AppUser:
    """비활성 계정을 생성합니다."""
    return await make_user(db, "gone@example.com", enabled=False)


@pytest_asyncio.fixture
async def flour(db: AsyncSession) -> Ingredient:
    ingredient = Ingredient(ingredient_name="flour")
    db.add(ingredient)
    await db.commit()
    return ingredient


@pytest_asyncio.fixture
async def cup(db: AsyncSession) -> Measurement:
    measurement = Measurement(measurement_name="cup")
    db.add(measurement)
    await db.commit()
    return measurement


def make_token(user: AppUser) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token(access_claims(user))


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}
