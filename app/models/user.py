"""계정 및 역할 관련 SQLAlchemy ORM 모델 정의.

Account and role SQLAlchemy ORM model definitions.
Accounts carry a set of role names through the app_user_role association table.

Tables:
    - app_role: 역할 (Named roles, e.g. "USER", "ADMIN")
    - app_user: 사용자 계정 (Login accounts, username is globally unique)
    - app_user_role: 계정-역할 매핑 (Account/role association)
"""

from sqlalchemy import Boolean, Column, ForeignKey, Integer, String, Table
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base

# 계정-역할 연결 테이블 — Association table between accounts and roles
app_user_role: Table = Table(
    "app_user_role",
    Base.metadata,
    Column("app_user_id", Integer, ForeignKey("app_user.app_user_id", ondelete="CASCADE"), primary_key=True),
    Column("app_role_id", Integer, ForeignKey("app_role.app_role_id", ondelete="CASCADE"), primary_key=True),
)


class AppRole(Base):
    """역할 모델 — 계정에 부여되는 권한 이름.

    Role model — A named authority granted to accounts.

    Attributes:
        app_role_id: 고유 식별자 (Unique identifier, assigned by storage)
        name: 역할 이름 (Role name, unique, e.g. "USER")
    """

    __tablename__ = "app_role"

    app_role_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 역할 이름 — 전역 고유 (Globally unique role name)
    name: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)


class AppUser(Base):
    """사용자 계정 모델.

    Account model. Created through AppUserService.create and never updated
    by the service layer. Username uniqueness is enforced by the unique
    constraint on the username column.

    Attributes:
        app_user_id: 고유 식별자 (Unique identifier, None until persisted)
        username: 로그인 아이디 (Login name, must contain "@", at most 50 chars)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        enabled: 활성 상태 (Whether the account may be used to authenticate)

    Relationships:
        roles: 부여된 역할 목록 (Granted roles, eagerly loaded)
    """

    __tablename__ = "app_user"

    app_user_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 로그인 아이디 — 전역 고유 (Globally unique login name)
    username: Mapped[str] = mapped_column(String(50), nullable=False, unique=True)
    # 비밀번호 해시 — 평문 저장 금지 (Never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(2048), nullable=False)
    enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    roles: Mapped[list[AppRole]] = relationship(secondary=app_user_role, lazy="selectin")

    @property
    def role_names(self) -> set[str]:
        """부여된 역할 이름 집합 (Set of granted role names)."""
        return {role.name for role in self.roles}
